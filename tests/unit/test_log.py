import logging
import os
import sys
import tempfile
import unittest
from logging.handlers import RotatingFileHandler

# Add parent directory to path to import cookiepick
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from cookiepick.log import LOGGER_NAME, setup_logging


class TestSetupLogging(unittest.TestCase):
    """Test logging configuration"""

    def tearDown(self):
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    def test_defaults_to_warning_on_stderr(self):
        logger = setup_logging(env={})
        self.assertEqual(logger.level, logging.WARNING)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIs(logger.handlers[0].stream, sys.stderr)

    def test_unknown_level_falls_back_to_warning(self):
        logger = setup_logging(env={"COOKIEPICK_LOG_LEVEL": "verbose"})
        self.assertEqual(logger.level, logging.WARNING)

    def test_level_from_environment(self):
        logger = setup_logging(env={"COOKIEPICK_LOG_LEVEL": "debug"})
        self.assertEqual(logger.level, logging.DEBUG)

    def test_rotating_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, "cookiepick.log")
            logger = setup_logging(env={"COOKIEPICK_LOG_FILE": log_file})

            file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
            self.assertEqual(len(file_handlers), 1)

            logging.getLogger("cookiepick.test").warning("written to file")
            file_handlers[0].flush()
            with open(log_file, encoding="utf-8") as f:
                self.assertIn("cookiepick.test - WARNING - written to file", f.read())

            for handler in file_handlers:
                logger.removeHandler(handler)
                handler.close()

    def test_calling_twice_does_not_duplicate_handlers(self):
        setup_logging(env={})
        logger = setup_logging(env={})
        self.assertEqual(len(logger.handlers), 1)


if __name__ == '__main__':
    unittest.main()
