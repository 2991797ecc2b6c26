"""
Logging setup. Results go to stdout, so log records only ever go to stderr
and, when configured, a rotating log file.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "cookiepick"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level=None, log_file=None, env=None):
    """Configure the cookiepick logger and return it.

    An unknown level name falls back to WARNING.
    """
    env = os.environ if env is None else env
    if level is None:
        level = env.get("COOKIEPICK_LOG_LEVEL", "WARNING").upper()
    if isinstance(level, str) and not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    if log_file is None:
        log_file = env.get("COOKIEPICK_LOG_FILE") or None

    log_formatter = logging.Formatter(LOG_FORMAT)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    logger.addHandler(console_handler)

    if log_file:
        # 5MB per file, keep 5 backup files
        log_handler = RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=5, encoding='utf-8')
        log_handler.setFormatter(log_formatter)
        logger.addHandler(log_handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger
