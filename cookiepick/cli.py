#!/usr/bin/env python3
"""
CLI entry point for cookiepick.
"""

import logging
import signal
import sys

from dotenv import load_dotenv

from .aggregate import get_cookies
from .config import parse_args
from .errors import CookiePickError
from .formatters import render, store_errors_to_json
from .log import setup_logging

logger = logging.getLogger(__name__)


def run(argv=None, stores=None, out=None):
    """Parse flags, collect cookies and print the result.

    Output is only written once every step has succeeded, so a failure never
    leaves a partial result on stdout.
    """
    if out is None:
        out = sys.stdout

    options = parse_args(argv)
    if options.debug:
        logging.getLogger("cookiepick").setLevel(logging.DEBUG)

    cookies, store_errors = get_cookies(
        options.browser, options.domain, show_expired=options.expired, stores=stores
    )

    lines = []
    if options.debug:
        lines.append(store_errors_to_json(store_errors))
    lines.append(render(options, cookies))

    for line in lines:
        print(line, file=out)


def signal_handler(signum, frame):
    """Handle interrupt signals."""
    sys.exit(130)


def main(argv=None):
    """Main entry point for the cookiepick command."""
    load_dotenv()
    setup_logging()

    signal.signal(signal.SIGINT, signal_handler)

    try:
        run(argv)
    except CookiePickError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
