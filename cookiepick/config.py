"""
Command-line flags and environment configuration.
"""

import argparse
import os
import sys
from dataclasses import dataclass

from . import __version__
from .errors import ConfigError
from .stores import SUPPORTED_BROWSERS

DEFAULT_BROWSER = "chrome"


@dataclass
class Options:
    domain: str = ""
    browser: str = DEFAULT_BROWSER
    curl: bool = False
    expired: bool = False
    full: bool = False
    name: str = ""
    debug: bool = False


def build_parser(default_browser=DEFAULT_BROWSER):
    parser = argparse.ArgumentParser(
        prog="cookiepick",
        description="Obtain cookies from your browser stores",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Supported browsers: {', '.join(SUPPORTED_BROWSERS)}

Examples:
  cookiepick -d example.com                # name/value JSON of valid cookies
  cookiepick -d example.com -b firefox -f  # every field of each cookie
  cookiepick -d example.com -n sessionid   # just one cookie's value
  cookiepick -d example.com -c             # ready-to-run curl command
        """
    )

    parser.add_argument("-d", "--domain", default="",
                        help="cookie domain filter (partial). Required")
    parser.add_argument("-b", "--browser", default=default_browser,
                        help=f"the browser you want to obtain cookies from (default: {default_browser})")
    parser.add_argument("-c", "--curl", action="store_true",
                        help="outputs a curl command using all valid existing cookies for domain")
    parser.add_argument("-e", "--expired", action="store_true",
                        help="show expired cookies")
    parser.add_argument("-f", "--full", action="store_true",
                        help="outputs full information about each cookie")
    parser.add_argument("-n", "--name", default="",
                        help="prints only the value of the given cookie (exact name match)")
    parser.add_argument("-l", "--log-debug", dest="debug", action="store_true",
                        help="logs cookie store errors, which are usually safe to ignore")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv=None, env=None):
    """Parse command-line flags into Options.

    Prints usage and exits with status 0 for --help or when no flags are given.
    Raises ConfigError for a missing domain or conflicting flags.
    """
    if argv is None:
        argv = sys.argv[1:]
    env = os.environ if env is None else env

    parser = build_parser(env.get("COOKIEPICK_BROWSER") or DEFAULT_BROWSER)
    # no flags at all, even with stray positional arguments, means usage
    if not any(arg.startswith("-") for arg in argv):
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(argv)

    if not args.domain:
        raise ConfigError("incorrect flag usage: flag domain is required, use either -d $DOMAIN or --domain $DOMAIN")

    if args.curl and args.name:
        raise ConfigError("incorrect flag usage: flag 'curl' and flag 'name' are mutually exclusive")

    return Options(
        domain=args.domain,
        browser=args.browser,
        curl=args.curl,
        expired=args.expired,
        full=args.full,
        name=args.name,
        debug=args.debug,
    )
