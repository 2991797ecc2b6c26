"""
Cookie stores found on this machine.

Reading and decrypting the browser databases is left to browser_cookie3; this
module only finds the per-profile cookie files and wraps each one in a
CookieStore that can be read with filters and closed.
"""

import logging
import os
import sys
from pathlib import Path

import browser_cookie3

from .errors import StoreReadError
from .filters import matches
from .records import CookieRecord

logger = logging.getLogger(__name__)

# Chromium keeps one directory per profile ("Default", "Profile 1", ...) while
# Opera uses the root itself as its only profile.
CHROMIUM_PATTERNS = ("Cookies", "Network/Cookies", "*/Cookies", "*/Network/Cookies")
FIREFOX_PATTERNS = ("*/cookies.sqlite",)

# browser -> (loader, file patterns, {platform: [roots]})
# Roots starting with "~" are relative to the home directory, "%NAME%" to an
# environment variable.
BROWSERS = {
    "chrome": (browser_cookie3.Chrome, CHROMIUM_PATTERNS, {
        "linux": ["~/.config/google-chrome", "~/.var/app/com.google.Chrome/config/google-chrome"],
        "darwin": ["~/Library/Application Support/Google/Chrome"],
        "win32": ["%LOCALAPPDATA%/Google/Chrome/User Data"],
    }),
    "chromium": (browser_cookie3.Chromium, CHROMIUM_PATTERNS, {
        "linux": ["~/.config/chromium", "~/snap/chromium/common/chromium"],
        "darwin": ["~/Library/Application Support/Chromium"],
        "win32": ["%LOCALAPPDATA%/Chromium/User Data"],
    }),
    "brave": (browser_cookie3.Brave, CHROMIUM_PATTERNS, {
        "linux": ["~/.config/BraveSoftware/Brave-Browser"],
        "darwin": ["~/Library/Application Support/BraveSoftware/Brave-Browser"],
        "win32": ["%LOCALAPPDATA%/BraveSoftware/Brave-Browser/User Data"],
    }),
    "edge": (browser_cookie3.Edge, CHROMIUM_PATTERNS, {
        "linux": ["~/.config/microsoft-edge"],
        "darwin": ["~/Library/Application Support/Microsoft Edge"],
        "win32": ["%LOCALAPPDATA%/Microsoft/Edge/User Data"],
    }),
    "opera": (browser_cookie3.Opera, CHROMIUM_PATTERNS, {
        "linux": ["~/.config/opera"],
        "darwin": ["~/Library/Application Support/com.operasoftware.Opera"],
        "win32": ["%APPDATA%/Opera Software/Opera Stable"],
    }),
    "vivaldi": (browser_cookie3.Vivaldi, CHROMIUM_PATTERNS, {
        "linux": ["~/.config/vivaldi"],
        "darwin": ["~/Library/Application Support/Vivaldi"],
        "win32": ["%LOCALAPPDATA%/Vivaldi/User Data"],
    }),
    "firefox": (browser_cookie3.Firefox, FIREFOX_PATTERNS, {
        "linux": ["~/.mozilla/firefox", "~/snap/firefox/common/.mozilla/firefox"],
        "darwin": ["~/Library/Application Support/Firefox/Profiles"],
        "win32": ["%APPDATA%/Mozilla/Firefox/Profiles"],
    }),
    "librewolf": (browser_cookie3.LibreWolf, FIREFOX_PATTERNS, {
        "linux": ["~/.librewolf"],
        "darwin": ["~/Library/Application Support/librewolf/Profiles"],
        "win32": ["%APPDATA%/librewolf/Profiles"],
    }),
}

SUPPORTED_BROWSERS = tuple(BROWSERS)


class CookieStore:
    """One browser profile's cookie database."""

    def __init__(self, browser, cookie_file, loader):
        self._browser = browser
        self.cookie_file = cookie_file
        self._loader = loader
        self.closed = False

    @property
    def browser(self):
        return self._browser

    def __repr__(self):
        return f"<CookieStore {self._browser} {self.cookie_file or 'autodetect'}>"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def read_cookies(self, *filters):
        """Read every cookie in the store that passes all of the filters."""
        if self.closed:
            raise StoreReadError(f"{self!r} is closed")

        # browser_cookie3 narrows its query with a case-insensitive LIKE, the
        # filters below do the exact match
        domain_name = ""
        for f in filters:
            domain_name = getattr(f, "domain_hint", domain_name)

        location = self.cookie_file or f"default {self._browser} profile"
        try:
            jar = self._loader(cookie_file=self.cookie_file, domain_name=domain_name).load()
            records = [CookieRecord.from_cookie(cookie) for cookie in jar]
        except Exception as e:
            raise StoreReadError(f"{location}: {e}") from e

        cookies = [record for record in records if matches(record, filters)]
        logger.debug(f"Read {len(cookies)} of {len(records)} cookies from {location}")
        return cookies

    def close(self):
        if self.closed:
            return
        self.closed = True
        self._loader = None


def _current_platform():
    if sys.platform.startswith("linux"):
        return "linux"
    return sys.platform


def _expand_root(root, home, env):
    if root.startswith("~"):
        return Path(home) / root[2:]
    if root.startswith("%"):
        name, _, rest = root[1:].partition("%")
        base = env.get(name)
        if not base:
            return None
        return Path(base) / rest.lstrip("/")
    return Path(root)


def find_cookie_files(browser, home=None, platform=None, env=None):
    """Return the sorted cookie database paths of every profile of a browser."""
    _, patterns, roots = BROWSERS[browser]
    home = home or Path.home()
    platform = platform or _current_platform()
    env = os.environ if env is None else env

    found = []
    for root in roots.get(platform, []):
        base = _expand_root(root, home, env)
        if base is None or not base.is_dir():
            continue
        for pattern in patterns:
            for path in sorted(base.glob(pattern)):
                if path.is_file() and path not in found:
                    found.append(path)
    return found


def find_all_cookie_stores(home=None, platform=None, env=None):
    """Enumerate cookie stores of every supported browser, in a fixed order."""
    stores = []
    for browser, (loader, _, _) in BROWSERS.items():
        files = find_cookie_files(browser, home=home, platform=platform, env=env)
        if not files:
            # let browser_cookie3 look for it; a missing profile becomes a store error
            stores.append(CookieStore(browser, None, loader))
            continue
        for path in files:
            stores.append(CookieStore(browser, str(path), loader))
    logger.debug(f"Found {len(stores)} cookie stores")
    return stores
