"""
Output formats for the collected cookies.

JSON output is compact with sorted keys so the same cookies always print the
same line. Maps keyed by cookie name keep the last cookie of a given name.
"""

import json
from datetime import datetime, timezone

from .errors import EmptyValueError, NotFoundError, SerializationError

# container ids only exist in firefox
CONTAINER_BROWSERS = ("firefox",)


def _dumps(data):
    try:
        return json.dumps(data, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to create JSON: {e}") from e


def _format_expires(expires):
    if expires is None:
        return None
    try:
        return datetime.fromtimestamp(expires, tz=timezone.utc).isoformat()
    except (ValueError, OverflowError, OSError):
        # beyond what datetime can hold, e.g. an expiry stored in milliseconds
        return expires


def cookies_to_json(cookies):
    """Map each cookie name to its value."""
    return _dumps({cookie.name: cookie.value for cookie in cookies})


def cookie_to_dict(cookie, browser):
    """Every field of a cookie; `container` only for browsers that have one."""
    data = {
        "name": cookie.name,
        "value": cookie.value,
        "domain": cookie.domain,
        "path": cookie.path,
        "expires": _format_expires(cookie.expires),
        "secure": cookie.secure,
        "http_only": cookie.http_only,
    }
    if browser in CONTAINER_BROWSERS:
        data["container"] = cookie.container
    return data


def full_cookies_to_json(cookies, browser):
    """Map each cookie name to all of its fields."""
    return _dumps({cookie.name: cookie_to_dict(cookie, browser) for cookie in cookies})


def cookie_value(cookies, name):
    """Return the value of the first cookie named exactly `name`."""
    for cookie in cookies:
        if cookie.name == name:
            if cookie.value == "":
                raise EmptyValueError(f"failed to get value for cookie {name}: cookie exists but has an empty value")
            return cookie.value
    raise NotFoundError(f"failed to get value for cookie {name}: cookie does not exist")


def curl_command(cookies, domain):
    """Build a curl command sending every cookie, duplicates included."""
    cookie_string = ";".join(f"{cookie.name}={cookie.value}" for cookie in cookies)
    return f"curl -H 'Cookie: {cookie_string}' 'https://{domain}'"


def store_errors_to_json(store_errors):
    """Map the 1-based position of each store error to its message."""
    return _dumps({str(i): error for i, error in enumerate(store_errors, start=1)})


def render(options, cookies):
    """Format cookies the way the options ask for: name, curl, full, or name/value JSON."""
    if options.name:
        return cookie_value(cookies, options.name)
    if options.curl:
        return curl_command(cookies, options.domain)
    if options.full:
        return full_cookies_to_json(cookies, options.browser)
    return cookies_to_json(cookies)
