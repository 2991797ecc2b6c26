"""
Errors raised by cookiepick.
"""


class CookiePickError(Exception):
    pass


class ConfigError(CookiePickError):
    """Invalid or missing command-line flags."""


class StoreReadError(CookiePickError):
    """A single cookie store could not be read. Never fatal on its own."""


class NotFoundError(CookiePickError):
    pass


class EmptyValueError(CookiePickError):
    """The requested cookie exists but its value is empty."""


class SerializationError(CookiePickError):
    pass
