"""
Cookie records read from a browser store.
"""

import time
from dataclasses import dataclass
from typing import Optional


@dataclass
class CookieRecord:
    name: str
    value: str
    domain: str
    path: str = "/"
    expires: Optional[float] = None
    secure: bool = False
    http_only: bool = False
    container: str = ""

    @classmethod
    def from_cookie(cls, cookie):
        """Build a record from an http.cookiejar.Cookie as returned by browser_cookie3."""
        http_only = cookie.has_nonstandard_attr("HTTPOnly") or cookie.has_nonstandard_attr("HttpOnly")
        container = cookie.get_nonstandard_attr("userContextId") or ""
        return cls(
            name=cookie.name,
            value=cookie.value or "",
            domain=cookie.domain or "",
            path=cookie.path or "/",
            # 0 and None both mean a session cookie
            expires=cookie.expires or None,
            secure=bool(cookie.secure),
            http_only=http_only,
            container=str(container),
        )

    def is_expired(self, now=None):
        if self.expires is None:
            return True
        if now is None:
            now = time.time()
        return self.expires <= now
