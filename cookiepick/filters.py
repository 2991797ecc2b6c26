"""
Predicates applied to cookie records while reading a store.

A filter is any callable taking a CookieRecord and returning a bool.
"""


def valid(cookie):
    """Keep cookies that have an expiry in the future."""
    return not cookie.is_expired()


def domain_contains(substring):
    """Keep cookies whose domain contains `substring` (case-sensitive)."""
    def _filter(cookie):
        return substring in cookie.domain

    # Stores use this to narrow their query before filtering
    _filter.domain_hint = substring
    return _filter


def build_filters(domain, show_expired=False):
    """Filters for one read: not expired (unless show_expired), then the domain match."""
    filters = []
    # only filter out expired cookies unless they were asked for
    if not show_expired:
        filters.append(valid)
    filters.append(domain_contains(domain))
    return filters


def matches(cookie, filters):
    """True when the cookie passes every filter."""
    return all(f(cookie) for f in filters)
