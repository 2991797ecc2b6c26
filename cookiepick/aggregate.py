"""
Collect cookies for one browser across all of its stores.
"""

import logging
from contextlib import ExitStack

from .errors import NotFoundError, StoreReadError
from .filters import build_filters
from .stores import find_all_cookie_stores

logger = logging.getLogger(__name__)


def get_cookies(browser, domain, show_expired=False, stores=None):
    """Read the cookies of every store of `browser` whose domain contains `domain`.

    Returns a (cookies, store_errors) tuple. Cookies keep the store
    enumeration order and each store's own order. A store that cannot be read
    adds its message to store_errors and is otherwise skipped.

    Every enumerated store is closed exactly once, whether it matched the
    browser, failed, or was never reached because an earlier read raised.
    """
    if stores is None:
        stores = find_all_cookie_stores()

    cookies = []
    store_errors = []

    with ExitStack() as stack:
        for store in stores:
            stack.callback(store.close)

        for store in stores:
            if store.browser != browser:
                continue

            filters = build_filters(domain, show_expired)
            # Errors reading cookie stores are usually safe to ignore, e.g. a
            # profile that was never used
            try:
                store_cookies = store.read_cookies(*filters)
            except StoreReadError as e:
                logger.debug(f"Skipping cookie store: {e}")
                store_errors.append(str(e))
                continue

            cookies.extend(store_cookies)

    if not cookies:
        raise NotFoundError(f"no cookies for browser {browser} and domain {domain} found.")

    return cookies, store_errors
