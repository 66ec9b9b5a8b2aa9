"""Cache keys for statement responses.

A statement depends on its invoice and on the plays it references. Both
are versioned, and both versions are part of every key: invoice changes bump
that invoice's version, play changes bump the catalog version. A payload
priced from old rows can only land under a key nobody reads any more.

A version that was evicted restarts from the current time, never from a
value an earlier key may have used.
"""

import time

from django.core.cache import cache

CATALOG_VERSION_KEY = "statements:catalog_version"


def invoice_version_key(invoice_id: int) -> str:
    return f"invoices:{invoice_id}:version"


def _fresh_version() -> int:
    return time.time_ns()


def _current_version(key: str) -> int:
    version = cache.get(key)
    if version is None:
        cache.add(key, _fresh_version(), timeout=None)
        version = cache.get(key)
    return version


def _bump_version(key: str) -> None:
    try:
        cache.incr(key)
    except ValueError:
        cache.set(key, _fresh_version(), timeout=None)


def catalog_version() -> int:
    return _current_version(CATALOG_VERSION_KEY)


def invoice_version(invoice_id: int) -> int:
    return _current_version(invoice_version_key(invoice_id))


def bump_catalog_version() -> None:
    _bump_version(CATALOG_VERSION_KEY)


def statement_key(invoice_id: int) -> str:
    return f"invoices:{invoice_id}:statement:v{catalog_version()}.{invoice_version(invoice_id)}"


def invalidate_statement(invoice_id: int) -> None:
    _bump_version(invoice_version_key(invoice_id))
