"""Response caching for recman.

This package provides the pieces :class:`~recman.client.CachedRecmanApi`
is built from:

- :func:`make_cache_key` -- pure key derivation from a key prefix, the
  operation name and the call's arguments.
- :class:`CacheStore` -- the ``get`` / ``set`` protocol a store must satisfy.
- :class:`DiskCacheStore` -- a :mod:`diskcache` backed store.
"""

from recman.cache.keys import hash_arguments, make_cache_key
from recman.cache.store import CacheStore, DiskCacheStore, ttl_to_seconds

__all__ = [
    "CacheStore",
    "DiskCacheStore",
    "hash_arguments",
    "make_cache_key",
    "ttl_to_seconds",
]
