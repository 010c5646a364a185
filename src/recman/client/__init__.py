"""HTTP clients for the Recman API.

Classes:
    :class:`RecmanApi` -- one request per call, backed by :class:`httpx.Client`.
    :class:`CachedRecmanApi` -- the same operations, memoised in a
    :class:`~recman.cache.CacheStore` to stay under the daily quota.

Example::

    from recman.cache import DiskCacheStore
    from recman.client import CachedRecmanApi

    with CachedRecmanApi("my-api-key", DiskCacheStore("/tmp/recman")) as api:
        candidates = api.get_candidate_list(page=1)
"""

from recman.client.base import RecmanApi, prepare_fields, raise_for_api_error
from recman.client.cached import CachedRecmanApi

__all__ = ["RecmanApi", "CachedRecmanApi", "prepare_fields", "raise_for_api_error"]
