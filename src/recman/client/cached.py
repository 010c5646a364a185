"""Caching decorator over :class:`~recman.client.base.RecmanApi`.

Recman enforces a quota of 200 requests per day, so
:class:`CachedRecmanApi` memoises every successful response in an injected
:class:`~recman.cache.CacheStore`. Each operation passes its own name and
argument tuple to :meth:`RecmanApi._request`; the cache key is derived from
those with :func:`~recman.cache.make_cache_key`, so ``get_candidate_list(1)``
and ``get_candidate_list(2)`` never share an entry.

Behaviour worth knowing:

- Disabling the cache only skips the *read*. Fresh responses are still
  written back, so the cache stays warm for clients that have it enabled.
- A cached value that is falsy (``[]``, ``{}``) is treated like a miss and
  refetched.
- Failures are never cached; an existing entry is left untouched when a
  refresh fails.
"""

from __future__ import annotations

import copy
from typing import Any, Optional

import httpx

from recman.cache import CacheStore, make_cache_key
from recman.cache.store import Ttl
from recman.client.base import RecmanApi
from recman.models import (
    DEFAULT_BASE_URL,
    DEFAULT_CACHE_KEY_PREFIX,
    DEFAULT_CACHE_TTL,
    RequestConfig,
)
from recman.output import get_output


class CachedRecmanApi(RecmanApi):
    """:class:`RecmanApi` with response caching.

    Args:
        api_key: Your Recman API key.
        cache: Store used for cached responses.
        http_client: Optional :class:`httpx.Client`, see :class:`RecmanApi`.
        base_url: The Recman endpoint.
        request_config: Settings for a client-owned :class:`httpx.Client`.
        cache_expire: Entry lifetime in seconds or as a
            :class:`~datetime.timedelta`. ``None`` stores entries without
            an expiry.
        cache_key_prefix: Prefix for every cache key. Only change it when
            several configurations share one store.
        cache_enabled: Whether cached values are read at all.
        owns_cache: Close *cache* in :meth:`close`. Set this when the
            store was created for this client alone.

    Example::

        from recman.cache import DiskCacheStore

        store = DiskCacheStore(get_cache_dir())
        api = CachedRecmanApi("my-api-key", store)
        api.get_branch_list()   # hits the API
        api.get_branch_list()   # served from the cache
    """

    def __init__(
        self,
        api_key: str,
        cache: CacheStore,
        http_client: Optional[httpx.Client] = None,
        base_url: str = DEFAULT_BASE_URL,
        request_config: Optional[RequestConfig] = None,
        cache_expire: Ttl = DEFAULT_CACHE_TTL,
        cache_key_prefix: str = DEFAULT_CACHE_KEY_PREFIX,
        cache_enabled: bool = True,
        owns_cache: bool = False,
    ) -> None:
        super().__init__(
            api_key,
            http_client=http_client,
            base_url=base_url,
            request_config=request_config,
        )
        self._cache = cache
        self._cache_expire = cache_expire
        self._cache_key_prefix = cache_key_prefix
        self._cache_enabled = cache_enabled
        self._owns_cache = owns_cache

    @property
    def cache(self) -> CacheStore:
        return self._cache

    @property
    def cache_enabled(self) -> bool:
        return self._cache_enabled

    @property
    def cache_expire(self) -> Ttl:
        return self._cache_expire

    @property
    def cache_key_prefix(self) -> str:
        return self._cache_key_prefix

    def close(self) -> None:
        """Close the HTTP client and the store if this instance owns them."""
        super().close()
        if self._owns_cache:
            close_store = getattr(self._cache, "close", None)
            if close_store is not None:
                close_store()

    # ------------------------------------------------------------------ #
    # Enabling / disabling
    # ------------------------------------------------------------------ #

    def disable_cache(self) -> CachedRecmanApi:
        """Stop reading from the cache until :meth:`enable_cache` is called.

        Mutates this instance. Prefer :meth:`with_cache_disabled` when the
        client is shared.
        """
        self._cache_enabled = False
        return self

    def enable_cache(self) -> CachedRecmanApi:
        """Resume reading from the cache."""
        self._cache_enabled = True
        return self

    def with_cache_disabled(self) -> CachedRecmanApi:
        """Return a copy of this client that bypasses cache reads.

        The copy shares the store, credentials and HTTP client; this
        instance is left unchanged. The copy never closes the HTTP client
        or the store.
        """
        return self._with_cache_enabled(False)

    def with_cache_enabled(self) -> CachedRecmanApi:
        """Return a copy of this client that reads from the cache."""
        return self._with_cache_enabled(True)

    def _with_cache_enabled(self, enabled: bool) -> CachedRecmanApi:
        clone = copy.copy(self)
        clone._cache_enabled = enabled
        clone._owns_client = False
        clone._owns_cache = False
        return clone

    # ------------------------------------------------------------------ #
    # Caching
    # ------------------------------------------------------------------ #

    def cache_key(self, operation: str, args: tuple[Any, ...] = ()) -> str:
        """Return the cache key for *operation* called with *args*."""
        return make_cache_key(self._cache_key_prefix, operation, args)

    def should_refresh(self, value: Any) -> bool:
        """Whether *value* read from the cache must be refetched.

        True when the cache is disabled or *value* is falsy. Stores return
        ``None`` for missing or expired keys.
        """
        return not self._cache_enabled or not value

    def _request(
        self,
        operation: str,
        args: tuple[Any, ...],
        params: dict[str, Any],
    ) -> Any:
        output = get_output()
        key = self.cache_key(operation, args)

        value = self._cache.get(key) if self._cache_enabled else None
        if not self.should_refresh(value):
            output.debug(f"Cache hit: {operation} ({key})")
            return value

        if self._cache_enabled:
            output.debug(f"Cache miss: {operation} ({key})")
        else:
            output.debug(f"Cache disabled, refreshing: {operation} ({key})")

        value = super()._request(operation, args, params)
        self._cache.set(key, value, self._cache_expire)
        return value
