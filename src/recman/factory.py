"""Build a ready-to-use client from configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import httpx

from recman.cache import CacheStore, DiskCacheStore
from recman.client import CachedRecmanApi, RecmanApi
from recman.config import get_cache_dir, load_config, resolve_credential
from recman.models import ClientConfig
from recman.output import get_output


def create_client(
    config: Optional[ClientConfig] = None,
    api_key: Optional[str] = None,
    http_client: Optional[httpx.Client] = None,
    cache: Optional[CacheStore] = None,
) -> RecmanApi:
    """Create a client from *config* (or :func:`~recman.config.load_config`).

    Returns a :class:`CachedRecmanApi` when caching is enabled, backed by
    *cache* or, when none is given, a :class:`DiskCacheStore` under the
    configured (or XDG) cache directory. A store created here is closed
    together with the client. Otherwise returns a plain :class:`RecmanApi`.

    Args:
        config: Client configuration. Loaded from disk and environment
            when omitted.
        api_key: Explicit API key. When omitted it is resolved from
            ``config.api_key_source``.
        http_client: Optional :class:`httpx.Client` to inject.
        cache: Optional store to use instead of the disk cache.

    Raises:
        ConfigError: If the config or the API key cannot be resolved.
    """
    if config is None:
        config = load_config()
    if api_key is None:
        api_key = resolve_credential(config.api_key_source)

    if not config.cache.enabled:
        get_output().debug("Response cache disabled by configuration")
        return RecmanApi(
            api_key,
            http_client=http_client,
            base_url=config.base_url,
            request_config=config.request,
        )

    owns_cache = cache is None
    if cache is None:
        directory = (
            Path(config.cache.directory).expanduser()
            if config.cache.directory
            else get_cache_dir()
        )
        cache = DiskCacheStore(directory)
        get_output().debug(f"Using response cache at {cache.directory}")

    return CachedRecmanApi(
        api_key,
        cache,
        http_client=http_client,
        base_url=config.base_url,
        request_config=config.request,
        cache_expire=config.cache.ttl_seconds,
        cache_key_prefix=config.cache.key_prefix,
        owns_cache=owns_cache,
    )
