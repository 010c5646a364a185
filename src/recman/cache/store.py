"""Cache stores consumed by :class:`~recman.client.CachedRecmanApi`.

The caching client only needs ``get(key)`` and ``set(key, value, ttl)``;
:class:`CacheStore` spells that contract out as a :class:`typing.Protocol`
so any object with those two methods can be injected.

:class:`DiskCacheStore` is the bundled implementation. It persists entries
on the filesystem with :mod:`diskcache`, so cached responses survive process
restarts and count against the daily API quota only once per TTL window.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any, Optional, Protocol, Union, runtime_checkable

import diskcache

Ttl = Optional[Union[int, float, timedelta]]


@runtime_checkable
class CacheStore(Protocol):
    """Minimal key/value cache contract."""

    def get(self, key: str) -> Any:
        """Return the stored value, or ``None`` when absent or expired."""
        ...

    def set(self, key: str, value: Any, ttl: Ttl = None) -> None:
        """Store *value* under *key*, expiring after *ttl* (``None`` = never)."""
        ...


def ttl_to_seconds(ttl: Ttl) -> Optional[float]:
    """Normalise a TTL to seconds, keeping ``None`` as "never expire"."""
    if ttl is None:
        return None
    if isinstance(ttl, timedelta):
        return ttl.total_seconds()
    return float(ttl)


class DiskCacheStore:
    """Disk-backed :class:`CacheStore` using :class:`diskcache.Cache`.

    Args:
        directory: Root directory for the cache. A ``responses/``
            subdirectory is created inside it.

    Example::

        from recman.cache import DiskCacheStore

        with DiskCacheStore("/tmp/recman-cache") as store:
            store.set("recman_get_branch_list_ab12", [{"id": 1}], ttl=300)
            hit = store.get("recman_get_branch_list_ab12")
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        self._directory = Path(directory) / "responses"
        self._cache = diskcache.Cache(str(self._directory))

    @property
    def directory(self) -> Path:
        """The directory holding the cache files."""
        return self._directory

    def get(self, key: str) -> Any:
        return self._cache.get(key)

    def set(self, key: str, value: Any, ttl: Ttl = None) -> None:
        self._cache.set(key, value, expire=ttl_to_seconds(ttl))

    def delete(self, key: str) -> None:
        """Remove one entry. Missing keys are ignored."""
        self._cache.delete(key)

    def clear(self) -> None:
        """Remove all entries from the cache."""
        self._cache.clear()

    def stats(self) -> dict[str, Any]:
        """Return ``size`` (number of entries) and ``directory``."""
        return {
            "size": len(self._cache),
            "directory": str(self._directory),
        }

    def close(self) -> None:
        """Close the underlying :class:`diskcache.Cache` and release resources."""
        self._cache.close()

    def __enter__(self) -> DiskCacheStore:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
