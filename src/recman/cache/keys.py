"""Cache key derivation for :class:`~recman.client.CachedRecmanApi`.

Keys have the form ``<prefix>_<operation>_<digest>`` where ``digest`` is
the SHA-256 of the JSON-serialised positional arguments. Argument order is
significant: ``("a", "b")`` and ``("b", "a")`` map to different entries.
"""

from __future__ import annotations

import enum
import hashlib
import json
from typing import Any, Sequence


def _normalise(value: Any) -> Any:
    """Convert *value* into something :func:`json.dumps` encodes stably."""
    if isinstance(value, enum.Enum):
        return _normalise(value.value)
    if isinstance(value, dict):
        return {str(k): _normalise(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalise(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted((_normalise(v) for v in value), key=repr)
    return value


def hash_arguments(args: Sequence[Any]) -> str:
    """Return a stable hex digest of *args*, preserving positional order."""
    raw = json.dumps(_normalise(list(args)), sort_keys=True, default=str)
    return hashlib.sha256(raw.encode()).hexdigest()


def make_cache_key(prefix: str, operation: str, args: Sequence[Any] = ()) -> str:
    """Build the cache key for one call of *operation* with *args*.

    Args:
        prefix: Namespace shared by all keys of one client.
        operation: Name of the invoked client method.
        args: The call's arguments, in positional order.

    Returns:
        The cache key string.
    """
    return f"{prefix}_{operation}_{hash_arguments(args)}"
