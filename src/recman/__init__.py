"""recman -- client for the Recman recruitment API.

Recman exposes job posts, candidates, users and lookup lists through a
single JSON endpoint with a quota of 200 requests per day. This package
wraps that endpoint in :class:`RecmanApi` and adds :class:`CachedRecmanApi`,
which memoises responses so repeated calls do not eat into the quota.

Typical usage::

    from recman import create_client

    api = create_client()          # reads RECMAN_API_KEY, caches on disk
    posts = api.get_job_post_list()

Modules:
    client: :class:`RecmanApi` and :class:`CachedRecmanApi`.
    cache: Cache key derivation and the diskcache-backed store.
    models: Pydantic configuration and payload models.
    config: XDG-aware config loading and credential resolution.
    exceptions: The :class:`RecmanError` hierarchy.
    output: stderr diagnostics built on Rich.
"""

__version__ = "0.3.0"

from recman.client import CachedRecmanApi, RecmanApi
from recman.exceptions import (
    ApiError,
    ConfigError,
    HttpStatusError,
    MalformedResponseError,
    RecmanError,
    TransportError,
    ValidationError,
)
from recman.factory import create_client
from recman.models import LocationField

__all__ = [
    "ApiError",
    "CachedRecmanApi",
    "ConfigError",
    "HttpStatusError",
    "LocationField",
    "MalformedResponseError",
    "RecmanApi",
    "RecmanError",
    "TransportError",
    "ValidationError",
    "create_client",
]
