"""Pydantic models shared across recman modules.

**Configuration models** -- loaded from ``config.json`` in the user's config
directory by :func:`~recman.config.load_config`:
    :class:`RequestConfig`, :class:`CacheConfig`, and :class:`ClientConfig`.

**Payload models** -- parsed out of API responses:
    :class:`ApiErrorDetail`.

**Enumerations**:
    :class:`LocationField`, the fields accepted by the ``location`` scope.
"""

from __future__ import annotations

import enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://api.recman.no/v1.php"
DEFAULT_CACHE_TTL = 7200
DEFAULT_CACHE_KEY_PREFIX = "recman"


class LocationField(str, enum.Enum):
    """Fields that can be requested from the ``location`` scope."""

    CITY = "city"
    REGION = "region"
    COUNTRY = "country"
    WORLD_COUNTRY_LIST = "world-country-list"
    NATIONALITY_LIST = "nationality-list"


# --- Config ---


class RequestConfig(BaseModel):
    """HTTP settings for the client-owned :class:`httpx.Client`."""

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(default=30, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")


class CacheConfig(BaseModel):
    """Response cache settings.

    ``ttl_seconds=None`` stores entries without an expiry.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=True, description="Enable response caching")
    ttl_seconds: Optional[int] = Field(
        default=DEFAULT_CACHE_TTL, description="Cache TTL in seconds, null for no expiry"
    )
    key_prefix: str = Field(
        default=DEFAULT_CACHE_KEY_PREFIX, description="Prefix for every cache key"
    )
    directory: Optional[str] = Field(
        default=None, description="Cache directory, defaults to the XDG cache dir"
    )


class ClientConfig(BaseModel):
    """Top-level configuration persisted at ``~/.config/recman/config.json``.

    The API key itself is never stored here; ``api_key_source`` points at
    where to read it from (see :func:`~recman.config.resolve_credential`).

    Example::

        ClientConfig(
            api_key_source="file:~/.recman-key",
            cache=CacheConfig(ttl_seconds=3600),
        )
    """

    model_config = ConfigDict(frozen=True)

    api_key_source: str = Field(
        default="env:RECMAN_API_KEY",
        description="Credential source: env:VAR or file:/path",
    )
    base_url: str = Field(default=DEFAULT_BASE_URL)
    request: RequestConfig = Field(default_factory=RequestConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)


# --- Payloads ---


class ApiErrorDetail(BaseModel):
    """A single ``{code, message}`` object from an API error payload."""

    model_config = ConfigDict(extra="allow")

    code: Optional[Union[int, str]] = None
    message: str = ""

    @field_validator("code", mode="before")
    @classmethod
    def coerce_code(cls, v):
        """Keep ints and strings; stringify anything else."""
        if v is None or isinstance(v, (int, str)):
            return v
        return str(v)

    @field_validator("message", mode="before")
    @classmethod
    def coerce_message(cls, v):
        """A ``null`` message becomes ``""``; non-strings are stringified."""
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)
