"""Configuration loading with XDG paths and environment overrides.

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.recman/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_cache_dir`.
* **Config file** -- an optional ``config.json`` in the config directory,
  validated into a :class:`~recman.models.ClientConfig`.
* **Precedence** -- environment variables override the file, which
  overrides the model defaults. See :func:`load_config`.
* **Credential resolution** -- :func:`resolve_credential` reads the API key
  from an env var or a file, so the key never has to live in config.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Any, Optional, Union

from recman.exceptions import ConfigError
from recman.models import ClientConfig

_APP_NAME = "recman"
_CONFIG_FILENAME = "config.json"

ENV_CONFIG = "RECMAN_CONFIG"
ENV_BASE_URL = "RECMAN_BASE_URL"
ENV_CACHE_ENABLED = "RECMAN_CACHE_ENABLED"
ENV_CACHE_TTL = "RECMAN_CACHE_TTL"
ENV_CACHE_DIR = "RECMAN_CACHE_DIR"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_NO_EXPIRY_VALUES = {"", "none", "never"}


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory.

    On Linux/BSD: ``$XDG_CONFIG_HOME/recman/`` (default ``~/.config/recman/``).
    On macOS/Windows: ``~/.recman/``.

    The directory is not created; recman only reads from it.
    """
    if _is_xdg_platform():
        return _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    return _fallback_base_dir()


def get_cache_dir() -> Path:
    """Return the cache directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CACHE_HOME/recman/`` (default ``~/.cache/recman/``).
    On macOS/Windows: ``~/.recman/cache/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CACHE_HOME", (".cache",)) / _APP_NAME
    else:
        path = _fallback_base_dir() / "cache"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Loading ---


def _config_path() -> Path:
    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / _CONFIG_FILENAME


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


def _parse_ttl(value: str) -> Optional[int]:
    lowered = value.strip().lower()
    if lowered in _NO_EXPIRY_VALUES:
        return None
    try:
        return int(lowered)
    except ValueError as exc:
        raise ConfigError(f"Invalid integer for {ENV_CACHE_TTL}: {value!r}") from exc


def _env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Layer ``RECMAN_*`` environment variables over the raw config dict."""
    merged = dict(data)
    cache = dict(merged.get("cache") or {})

    base_url = os.environ.get(ENV_BASE_URL)
    if base_url:
        merged["base_url"] = base_url

    enabled = os.environ.get(ENV_CACHE_ENABLED)
    if enabled is not None:
        cache["enabled"] = _parse_bool(ENV_CACHE_ENABLED, enabled)

    ttl = os.environ.get(ENV_CACHE_TTL)
    if ttl is not None:
        cache["ttl_seconds"] = _parse_ttl(ttl)

    cache_dir = os.environ.get(ENV_CACHE_DIR)
    if cache_dir:
        cache["directory"] = cache_dir

    if cache:
        merged["cache"] = cache
    return merged


def load_config(path: Optional[Union[str, Path]] = None) -> ClientConfig:
    """Load the effective :class:`~recman.models.ClientConfig`.

    Precedence (high to low):
        1. Environment variables (``RECMAN_BASE_URL``, ``RECMAN_CACHE_ENABLED``,
           ``RECMAN_CACHE_TTL``, ``RECMAN_CACHE_DIR``)
        2. The config file (*path*, ``$RECMAN_CONFIG``, or
           ``<config_dir>/config.json``)
        3. Defaults

    A missing config file is not an error.

    Raises:
        ConfigError: If the file contains invalid JSON, fails validation,
            or an environment variable has an unparseable value.
    """
    config_path = Path(path).expanduser() if path is not None else _config_path()
    data: dict[str, Any] = {}
    if config_path.is_file():
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            raise ConfigError(f"Invalid config at {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config at {config_path}: expected a JSON object")

    try:
        return ClientConfig.model_validate(_env_overrides(data))
    except ValueError as exc:
        raise ConfigError(f"Invalid config at {config_path}: {exc}") from exc


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace

    Raises:
        ConfigError: If the source can't be resolved.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc

    raise ConfigError(f"Unknown credential source format: {source}")
