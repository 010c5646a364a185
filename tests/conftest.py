"""Shared test fixtures for recman.

Provides a recording in-memory cache store, an ``httpx.MockTransport``
backed fake of the Recman endpoint, and isolation for global output state
and ``RECMAN_*`` / XDG environment variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pytest

from recman.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches a reference to sys.stderr at creation time;
    when pytest swaps the stream between tests that reference goes stale.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Fake cache store
# ---------------------------------------------------------------------------


class RecordingStore:
    """Dict-backed cache store that records every get/set call."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}
        self.gets: list[str] = []
        self.sets: list[tuple[str, Any, Any]] = []

    def get(self, key: str) -> Any:
        self.gets.append(key)
        return self.data.get(key)

    def set(self, key: str, value: Any, ttl: Any = None) -> None:
        self.sets.append((key, value, ttl))
        self.data[key] = value


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


# ---------------------------------------------------------------------------
# Fake Recman endpoint
# ---------------------------------------------------------------------------


class FakeRecman:
    """Callable ``httpx.MockTransport`` handler recording every request.

    By default every request is answered with ``payload``; assign
    ``handler`` to compute a response per request instead.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.payload: Any = [{"id": 1, "name": "Oslo"}]
        self.status_code = 200
        self.handler: Optional[Callable[[httpx.Request], httpx.Response]] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_params(self) -> httpx.QueryParams:
        return self.requests[-1].url.params


@pytest.fixture
def fake_recman() -> FakeRecman:
    return FakeRecman()


@pytest.fixture
def http_client(fake_recman: FakeRecman) -> httpx.Client:
    client = httpx.Client(transport=httpx.MockTransport(fake_recman))
    yield client
    client.close()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG directories at tmp_path and clear ``RECMAN_*`` variables."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setattr("recman.config._is_xdg_platform", lambda: True)

    for var in [
        "RECMAN_API_KEY",
        "RECMAN_CONFIG",
        "RECMAN_BASE_URL",
        "RECMAN_CACHE_ENABLED",
        "RECMAN_CACHE_TTL",
        "RECMAN_CACHE_DIR",
    ]:
        monkeypatch.delenv(var, raising=False)

    return tmp_path
