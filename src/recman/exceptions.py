"""Exception hierarchy for recman.

All exceptions inherit from :class:`RecmanError` so that callers can catch
every failure raised by the library with a single ``except`` clause.

Subclass hierarchy::

    RecmanError
    +-- ValidationError            (bad caller argument, raised before any I/O)
    +-- ApiError                   (upstream returned an ``error`` payload)
    +-- TransportError             (network failure from httpx)
    |   +-- HttpStatusError        (HTTP 4xx / 5xx)
    |   +-- MalformedResponseError (body is not valid JSON)
    +-- ConfigError                (invalid config file, missing credential)
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union


class RecmanError(Exception):
    """Base exception for all recman errors."""


class ValidationError(RecmanError, ValueError):
    """Raised when a caller-supplied argument fails a pre-flight check.

    Args:
        value: The rejected value.
        allowed: The values that would have been accepted.
    """

    def __init__(self, value: Any, allowed: Iterable[str]) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Field: {value} is not valid, only one of the following can be used: "
            + ", ".join(self.allowed)
        )


class ApiError(RecmanError):
    """Raised when the Recman API responds with an ``error`` payload.

    Args:
        code: Upstream error code (usually an ``int``).
        message: Upstream error message.
    """

    def __init__(self, code: Optional[Union[int, str]], message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}" if code is not None else message)


class TransportError(RecmanError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused)."""


class HttpStatusError(TransportError):
    """Raised when the API answers with an HTTP 4xx or 5xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(TransportError):
    """Raised when the response body cannot be decoded as JSON."""


class ConfigError(RecmanError):
    """Raised for configuration problems (invalid JSON, bad credential sources)."""
