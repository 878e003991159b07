"""Exceptions raised by the Snipe-IT client."""

from __future__ import annotations

from typing import Any


class SnipeITError(Exception):
    """Base class for all client errors."""


class ConfigurationError(SnipeITError):
    """Base URL or token missing or invalid at construction time."""


class EncodingError(SnipeITError):
    """Options could not be rendered as URL query parameters."""


class RequestBuildError(SnipeITError):
    """URL resolution or body serialisation failed before any I/O."""


class TransportError(SnipeITError):
    """The request did not produce an HTTP response (DNS, TLS, timeout...)."""


class DecodeError(SnipeITError):
    """A successful response body did not match the expected shape.

    ``response`` is the HTTP response the body came from (``None`` when the
    error is raised outside a request, e.g. by the timestamp codec on its
    own) and ``body`` the raw bytes that failed to decode.
    """

    def __init__(
        self,
        message: str = "",
        *,
        response: Any | None = None,
        body: bytes | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.body = body


class TimestampFormatError(DecodeError):
    """A timestamp ``datetime`` string does not match ``YYYY-MM-DD HH:MM:SS``."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid timestamp value: {value!r}")
        self.value = value


class MalformedTimestampError(DecodeError):
    """A timestamp is not a ``{"datetime": str, "formatted": str}`` object."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Malformed timestamp object: {value!r}")
        self.value = value


__all__ = [
    "ConfigurationError",
    "DecodeError",
    "EncodingError",
    "MalformedTimestampError",
    "RequestBuildError",
    "SnipeITError",
    "TimestampFormatError",
    "TransportError",
]
