"""Outgoing request and decode target types shared by the client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import json
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class PreparedRequest:
    """Fully formed request, ready to hand to the transport."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True, slots=True)
class APIResponse:
    """Status, headers and raw body of a completed HTTP exchange.

    The body has already been read in full and the connection released, so
    the response can be kept around and inspected after the call returns.
    """

    status: int
    reason: str | None
    url: str
    headers: Mapping[str, str]
    body: bytes = b""

    @property
    def ok(self) -> bool:
        """Return True for 2xx statuses."""

        return 200 <= self.status <= 299

    def json(self) -> Any:
        """Parse the body as JSON, e.g. to read an API error message."""

        return json.loads(self.body)


class ByteSink(Protocol):
    """Anything raw response bytes can be written to."""

    def write(self, data: bytes, /) -> Any:
        """Consume ``data``."""


@dataclass(frozen=True, slots=True)
class RawTarget:
    """Copy a successful response body verbatim into ``sink``."""

    sink: ByteSink

    def zero(self) -> ByteSink:
        return self.sink


@dataclass(frozen=True)
class JSONTarget(Generic[ModelT]):
    """Decode a successful response body as JSON into ``model``."""

    model: type[ModelT]

    def zero(self) -> ModelT:
        """Return the value left in place when nothing is decoded."""

        return self.model()


DecodeTarget = RawTarget | JSONTarget[Any]


__all__ = [
    "APIResponse",
    "ByteSink",
    "DecodeTarget",
    "JSONTarget",
    "PreparedRequest",
    "RawTarget",
]
