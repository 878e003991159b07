"""Typed async client for the Snipe-IT asset management API."""

from __future__ import annotations

from .api import SnipeITClient
from .codecs import (
    Category,
    CategoryOptions,
    Hardware,
    HardwareOptions,
    ListEnvelope,
    Location,
    LocationOptions,
    Timestamp,
    add_options,
    decode_timestamp,
)
from .errors import (
    ConfigurationError,
    DecodeError,
    EncodingError,
    MalformedTimestampError,
    RequestBuildError,
    SnipeITError,
    TimestampFormatError,
    TransportError,
)
from .request import APIResponse, JSONTarget, PreparedRequest, RawTarget

__all__ = [
    "APIResponse",
    "Category",
    "CategoryOptions",
    "ConfigurationError",
    "DecodeError",
    "EncodingError",
    "Hardware",
    "HardwareOptions",
    "JSONTarget",
    "ListEnvelope",
    "Location",
    "LocationOptions",
    "MalformedTimestampError",
    "PreparedRequest",
    "RawTarget",
    "RequestBuildError",
    "SnipeITClient",
    "SnipeITError",
    "Timestamp",
    "TimestampFormatError",
    "TransportError",
    "add_options",
    "decode_timestamp",
]
