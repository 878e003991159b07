"""Codecs for Snipe-IT payloads and query strings."""

from __future__ import annotations

from .common import Timestamp, decode_timestamp
from .query import add_options, encode_options
from .snipeit_models import (
    Category,
    CategoryOptions,
    Hardware,
    HardwareOptions,
    ListEnvelope,
    Location,
    LocationOptions,
    QueryOptions,
)

__all__ = [
    "Category",
    "CategoryOptions",
    "Hardware",
    "HardwareOptions",
    "ListEnvelope",
    "Location",
    "LocationOptions",
    "QueryOptions",
    "Timestamp",
    "add_options",
    "decode_timestamp",
    "encode_options",
]
