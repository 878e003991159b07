"""Shared codec helpers for Snipe-IT payloads."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
import re
from typing import Annotated, Any

from pydantic import BeforeValidator

from ..const import TIMESTAMP_FORMAT
from ..errors import MalformedTimestampError, TimestampFormatError

_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def decode_timestamp(value: Any) -> datetime | None:
    """Decode a ``{"datetime": ..., "formatted": ...}`` object to UTC.

    ``formatted`` is display-only and ignored. An empty ``datetime`` string
    marks an unset field (``deleted_at`` on a live asset, for example) and
    decodes to ``None``, as does a JSON ``null``.
    """

    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, Mapping):
        raise MalformedTimestampError(value)
    raw = value.get("datetime")
    formatted = value.get("formatted")
    if not isinstance(raw, str) or not isinstance(formatted, str):
        raise MalformedTimestampError(value)

    if raw == "":
        return None
    if _TIMESTAMP_RE.fullmatch(raw) is None:
        raise TimestampFormatError(raw)
    try:
        parsed = datetime.strptime(raw, TIMESTAMP_FORMAT)
    except ValueError as err:
        # Layout matched but the calendar values are out of range.
        raise TimestampFormatError(raw) from err
    return parsed.replace(tzinfo=UTC)


Timestamp = Annotated[datetime | None, BeforeValidator(decode_timestamp)]


__all__ = ["Timestamp", "decode_timestamp"]
