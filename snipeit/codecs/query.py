"""Render list options as URL query strings."""

from __future__ import annotations

from collections.abc import Mapping
import re
from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit

from ..errors import EncodingError
from .snipeit_models import QueryOptions

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


def _format_value(key: str, value: Any) -> str:
    """Return the query string form of a scalar option value."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise EncodingError(f"Unsupported value for query parameter {key!r}: {value!r}")


def encode_options(options: QueryOptions) -> list[tuple[str, str]]:
    """Return ``(key, value)`` pairs for the populated fields of ``options``.

    Keys come from the field aliases. Zero values (``None``, ``0``, ``""``,
    ``False``) are skipped, so a zero filter can never be sent.
    """

    if not isinstance(options, QueryOptions):
        raise EncodingError(
            f"Options must be a QueryOptions record, got {type(options).__name__}"
        )
    dumped = options.model_dump(by_alias=True)
    if not isinstance(dumped, Mapping):  # pragma: no cover - pydantic contract
        raise EncodingError(f"Options did not dump to a mapping: {dumped!r}")

    pairs: list[tuple[str, str]] = []
    for key in sorted(dumped):
        value = dumped[key]
        if not value:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _format_value(key, item)) for item in value if item)
            continue
        pairs.append((key, _format_value(key, value)))
    return pairs


def add_options(path: str, options: QueryOptions | None) -> str:
    """Return ``path`` with ``options`` appended as an escaped query string.

    ``path`` must be a relative URL reference. Any query already on it is
    replaced; when no option is populated the result has no ``?`` at all.
    """

    if options is None:
        return path
    if not isinstance(path, str) or _CONTROL_RE.search(path):
        raise EncodingError(f"Invalid path: {path!r}")
    try:
        parts = urlsplit(path)
    except ValueError as err:
        raise EncodingError(f"Invalid path: {path!r}") from err
    if parts.scheme or parts.netloc:
        raise EncodingError(f"Path must be a relative URL reference: {path!r}")

    query = urlencode(encode_options(options))
    return urlunsplit(("", "", parts.path, query, parts.fragment))


__all__ = ["add_options", "encode_options"]
