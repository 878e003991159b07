"""Redaction of Snipe-IT credentials from log output and reprs."""

from __future__ import annotations

import re

# Snipe-IT personal access tokens are JWTs and travel as a bearer header.
_SECRET_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(?i)\bBearer\s+[\w\-.~+/]+=*"), "Bearer ***"),
    (re.compile(r"\beyJ[\w-]+\.[\w-]+\.[\w-]*"), "***"),
    (re.compile(r"(?i)\b(api_token|access_token|token)=[^&#\s]+"), r"\1=***"),
)


def redact_text(value: str | None) -> str:
    """Return ``value`` with bearer headers, JWTs and token parameters masked."""

    text = "" if value is None else str(value)
    for pattern, replacement in _SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def redact_token_fragment(value: str | None) -> str:
    """Keep just enough of a token to tell two clients apart."""

    token = (value or "").strip()
    if len(token) <= 8:
        return "***" if token else ""
    return f"{token[:4]}...{token[-4:]}"


__all__ = ["redact_text", "redact_token_fragment"]
