"""Pure text matching utilities. No external dependencies — stdlib only."""

from __future__ import annotations

import re
from collections.abc import Sequence

_MULTI_SPACE = re.compile(r"\s+")


def clean_whitespace(text: str) -> str:
    """Collapse runs of whitespace (including newlines) to one space and strip."""
    if not text or not isinstance(text, str):
        return ""
    return _MULTI_SPACE.sub(" ", text).strip()


def contains_any_keyword(text: str, keywords: Sequence[str]) -> bool:
    """Return True if *text* contains any keyword (case-insensitive).

    Whitespace inside *text* is normalised first so multi-line anchor
    text still matches multi-word keywords.
    """
    if not text or not keywords:
        return False
    haystack = clean_whitespace(text).lower()
    return any(
        keyword.strip().lower() in haystack for keyword in keywords if keyword.strip()
    )
