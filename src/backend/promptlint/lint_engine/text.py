"""Text primitives shared by every lint rule.

All length, emptiness, and equality comparisons go through `normalize_text`
so that rules agree on what "the same text" means.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from .models import ListValue, RepeatableTextValue, TextValue

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(value: Optional[str]) -> str:
    """Collapse whitespace runs to a single space and strip both ends."""
    if not value:
        return ""
    return _WHITESPACE_RUN.sub(" ", value).strip()


def value_to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, TextValue):
        return normalize_text(value.text)
    if isinstance(value, ListValue):
        return _join_parts(value.items)
    if isinstance(value, RepeatableTextValue):
        return _join_parts(value.entries)
    return normalize_text(str(value))


def _join_parts(parts) -> str:
    return ", ".join(p for p in (normalize_text(part) for part in parts) if p)


def is_value_empty(value: Any) -> bool:
    """Absent, blank, empty, or made only of blank elements.

    Numbers are never empty: a metadata value of 0 is a value.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return False
    if isinstance(value, str):
        return normalize_text(value) == ""
    if isinstance(value, TextValue):
        return normalize_text(value.text) == ""
    if isinstance(value, ListValue):
        return all(normalize_text(item) == "" for item in value.items)
    if isinstance(value, RepeatableTextValue):
        return all(normalize_text(entry) == "" for entry in value.entries)
    if isinstance(value, (list, tuple)):
        return all(is_value_empty(item) for item in value)
    return False


def count_commas(value: str) -> int:
    return value.count(",")


def split_comma_list(value: str) -> tuple[str, ...]:
    return tuple(piece for piece in (part.strip() for part in value.split(",")) if piece)
