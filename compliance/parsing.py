"""Lenient coercion helpers for raw database/API rows.

Every helper returns None instead of raising when a value is missing or
cannot be interpreted; callers decide what None means for their rule.
"""

from __future__ import annotations

from datetime import date, datetime

_TRUE_STRINGS = {"y", "yes", "true", "t", "1"}
_FALSE_STRINGS = {"n", "no", "false", "f", "0", ""}


def parse_date(val) -> date | None:
    """Parse a date from string, date, datetime, or None."""
    if val is None:
        return None
    if isinstance(val, datetime):
        return val.date()
    if isinstance(val, date):
        return val
    try:
        text = str(val).strip()[:10]
        return date.fromisoformat(text)
    except (ValueError, TypeError):
        return None


def parse_float(val) -> float | None:
    """Parse a numeric amount, tolerating '$' and thousands separators."""
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        return float(val)
    text = str(val).strip().replace(",", "").replace("$", "")
    if not text:
        return None
    try:
        return float(text)
    except (ValueError, TypeError):
        return None


def parse_int(val) -> int | None:
    amount = parse_float(val)
    if amount is None:
        return None
    return int(amount)


def parse_bool(val) -> bool | None:
    """Parse a flag stored as bool, 0/1, or a Y/N style string."""
    if val is None:
        return None
    if isinstance(val, bool):
        return val
    if isinstance(val, (int, float)):
        return val != 0
    text = str(val).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    return None


def parse_text(val) -> str | None:
    if val is None:
        return None
    text = str(val).strip()
    return text or None
