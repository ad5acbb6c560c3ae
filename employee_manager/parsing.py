"""Conversion of raw operator input into typed values for the shell."""

from __future__ import annotations

import re
from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"
_WHOLE_NUMBER = re.compile(r"[+-]?\d+", re.ASCII)


class MalformedInput(ValueError):
    """Raw input that cannot be converted to the expected type."""


def parse_int(text: str, label: str = "value") -> int:
    """Parse an optionally signed run of ASCII digits."""
    stripped = text.strip()
    if not _WHOLE_NUMBER.fullmatch(stripped):
        raise MalformedInput(f"Invalid {label}: {text!r} is not a whole number")
    return int(stripped)


def parse_float(text: str, label: str = "value") -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise MalformedInput(f"Invalid {label}: {text!r} is not a number") from None


def parse_date(text: str, label: str = "date") -> date:
    """Parse a strict YYYY-MM-DD calendar date."""
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        raise MalformedInput(f"Invalid {label}: {text!r} (expected YYYY-MM-DD)") from None


__all__ = ["DATE_FORMAT", "MalformedInput", "parse_date", "parse_float", "parse_int"]
