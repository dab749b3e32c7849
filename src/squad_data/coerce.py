"""Scalar coercion of raw spreadsheet cells"""

import math
from typing import Optional, Union

Number = Union[int, float]

TRUTHY_TOKENS = frozenset({'true', '1', 'y', 'yes'})


def to_boolean(raw: Optional[str]) -> bool:
    """True only for the tokens true / 1 / y / yes, case-insensitive"""
    return str(raw or '').strip().lower() in TRUTHY_TOKENS


def to_number_or_none(raw: Optional[str]) -> Optional[Number]:
    """Parse a numeric cell, returning None for blank or invalid input.

    Non-finite values (inf, nan) count as invalid. Integral values come
    back as int so they serialize as ``3`` rather than ``3.0``.
    """
    text = str(raw or '').strip()
    if not text:
        return None

    # float() accepts digit separators and non-ASCII digits, spreadsheets never emit them
    if '_' in text or not text.isascii():
        return None

    try:
        value = float(text)
    except ValueError:
        return None

    if not math.isfinite(value):
        return None

    if value.is_integer():
        return int(value)
    return value


def to_number_or_default(raw: Optional[str], default: Number = 0) -> Number:
    """Like to_number_or_none but falls back to ``default``"""
    value = to_number_or_none(raw)
    return default if value is None else value
