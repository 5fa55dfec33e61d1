"""
core/coerce.py — Parse-or-default helpers for persisted values.

Store values come back as strings, numbers, or None. These helpers turn
them into typed values and never raise: anything that cannot be read
falls back to the default.
"""

import math
import re
from typing import Any

_TRUE_RE = re.compile(r"true", re.IGNORECASE)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def to_int(value: Any, default: int = 0) -> int:
    """Coerce a stored value to int.

    Accepts ints, floats and plain ASCII decimal strings ("12", " 7 ", "3.5",
    "1e3"). Python-only spellings such as "1_000" are rejected.
    Fractions are truncated toward zero. Booleans, NaN/inf and anything
    unparsable map to the default.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if _INT_RE.fullmatch(value):
            return int(value)
        if not _NUMBER_RE.fullmatch(value):
            return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return int(number)


def to_bool(value: Any, default: bool = False) -> bool:
    """Strict boolean parse: only a case-insensitive "true" is True.

    None (absent key) returns the default; any other present value that
    is not "true" returns False.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return bool(_TRUE_RE.fullmatch(str(value)))


def to_str(value: Any, default: str = "") -> str:
    """Coerce a stored value to str. None returns the default."""
    if value is None:
        return default
    return str(value)
