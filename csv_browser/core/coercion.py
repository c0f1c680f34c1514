"""
Opportunistic typing of CSV cells.

The tokenizer hands us every cell as a string. Each cell is typed on its own
(not per column), so a column can mix numbers, booleans, strings and nulls:

- ``"true"`` / ``"TRUE"`` / ``"false"`` / ``"FALSE"``  -> bool
- plain decimal literals                               -> int or float
- empty string                                         -> None
- anything else                                        -> str (unchanged)
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

CellValue = Union[int, float, bool, str, None]

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
_NUMBER_RE = re.compile(r"^\s*-?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?\s*$")
_INT_RE = re.compile(r"^\s*-?\d+\s*$")

# Integers outside this range lose precision as floats, so they stay strings.
MAX_SAFE_INTEGER = 2 ** 53 - 1

_TRUE_LITERALS = frozenset({"true", "TRUE"})
_FALSE_LITERALS = frozenset({"false", "FALSE"})


def coerce_value(raw: Optional[str]) -> CellValue:
    """Type a single raw CSV cell."""
    if raw is None:
        return None
    if raw == "":
        return None
    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    if _NUMBER_RE.match(raw):
        value = float(raw)
        if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
            if _INT_RE.match(raw):
                return int(raw)
            return value
    return raw


def is_number(value: Any) -> bool:
    """True for real numbers only: booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_number(value: Any) -> Optional[float]:
    """
    Numeric view of a cell, or None when the cell is not numeric-coercible.

    Booleans count as 0/1 and strings count only when they are plain decimal
    literals. NaN and infinities are rejected so they never reach a scale.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        # Same literal grammar as cell typing: no "1_000", "inf" or "nan"
        if not _NUMBER_RE.match(value):
            return None
        number = float(value)
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def format_value(value: Any) -> str:
    """Render a cell for tables and axis labels. Missing values render as empty."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer() and abs(value) <= MAX_SAFE_INTEGER:
            return str(int(value))
        return repr(value)
    return str(value)

