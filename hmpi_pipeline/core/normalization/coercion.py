"""
Lenient scalar coercion used by the row normalizer.

Both helpers are total: any input yields a value, never an exception.
"""

import math
import numbers
import re
from decimal import Decimal
from typing import Any

# Longest leading decimal literal, e.g. "12.5 mg/L" -> "12.5", "3e2x" -> "3e2"
_FLOAT_PREFIX = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_float(value: Any) -> float:
    """
    Parse a raw cell value as a finite float.

    Text is parsed from its leading numeric prefix after stripping whitespace,
    so unit suffixes are tolerated. Anything unparseable, missing, NaN or
    infinite becomes 0.0. Booleans are not treated as numbers.

    Examples:
        >>> parse_float("12.5")
        12.5
        >>> parse_float(" 7 mg/L")
        7.0
        >>> parse_float("n/a")
        0.0
        >>> parse_float(None)
        0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (numbers.Real, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value.strip())
        if not match:
            return 0.0
        number = float(match.group())
    else:
        return 0.0

    return number if math.isfinite(number) else 0.0


def to_label(value: Any) -> str:
    """
    Render a raw cell value as label text.

    Spreadsheet readers hand back serial numbers as floats (1.0 for "1"),
    so integral floats lose their fractional part.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)
