"""
Row normalization: header alias resolution and numeric coercion.
"""

from .aliases import COLUMN_ALIASES, LABEL_ALIASES, NUMERIC_ALIASES
from .coercion import parse_float, to_label
from .row_normalizer import normalize_row, normalize_rows, resolve_alias

__all__ = [
    "COLUMN_ALIASES",
    "LABEL_ALIASES",
    "NUMERIC_ALIASES",
    "parse_float",
    "to_label",
    "normalize_row",
    "normalize_rows",
    "resolve_alias",
]
