"""
Row normalizer: maps one raw spreadsheet/CSV row onto a CanonicalSample.
"""

import math
from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import InvalidInputError
from ..models import CanonicalSample
from .aliases import LABEL_ALIASES, NUMERIC_ALIASES
from .coercion import parse_float, to_label


def _is_absent(value: Any) -> bool:
    # Spreadsheet readers report empty cells as None or NaN
    return value is None or (isinstance(value, float) and math.isnan(value))


def resolve_alias(raw_row: Mapping[Any, Any], aliases: Iterable[str]) -> Any:
    """
    Return the value of the first alias present in the row.

    Later aliases are ignored once one matches, even when they also carry a
    value. Returns None when no alias matches.
    """
    for alias in aliases:
        if alias in raw_row:
            value = raw_row[alias]
            if not _is_absent(value):
                return value
    return None


def normalize_row(raw_row: Mapping[Any, Any]) -> CanonicalSample:
    """
    Normalize one raw row into a CanonicalSample.

    Never fails for a mapping: unknown headers are ignored, and numeric
    fields that are missing or unparseable default to 0.0.

    Args:
        raw_row: Mapping of source header to raw cell value

    Returns:
        Fully populated CanonicalSample

    Raises:
        InvalidInputError: If raw_row is not a mapping
    """
    if not isinstance(raw_row, Mapping):
        raise InvalidInputError(
            "row", f"expected a mapping of header to value, got {type(raw_row).__name__}"
        )

    fields: dict[str, Any] = {}
    for field_name, aliases in LABEL_ALIASES.items():
        fields[field_name] = to_label(resolve_alias(raw_row, aliases))
    for field_name, aliases in NUMERIC_ALIASES.items():
        fields[field_name] = parse_float(resolve_alias(raw_row, aliases))

    return CanonicalSample(**fields)


def normalize_rows(raw_rows: Iterable[Mapping[Any, Any]]) -> list[CanonicalSample]:
    """
    Normalize a batch of raw rows, preserving order.

    Rows are independent of each other, so callers may also fan
    normalize_row out across threads.

    Raises:
        InvalidInputError: If raw_rows is not an iterable of rows, or any
            element is not a mapping
    """
    if raw_rows is None or isinstance(raw_rows, (str, bytes, Mapping)) or not isinstance(raw_rows, Iterable):
        raise InvalidInputError(
            "rows", f"expected an iterable of rows, got {type(raw_rows).__name__}"
        )

    samples = []
    for index, raw_row in enumerate(raw_rows):
        if not isinstance(raw_row, Mapping):
            raise InvalidInputError(
                f"rows[{index}]", f"expected a mapping of header to value, got {type(raw_row).__name__}"
            )
        samples.append(normalize_row(raw_row))
    return samples
