"""
CSV report of scored samples, suitable for direct download.
"""

import csv
import io
import math
from collections.abc import Iterable
from typing import Any

from ..core.models import ScoredSample

REPORT_CONTENT_TYPE = "text/csv"
REPORT_FILENAME = "HMPI_Analysis_Report.csv"

# (header, ScoredSample attribute) in report order
REPORT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Sample ID", "sample_id"),
    ("Location", "location"),
    ("Latitude", "latitude"),
    ("Longitude", "longitude"),
    ("pH", "pH"),
    ("TDS", "TDS"),
    ("As", "As"),
    ("Cd", "Cd"),
    ("Cr", "Cr"),
    ("Cu", "Cu"),
    ("Fe", "Fe"),
    ("Mn", "Mn"),
    ("Ni", "Ni"),
    ("Pb", "Pb"),
    ("Zn", "Zn"),
    ("Calculated HMPI", "calculated_hmpi"),
    ("Status", "status"),
)

REPORT_HEADER: tuple[str, ...] = tuple(header for header, _ in REPORT_COLUMNS)


def format_cell(value: Any) -> str:
    """
    Render one report cell.

    Empty labels stay empty. Numbers always render, 0 included; integral
    values drop the trailing ".0" (12.0 -> "12").
    """
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def report_rows(scored: Iterable[ScoredSample]) -> list[list[str]]:
    """Cells of each data row, without the header."""
    return [
        [format_cell(getattr(sample, attribute)) for _, attribute in REPORT_COLUMNS]
        for sample in scored
    ]


def render_report(scored: Iterable[ScoredSample], delimiter: str = ",") -> str:
    """
    Render scored samples as CSV text with a fixed header row.

    Cells containing the delimiter or quotes are quoted. An empty batch
    renders the header only.

    Args:
        scored: Scored samples in report order
        delimiter: Field delimiter

    Returns:
        CSV text, one line per sample, "\\n" line endings
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerow(REPORT_HEADER)
    writer.writerows(report_rows(scored))
    return buffer.getvalue()
