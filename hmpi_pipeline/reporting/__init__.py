"""
Delimited-text report rendering for scored samples.
"""

from .csv_report import (
    REPORT_COLUMNS,
    REPORT_CONTENT_TYPE,
    REPORT_FILENAME,
    REPORT_HEADER,
    format_cell,
    render_report,
    report_rows,
)

__all__ = [
    "REPORT_COLUMNS",
    "REPORT_CONTENT_TYPE",
    "REPORT_FILENAME",
    "REPORT_HEADER",
    "format_cell",
    "render_report",
    "report_rows",
]
