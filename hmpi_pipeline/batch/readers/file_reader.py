"""
Generic file reader for the supported upload formats (CSV, XLSX, XLS).
"""

from pathlib import Path
from typing import Any

from .csv_reader import CSVReader
from .excel_reader import ExcelReader

SUPPORTED_EXTENSIONS = (".csv", ".xlsx", ".xls")


class UnsupportedFormatError(ValueError):
    """Raised when a file extension has no reader."""

    def __init__(self, file_path: str | Path):
        self.file_path = str(file_path)
        super().__init__(
            f"Unsupported file format: {Path(file_path).suffix or '(none)'} "
            f"(expected one of {', '.join(SUPPORTED_EXTENSIONS)})"
        )


class FileReader:
    """
    Picks a reader from the file extension.
    """

    def __init__(self, csv_delimiter: str = ",", excel_sheet: int | str = 0):
        """
        Initialize file reader.

        Args:
            csv_delimiter: Delimiter for .csv files
            excel_sheet: Sheet index or name for workbooks
        """
        self.csv_delimiter = csv_delimiter
        self.excel_sheet = excel_sheet
        self.csv_reader = CSVReader()
        self.excel_reader = ExcelReader()

    def source_type(self, file_path: str | Path) -> str:
        """
        Return "csv" or "excel" for a path.

        Raises:
            UnsupportedFormatError: If the extension is not supported
        """
        suffix = Path(file_path).suffix.lower()
        if suffix == ".csv":
            return "csv"
        if suffix in (".xlsx", ".xls"):
            return "excel"
        raise UnsupportedFormatError(file_path)

    def read(self, file_path: str | Path) -> list[dict[str, Any]]:
        """
        Read a file into raw rows.

        Args:
            file_path: Path to file

        Returns:
            List of raw rows

        Raises:
            FileNotFoundError: If the file does not exist
            UnsupportedFormatError: If the file format is unsupported
        """
        source_type = self.source_type(file_path)
        if not Path(file_path).exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if source_type == "csv":
            return self.csv_reader.read(file_path, delimiter=self.csv_delimiter)
        return self.excel_reader.read(file_path, sheet=self.excel_sheet)
