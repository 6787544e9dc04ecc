"""
Batch data source readers.
"""

from .csv_reader import CSVReader
from .excel_reader import ExcelReader
from .file_reader import SUPPORTED_EXTENSIONS, FileReader, UnsupportedFormatError

__all__ = [
    "CSVReader",
    "ExcelReader",
    "FileReader",
    "SUPPORTED_EXTENSIONS",
    "UnsupportedFormatError",
]
