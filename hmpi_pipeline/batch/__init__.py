"""
Batch processing: file readers and pipeline orchestration.
"""

from .pipeline import NO_DATA_MESSAGE, ANALYSIS_COMPLETED_MESSAGE, AnalysisPipeline
from .readers import CSVReader, ExcelReader, FileReader, UnsupportedFormatError

__all__ = [
    "AnalysisPipeline",
    "ANALYSIS_COMPLETED_MESSAGE",
    "NO_DATA_MESSAGE",
    "CSVReader",
    "ExcelReader",
    "FileReader",
    "UnsupportedFormatError",
]
