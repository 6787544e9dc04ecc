"""
Groundwater heavy metal pollution index (HMPI) pipeline.

raw rows -> normalize_row -> CanonicalSample -> score_samples -> (ScoredSample, AnalysisSummary)
"""

from .core.errors import InvalidInputError
from .core.models import AnalysisResult, AnalysisSummary, CanonicalSample, ScoredSample
from .core.normalization import normalize_row, normalize_rows
from .core.scoring import score_samples
from .reporting import render_report

__version__ = "0.1.0"

__all__ = [
    "InvalidInputError",
    "CanonicalSample",
    "ScoredSample",
    "AnalysisSummary",
    "AnalysisResult",
    "normalize_row",
    "normalize_rows",
    "score_samples",
    "render_report",
]
