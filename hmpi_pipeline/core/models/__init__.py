"""
Core data models for the groundwater HMPI pipeline.

All models use Pydantic for runtime validation and type safety.
"""

from .analysis_result import AnalysisResult, AnalysisSummary
from .sample_record import LABEL_FIELDS, METAL_FIELDS, NUMERIC_FIELDS, CanonicalSample
from .scored_sample import HIGH_RISK, MODERATE_RISK, SAFE, RiskStatus, ScoredSample

__all__ = [
    "CanonicalSample",
    "ScoredSample",
    "AnalysisSummary",
    "AnalysisResult",
    "RiskStatus",
    "SAFE",
    "MODERATE_RISK",
    "HIGH_RISK",
    "LABEL_FIELDS",
    "METAL_FIELDS",
    "NUMERIC_FIELDS",
]
