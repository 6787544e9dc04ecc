"""
HMPI scoring, risk classification and batch aggregation.
"""

from .aggregation import summarize
from .hmpi import (
    HIGH_RISK_THRESHOLD,
    MODERATE_RISK_THRESHOLD,
    calculate_hmpi,
    classify_hmpi,
    round_half_up,
    score_sample,
    score_samples,
)
from .standards import METAL_STANDARDS

__all__ = [
    "METAL_STANDARDS",
    "HIGH_RISK_THRESHOLD",
    "MODERATE_RISK_THRESHOLD",
    "calculate_hmpi",
    "classify_hmpi",
    "round_half_up",
    "score_sample",
    "score_samples",
    "summarize",
]
