"""
Batch aggregation over scored samples.
"""

from collections.abc import Sequence

from ..models import HIGH_RISK, MODERATE_RISK, SAFE, AnalysisSummary, ScoredSample


def summarize(scored: Sequence[ScoredSample]) -> AnalysisSummary:
    """
    Count samples per risk tier and average their calculated HMPI.

    The average is left unrounded and is 0.0 for an empty batch.
    """
    total = len(scored)
    counts = {SAFE: 0, MODERATE_RISK: 0, HIGH_RISK: 0}
    hmpi_sum = 0.0
    for sample in scored:
        counts[sample.status] += 1
        hmpi_sum += sample.calculated_hmpi

    return AnalysisSummary(
        total_samples=total,
        safe_samples=counts[SAFE],
        moderate_risk=counts[MODERATE_RISK],
        high_risk=counts[HIGH_RISK],
        average_hmpi=hmpi_sum / total if total > 0 else 0.0,
    )
