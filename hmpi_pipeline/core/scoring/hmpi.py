"""
Heavy Metal Pollution Index (HMPI) calculation.

For every metal with a reading:

    qi = (concentration / standard) * 100
    wi = 1 / standard
    hmpi += qi * wi

and the index is hmpi divided by the number of metals read. The sum is not
divided by the sum of the weights; every published result of the survey
tool was produced with this formula, so classifications depend on it.
"""

import math
from collections.abc import Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import ValidationError

from ..errors import InvalidInputError
from ..models import HIGH_RISK, MODERATE_RISK, SAFE, AnalysisSummary, CanonicalSample, RiskStatus, ScoredSample
from .aggregation import summarize
from .standards import METAL_STANDARDS

# Exclusive lower bounds of each tier
MODERATE_RISK_THRESHOLD = 50.0
HIGH_RISK_THRESHOLD = 100.0


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round to a fixed number of decimals, ties away from zero.

    Rounds the exact binary value of the float, so 0.125 -> 0.13 while
    1.005 (stored as 1.00499...) -> 1.0.
    """
    # Floats at or above 2**52 are already integral
    if not math.isfinite(value) or abs(value) >= 2**52:
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_hmpi(sample: CanonicalSample) -> float:
    """
    Compute the unrounded HMPI for one sample.

    Metals without a reading (None) are skipped and not counted. A
    CanonicalSample always carries all nine readings, so in practice all nine
    are counted and a missing metal contributes zero.

    Readings are finite, but one large enough (e.g. 1e308) overflows qi and
    the result is inf, or nan when opposite-signed overflows meet. Such
    values are returned unchanged; serializers that need strict JSON must
    reject them.
    """
    hmpi = 0.0
    valid_metals = 0

    for metal, standard in METAL_STANDARDS.items():
        concentration = getattr(sample, metal, None)
        if concentration is None:
            continue
        qi = (concentration / standard) * 100
        wi = 1 / standard
        hmpi += qi * wi
        valid_metals += 1

    return hmpi / valid_metals if valid_metals > 0 else 0.0


def classify_hmpi(calculated_hmpi: float) -> RiskStatus:
    """
    Map a rounded HMPI onto a risk tier.

    Both thresholds are strict: 50.00 is Safe, 100.00 is Moderate Risk.
    """
    if calculated_hmpi > HIGH_RISK_THRESHOLD:
        return HIGH_RISK
    if calculated_hmpi > MODERATE_RISK_THRESHOLD:
        return MODERATE_RISK
    return SAFE


def score_sample(sample: CanonicalSample) -> ScoredSample:
    """Score a single sample. Any previous score on the input is replaced."""
    calculated = round_half_up(calculate_hmpi(sample), 2)
    return ScoredSample(
        **sample.model_dump(include=set(CanonicalSample.model_fields)),
        calculated_hmpi=calculated,
        status=classify_hmpi(calculated),
    )


def _as_sample(record: Any, index: int) -> CanonicalSample:
    if isinstance(record, CanonicalSample):
        return record
    if isinstance(record, Mapping):
        try:
            return CanonicalSample.model_validate(record)
        except ValidationError as e:
            raise InvalidInputError(f"records[{index}]", f"not a canonical sample: {e}") from e
    raise InvalidInputError(
        f"records[{index}]", f"expected a CanonicalSample or mapping, got {type(record).__name__}"
    )


def score_samples(records: Sequence[CanonicalSample | Mapping[str, Any]]) -> tuple[list[ScoredSample], AnalysisSummary]:
    """
    Score a batch of canonical samples and summarize it.

    Args:
        records: CanonicalSample instances, or mappings in canonical form
            (e.g. documents read back from storage)

    Returns:
        Tuple of (scored samples in input order, summary). An empty batch
        gives ([], an all-zero summary).

    Raises:
        InvalidInputError: If records is not a sequence, or an element is
            neither a CanonicalSample nor a valid canonical mapping
    """
    if not isinstance(records, Sequence) or isinstance(records, (str, bytes)):
        raise InvalidInputError(
            "records", f"expected a sequence of samples, got {type(records).__name__}"
        )

    scored = [score_sample(_as_sample(record, index)) for index, record in enumerate(records)]
    return scored, summarize(scored)
