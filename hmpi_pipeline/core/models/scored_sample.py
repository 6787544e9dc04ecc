"""
ScoredSample model: a CanonicalSample with its computed HMPI and risk tier (ephemeral).
"""

from typing import Literal

from pydantic import Field

from .sample_record import CanonicalSample

SAFE = "Safe"
MODERATE_RISK = "Moderate Risk"
HIGH_RISK = "High Risk"

RiskStatus = Literal["Safe", "Moderate Risk", "High Risk"]


class ScoredSample(CanonicalSample):
    """
    Outcome of scoring one sample.

    Attributes:
        calculated_hmpi: HMPI rounded to 2 decimal places (wire name: calculatedHMPI).
            Negative when negative readings are supplied; not clamped at zero.
        status: Risk tier derived from calculated_hmpi
    """

    calculated_hmpi: float = Field(..., alias="calculatedHMPI")
    status: RiskStatus

    def to_canonical(self) -> CanonicalSample:
        """Drop the computed fields, e.g. to re-score the underlying measurement."""
        return CanonicalSample.model_validate(
            self.model_dump(exclude={"calculated_hmpi", "status"})
        )

    class Config:
        json_schema_extra = {
            "example": {
                "sampleId": "G7",
                "location": "Ludhiana",
                "As": 20.0,
                "calculatedHMPI": 2.22,
                "status": "Safe",
            }
        }
