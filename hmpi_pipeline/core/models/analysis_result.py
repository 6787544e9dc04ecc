"""
Aggregate models returned to the presentation layer.
"""

from typing import Any

from pydantic import BaseModel, Field

from .scored_sample import ScoredSample


class AnalysisSummary(BaseModel):
    """
    Tier counts and mean index over a scored batch.

    Attributes:
        total_samples: Number of scored samples
        safe_samples: Samples classified Safe
        moderate_risk: Samples classified Moderate Risk
        high_risk: Samples classified High Risk
        average_hmpi: Unweighted mean of calculated_hmpi, 0 for an empty batch
    """

    total_samples: int = Field(0, ge=0, alias="totalSamples")
    safe_samples: int = Field(0, ge=0, alias="safeSamples")
    moderate_risk: int = Field(0, ge=0, alias="moderateRisk")
    high_risk: int = Field(0, ge=0, alias="highRisk")
    average_hmpi: float = Field(0.0, alias="averageHMPI")

    class Config:
        populate_by_name = True


class AnalysisResult(BaseModel):
    """Response payload for an analysis run."""

    message: str
    count: int = Field(..., ge=0)
    results: list[ScoredSample] = Field(default_factory=list)
    summary: AnalysisSummary = Field(default_factory=AnalysisSummary)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    class Config:
        populate_by_name = True
