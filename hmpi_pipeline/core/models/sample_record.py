"""
CanonicalSample model representing one normalized groundwater measurement (ephemeral).
"""

import math
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Tracked heavy metals, all in µg/L
METAL_FIELDS: tuple[str, ...] = ("As", "Cd", "Cr", "Cu", "Fe", "Mn", "Ni", "Pb", "Zn")

LABEL_FIELDS: tuple[str, ...] = ("sample_id", "location")

NUMERIC_FIELDS: tuple[str, ...] = (
    "longitude",
    "latitude",
    "pH",
    "EC",
    "TDS",
    *METAL_FIELDS,
    "heavy_metal_index",
)


class CanonicalSample(BaseModel):
    """
    A single groundwater sample after header resolution and numeric coercion.

    Note: CanonicalSample is produced and consumed within one batch. Storage
    of samples belongs to the caller; to_document() gives the wire form.

    Attributes:
        sample_id: Sample label such as "G1" (wire name: sampleId)
        location: Free-text location label
        longitude: Decimal degrees
        latitude: Decimal degrees
        pH: pH value
        EC: Electrical conductivity, µS/cm at 25 °C
        TDS: Total dissolved solids, mg/L
        As, Cd, Cr, Cu, Fe, Mn, Ni, Pb, Zn: Metal concentrations, µg/L
        heavy_metal_index: Index supplied with the source data, never computed
            here (wire name: heavyMetalIndex)

    Every numeric field is a finite float. Missing values default to 0.0.
    """

    sample_id: str = Field("", alias="sampleId")
    location: str = ""
    longitude: float = 0.0
    latitude: float = 0.0
    pH: float = 0.0
    EC: float = 0.0
    TDS: float = 0.0
    As: float = 0.0
    Cd: float = 0.0
    Cr: float = 0.0
    Cu: float = 0.0
    Fe: float = 0.0
    Mn: float = 0.0
    Ni: float = 0.0
    Pb: float = 0.0
    Zn: float = 0.0
    heavy_metal_index: float = Field(0.0, alias="heavyMetalIndex")

    @field_validator(*LABEL_FIELDS, mode="before")
    @classmethod
    def label_to_text(cls, v: Any) -> str:
        """Stored documents may carry null or numeric labels."""
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def missing_number_to_zero(cls, v: Any) -> Any:
        if v is None:
            return 0.0
        return v

    @field_validator(*NUMERIC_FIELDS)
    @classmethod
    def check_finite(cls, v: float) -> float:
        """Reject NaN and infinities."""
        if not math.isfinite(v):
            raise ValueError("value must be a finite number")
        return v

    def metal_concentrations(self) -> dict[str, float]:
        """Return the nine metal readings keyed by element symbol."""
        return {metal: getattr(self, metal) for metal in METAL_FIELDS}

    def to_document(self) -> dict[str, Any]:
        """Serialize using the wire field names (sampleId, heavyMetalIndex, ...)."""
        return self.model_dump(by_alias=True)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "sampleId": "G1",
                "location": "Mandi Gobindgarh",
                "longitude": 76.3,
                "latitude": 30.67,
                "pH": 7.4,
                "EC": 512.0,
                "TDS": 330.0,
                "As": 4.2,
                "Cd": 0.8,
                "Cr": 12.0,
                "Cu": 25.0,
                "Fe": 180.0,
                "Mn": 35.0,
                "Ni": 6.5,
                "Pb": 3.1,
                "Zn": 140.0,
                "heavyMetalIndex": 0.0,
            }
        }
