"""
Accepted source headers for each canonical field.

Order matters: the unit-qualified header comes first, then the bare field
name, then the lowercase field name. The first alias present in a row wins.
"""

from types import MappingProxyType
from typing import Mapping

from ..models.sample_record import METAL_FIELDS

# Greek small letter mu, as written in the survey sheets
MU = "μ"


def _metal_aliases(symbol: str) -> tuple[str, ...]:
    return (f"{symbol} {MU}g/L", symbol, symbol.lower())


LABEL_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "sample_id": ("S. No.", "Sample ID", "sampleId"),
    "location": ("Locations", "Location", "location"),
})

NUMERIC_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "longitude": ("Longitude (degrees in decimal)", "Longitude", "longitude"),
    "latitude": ("Latitude (degrees in decimal)", "Latitude", "latitude"),
    "pH": ("pH", "ph"),
    "EC": (f"EC {MU}S/cm at 25 °C", "EC", "ec"),
    "TDS": ("TDS mg/L", "TDS", "tds"),
    **{metal: _metal_aliases(metal) for metal in METAL_FIELDS},
    "heavy_metal_index": (f"Heavy Metal {MU}g/L", "Heavy Metal", "heavyMetalIndex"),
})

COLUMN_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType({**LABEL_ALIASES, **NUMERIC_ALIASES})
