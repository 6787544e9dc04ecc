"""
Permissible limits for the tracked metals in drinking water, µg/L (WHO).

Read-only after import.
"""

from types import MappingProxyType
from typing import Mapping

METAL_STANDARDS: Mapping[str, float] = MappingProxyType({
    "As": 10.0,
    "Cd": 3.0,
    "Cr": 50.0,
    "Cu": 2000.0,
    "Fe": 300.0,
    "Mn": 400.0,
    "Ni": 70.0,
    "Pb": 10.0,
    "Zn": 3000.0,
})
