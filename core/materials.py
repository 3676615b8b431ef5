from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from core.errors import UnknownMaterialError

# g/cm^3
MATERIAL_DENSITIES: Mapping[str, float] = MappingProxyType({
    "PLA": 1.24,
    "ABS": 1.04,
    "PETG": 1.27,
    "TPU": 1.21,
})


def material_density(name: str) -> float:
    """Look up a filament density by name (case-insensitive)."""
    key = (name or "").strip().upper()
    try:
        return MATERIAL_DENSITIES[key]
    except KeyError:
        raise UnknownMaterialError(name) from None
