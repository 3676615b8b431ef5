from __future__ import annotations

import math

from core.errors import InvalidInfillError, WeightError

MM3_PER_CM3 = 1000.0

# Shell share of the part used by the original estimator: two 0.4 mm perimeters
# (~8 %) plus solid top/bottom layers (~15 %).
ORIGINAL_SHELL_FRACTION = 0.23


def fill_fraction(infill_percentage: float, shell_fraction: float = 0.0) -> float:
    """
    Fraction of the enclosed volume that ends up as plastic.

    With shell_fraction=0 this is just infill/100: the whole part is treated as
    infill, a known simplification. A non-zero shell_fraction counts that share
    of the volume as solid and applies the infill to the rest.
    """
    infill_percentage = float(infill_percentage)
    if not (0.0 <= infill_percentage <= 100.0):
        raise InvalidInfillError(infill_percentage)
    shell_fraction = float(shell_fraction)
    if not (0.0 <= shell_fraction < 1.0):
        raise WeightError(f"Shell fraction must be in [0, 1) (got {shell_fraction})")
    return shell_fraction + (1.0 - shell_fraction) * (infill_percentage / 100.0)


def estimate_mass(
    volume_mm3: float,
    infill_percentage: float,
    density_g_cm3: float,
    shell_fraction: float = 0.0,
) -> float:
    """Printed mass in grams for a part of volume_mm3 at the given infill."""
    fraction = fill_fraction(infill_percentage, shell_fraction)

    volume_mm3 = float(volume_mm3)
    if not math.isfinite(volume_mm3) or volume_mm3 < 0:
        raise WeightError(f"Volume must be a non-negative number (got {volume_mm3})")
    density_g_cm3 = float(density_g_cm3)
    if not math.isfinite(density_g_cm3) or density_g_cm3 <= 0:
        raise WeightError(f"Material density must be > 0 g/cm^3 (got {density_g_cm3})")

    volume_cm3 = volume_mm3 / MM3_PER_CM3
    effective_volume_cm3 = volume_cm3 * fraction
    return effective_volume_cm3 * density_g_cm3
