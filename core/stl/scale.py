from __future__ import annotations

import math
from typing import Sequence, Tuple

from core.errors import DegenerateAxisError, InvalidTargetError
from core.stl.mesh import AXES, BoundingBox


def check_targets(target_mm: Sequence[float]) -> Tuple[float, float, float]:
    if len(target_mm) != 3:
        raise ValueError(f"Expected 3 target dimensions (x, y, z), got {len(target_mm)}")
    checked = []
    for axis, value in zip(AXES, target_mm):
        value = float(value)
        if not math.isfinite(value) or value <= 0:
            raise InvalidTargetError(axis, value)
        checked.append(value)
    return checked[0], checked[1], checked[2]


def axis_scales(bbox: BoundingBox, target_mm: Sequence[float]) -> Tuple[float, float, float]:
    """Per-axis linear scale that maps the bbox extents onto target_mm."""
    targets = check_targets(target_mm)
    scales = []
    for axis, target, extent in zip(AXES, targets, bbox.extents):
        if extent <= 0:
            raise DegenerateAxisError(axis)
        scales.append(target / extent)
    return scales[0], scales[1], scales[2]


def volume_scale_factor(bbox: BoundingBox, target_mm: Sequence[float]) -> float:
    # axes scale independently: stretching X by k multiplies volume by k, not k^3
    sx, sy, sz = axis_scales(bbox, target_mm)
    return sx * sy * sz


def scale_volume(volume_mm3: float, bbox: BoundingBox, target_mm: Sequence[float]) -> float:
    """Volume (mm^3) of the mesh once stretched to target_mm along X, Y and Z."""
    return volume_mm3 * volume_scale_factor(bbox, target_mm)
