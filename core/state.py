from typing import TypedDict, Dict, Any, Optional, Tuple

from core.stl.mesh import BoundingBox, Mesh


class WeightState(TypedDict, total=False):
    # --- Raw inputs (as received) ---
    stl_bytes: bytes
    x_mm: float
    y_mm: float
    z_mm: float
    infill_percentage: float
    material: Optional[str]          # resolved to density unless density_g_cm3 is given
    density_g_cm3: float
    shell_fraction: float            # 0.0 -> plain linear infill model

    # --- Control flags ---
    inspect_mesh: bool

    # --- Geometry ---
    mesh: Mesh
    triangle_count: int
    raw_volume_mm3: float
    bounds: BoundingBox
    bounds_mm: Tuple[Tuple[float, float, float], Tuple[float, float, float]]

    # --- Scaling ---
    volume_scale: float
    scaled_volume_mm3: float

    # --- Final output ---
    weight_grams: float
    mesh_report: Dict[str, Any]
