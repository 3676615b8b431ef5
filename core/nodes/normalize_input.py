from __future__ import annotations

from typing import Any

from core.errors import InvalidInfillError, InvalidTargetError, UnknownMaterialError, WeightError
from core.materials import material_density
from core.state import WeightState


def _to_float(x: Any) -> float | None:
    try:
        if x is None or isinstance(x, bool):
            return None
        return float(x)
    except (TypeError, ValueError):
        return None


def normalize_input_node(state: WeightState) -> WeightState:
    """
    Coerce the numeric request fields and resolve the material density.

    Range checks happen in the components themselves (scale / weight); this node
    only rejects values that are not numbers at all.
    """
    for axis in ("x", "y", "z"):
        key = f"{axis}_mm"
        value = _to_float(state.get(key))
        if value is None:
            raise InvalidTargetError(axis, state.get(key))
        state[key] = value

    infill = _to_float(state.get("infill_percentage"))
    if infill is None:
        raise InvalidInfillError(state.get("infill_percentage"))
    state["infill_percentage"] = infill

    shell = _to_float(state.get("shell_fraction", 0.0))
    if shell is None:
        raise WeightError(f"Shell fraction must be a number (got {state.get('shell_fraction')!r})")
    state["shell_fraction"] = shell

    # An explicit density wins over a material name
    density = _to_float(state.get("density_g_cm3"))
    if density is None:
        material = state.get("material")
        if material is None or material == "":
            raise WeightError("Either a material name or a density must be given")
        if not isinstance(material, str):
            raise UnknownMaterialError(material)
        density = material_density(material)
        state["material"] = material.strip().upper()
    state["density_g_cm3"] = density

    state["inspect_mesh"] = bool(state.get("inspect_mesh", False))
    return state
