from core.state import WeightState
from core.weight import estimate_mass


def estimate_weight_node(state: WeightState) -> WeightState:
    state["weight_grams"] = estimate_mass(
        state["scaled_volume_mm3"],
        state["infill_percentage"],
        state["density_g_cm3"],
        shell_fraction=state.get("shell_fraction", 0.0),
    )
    return state
