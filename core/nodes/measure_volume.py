from core.state import WeightState
from core.stl import measure_mesh


def measure_volume_node(state: WeightState) -> WeightState:
    """Store the raw (unscaled) volume and bounding box of the decoded mesh."""
    volume, bbox = measure_mesh(state["mesh"])
    state["raw_volume_mm3"] = volume
    state["bounds"] = bbox
    state["bounds_mm"] = (bbox.minimum, bbox.maximum)
    return state
