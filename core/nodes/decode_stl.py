from core.state import WeightState
from core.stl import decode_stl


def decode_stl_node(state: WeightState) -> WeightState:
    mesh = decode_stl(state.get("stl_bytes") or b"")
    state["mesh"] = mesh
    state["triangle_count"] = len(mesh)
    return state
