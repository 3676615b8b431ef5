from core.state import WeightState
from core.stl import inspect_mesh


def inspect_mesh_node(state: WeightState) -> WeightState:
    """Optional integrity report (watertight, open edges, ...). Does not touch the estimate."""
    state["mesh_report"] = inspect_mesh(state["mesh"])
    return state
