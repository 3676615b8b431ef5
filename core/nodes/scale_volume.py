from core.state import WeightState
from core.stl.scale import check_targets, scale_volume, volume_scale_factor


def scale_volume_node(state: WeightState) -> WeightState:
    """
    Stretch the raw volume so the mesh bbox matches the requested X/Y/Z.

    A mesh without triangles has no extents to scale; once the targets are
    known to be valid it simply weighs nothing.
    """
    target = (state["x_mm"], state["y_mm"], state["z_mm"])
    bbox = state["bounds"]

    if bbox.is_empty:
        check_targets(target)
        state["volume_scale"] = 0.0
        state["scaled_volume_mm3"] = 0.0
        return state

    state["volume_scale"] = volume_scale_factor(bbox, target)
    state["scaled_volume_mm3"] = scale_volume(state["raw_volume_mm3"], bbox, target)
    return state
