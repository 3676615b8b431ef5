from __future__ import annotations

from typing import Optional

from langgraph.graph import StateGraph, START, END

from core.state import WeightState

from core.nodes.normalize_input import normalize_input_node
from core.nodes.decode_stl import decode_stl_node
from core.nodes.measure_volume import measure_volume_node
from core.nodes.inspect_mesh import inspect_mesh_node
from core.nodes.scale_volume import scale_volume_node
from core.nodes.estimate_weight import estimate_weight_node


def build_weight_app():
    """
    bytes -> mesh -> (volume, bbox) -> scaled volume -> grams.

    Every node raises on the first invalid input; the exception comes straight
    out of invoke() and no partial result is returned.
    """
    graph = StateGraph(WeightState)

    # ----------------------------
    # 1) Register nodes
    # ----------------------------
    graph.add_node("NORMALIZE_INPUT", normalize_input_node)
    graph.add_node("DECODE_STL", decode_stl_node)
    graph.add_node("MEASURE_VOLUME", measure_volume_node)
    graph.add_node("INSPECT_MESH", inspect_mesh_node)
    graph.add_node("SCALE_VOLUME", scale_volume_node)
    graph.add_node("ESTIMATE_WEIGHT", estimate_weight_node)

    # ----------------------------
    # 2) Wire edges
    # ----------------------------
    graph.add_edge(START, "NORMALIZE_INPUT")
    graph.add_edge("NORMALIZE_INPUT", "DECODE_STL")
    graph.add_edge("DECODE_STL", "MEASURE_VOLUME")

    # Integrity report only when asked for
    graph.add_conditional_edges(
        "MEASURE_VOLUME",
        lambda s: "INSPECT" if s.get("inspect_mesh") else "CONTINUE",
        {
            "INSPECT": "INSPECT_MESH",
            "CONTINUE": "SCALE_VOLUME",
        },
    )
    graph.add_edge("INSPECT_MESH", "SCALE_VOLUME")

    graph.add_edge("SCALE_VOLUME", "ESTIMATE_WEIGHT")
    graph.add_edge("ESTIMATE_WEIGHT", END)

    return graph.compile()


weight_app = build_weight_app()


def estimate_weight_grams(
    stl_bytes: bytes,
    x_mm: float,
    y_mm: float,
    z_mm: float,
    infill_percentage: float,
    material: Optional[str] = None,
    density_g_cm3: Optional[float] = None,
    shell_fraction: float = 0.0,
) -> float:
    """Run the whole pipeline and return only the mass in grams."""
    result = weight_app.invoke({
        "stl_bytes": stl_bytes,
        "x_mm": x_mm,
        "y_mm": y_mm,
        "z_mm": z_mm,
        "infill_percentage": infill_percentage,
        "material": material,
        "density_g_cm3": density_g_cm3,
        "shell_fraction": shell_fraction,
    })
    return float(result["weight_grams"])
