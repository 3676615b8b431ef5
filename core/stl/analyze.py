from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

import numpy as np
import trimesh

from core.stl.mesh import Mesh
from core.stl.volume import bounding_box, signed_volume


@dataclass
class MeshReport:
    triangle_count: int
    vertex_count: int                    # after merging shared corners
    watertight: bool
    winding_consistent: bool
    is_volume: bool
    inward_winding: bool                 # signed volume < 0 (normals point inwards)

    # Mesh integrity diagnostics
    boundary_edges: int
    nonmanifold_edges: int
    degenerate_faces: int                # zero/near-zero area triangles
    mesh_issue: str

    surface_area_mm2: float
    bbox_mm: Tuple[float, float, float]  # (x, y, z)
    bounds_mm: Tuple[Tuple[float, float, float], Tuple[float, float, float]]  # (min), (max)


def to_trimesh(mesh: Mesh) -> trimesh.Trimesh:
    """Indexed trimesh built from the decoded triangle soup (duplicate corners merged)."""
    verts = mesh.vertices
    faces = np.arange(len(verts), dtype=np.int64).reshape(-1, 3)
    return trimesh.Trimesh(vertices=verts, faces=faces, process=True, validate=False)


def _edge_histogram_counts(tm: trimesh.Trimesh) -> tuple[int, int]:
    """Return (boundary_edges, nonmanifold_edges) computed from face edge usage counts."""
    if tm.faces is None or len(tm.faces) == 0:
        return 0, 0

    # edges_sorted: every face edge, direction normalised so (a,b) == (b,a)
    edges = np.asarray(tm.edges_sorted, dtype=np.int64)
    _, counts = np.unique(edges, axis=0, return_counts=True)

    boundary = int(np.sum(counts == 1))
    nonmanifold = int(np.sum(counts >= 3))
    return boundary, nonmanifold


def _degenerate_face_count(mesh: Mesh, eps: float = 1e-10) -> int:
    """Count triangles with near-zero area."""
    tris = mesh.triangles
    ab = tris[:, 1, :] - tris[:, 0, :]
    ac = tris[:, 2, :] - tris[:, 0, :]
    area2 = np.linalg.norm(np.cross(ab, ac), axis=1)  # 2*area
    return int(np.sum(area2 <= eps))


def _mesh_issue_summary(watertight: bool, is_volume: bool, boundary_edges: int, nonmanifold_edges: int, degenerate_faces: int) -> str:
    if watertight and is_volume:
        return "ok"

    parts = []
    if boundary_edges > 0:
        parts.append(f"holes/open rims (boundary edges): {boundary_edges}")
    if nonmanifold_edges > 0:
        parts.append(f"non-manifold edges: {nonmanifold_edges}")
    if degenerate_faces > 0:
        parts.append(f"degenerate triangles: {degenerate_faces}")
    if not is_volume:
        parts.append("not a valid closed volume (weight estimate may be unreliable)")

    if not parts:
        parts.append("mesh may be invalid (possible self-intersections/overlaps)")

    return "; ".join(parts)


def inspect_mesh(mesh: Mesh) -> Dict[str, Any]:
    """
    Integrity report for a decoded mesh. Nothing is repaired; the weight
    estimate never depends on this report.
    """
    box = bounding_box(mesh)
    if len(mesh) == 0:
        report = MeshReport(
            triangle_count=0,
            vertex_count=0,
            watertight=False,
            winding_consistent=False,
            is_volume=False,
            inward_winding=False,
            boundary_edges=0,
            nonmanifold_edges=0,
            degenerate_faces=0,
            mesh_issue="empty mesh (no triangles)",
            surface_area_mm2=0.0,
            bbox_mm=(0.0, 0.0, 0.0),
            bounds_mm=((0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
        )
        return asdict(report)

    tm = to_trimesh(mesh)

    watertight = bool(tm.is_watertight)
    is_volume = bool(tm.is_volume)
    boundary_edges, nonmanifold_edges = _edge_histogram_counts(tm)
    degenerate_faces = _degenerate_face_count(mesh)

    report = MeshReport(
        triangle_count=len(mesh),
        vertex_count=int(len(tm.vertices)),
        watertight=watertight,
        winding_consistent=bool(tm.is_winding_consistent),
        is_volume=is_volume,
        inward_winding=signed_volume(mesh) < 0,
        boundary_edges=boundary_edges,
        nonmanifold_edges=nonmanifold_edges,
        degenerate_faces=degenerate_faces,
        mesh_issue=_mesh_issue_summary(
            watertight=watertight,
            is_volume=is_volume,
            boundary_edges=boundary_edges,
            nonmanifold_edges=nonmanifold_edges,
            degenerate_faces=degenerate_faces,
        ),
        surface_area_mm2=float(tm.area),
        bbox_mm=box.extents,
        bounds_mm=(box.minimum, box.maximum),
    )
    return asdict(report)
