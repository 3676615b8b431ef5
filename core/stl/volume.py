from __future__ import annotations

from typing import Tuple

import numpy as np

from core.stl.mesh import BoundingBox, Mesh


def signed_volume(mesh: Mesh) -> float:
    """
    Sum of signed tetrahedra (origin, A, B, C) over all triangles, in mm^3.

    For a closed, consistently wound mesh this is the enclosed volume no matter
    where the mesh sits relative to the origin. Outward winding gives a
    positive sum, inward winding a negative one.
    """
    if len(mesh) == 0:
        return 0.0
    tris = mesh.triangles
    a = tris[:, 0, :]
    b = tris[:, 1, :]
    c = tris[:, 2, :]
    per_face = np.einsum("ij,ij->i", a, np.cross(b, c))
    return float(per_face.sum() / 6.0)


def bounding_box(mesh: Mesh) -> BoundingBox:
    if len(mesh) == 0:
        return BoundingBox.empty()
    verts = mesh.vertices
    lo = verts.min(axis=0)
    hi = verts.max(axis=0)
    return BoundingBox(
        minimum=(float(lo[0]), float(lo[1]), float(lo[2])),
        maximum=(float(hi[0]), float(hi[1]), float(hi[2])),
    )


def measure_mesh(mesh: Mesh) -> Tuple[float, BoundingBox]:
    """
    Return (volume_mm3, bounding_box) for a mesh.

    The volume is the absolute signed-tetrahedra sum, so meshes wound either
    way round report the same value. Open or self-intersecting meshes are not
    rejected; they just give an approximate volume. An empty mesh gives 0.0 and
    an empty box.
    """
    return abs(signed_volume(mesh)), bounding_box(mesh)
