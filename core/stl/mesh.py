from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

Point3 = Tuple[float, float, float]
AXES = ("x", "y", "z")


@dataclass(frozen=True)
class BoundingBox:
    minimum: Point3
    maximum: Point3

    @classmethod
    def empty(cls) -> "BoundingBox":
        """Box of a mesh with no vertices (min=+inf, max=-inf)."""
        inf = float("inf")
        return cls(minimum=(inf, inf, inf), maximum=(-inf, -inf, -inf))

    @property
    def is_empty(self) -> bool:
        return any(lo > hi for lo, hi in zip(self.minimum, self.maximum))

    @property
    def extents(self) -> Point3:
        """(x, y, z) size in mm. An empty box has zero extents."""
        if self.is_empty:
            return (0.0, 0.0, 0.0)
        x, y, z = (hi - lo for lo, hi in zip(self.minimum, self.maximum))
        return (x, y, z)


@dataclass(frozen=True, eq=False)
class Mesh:
    """
    Decoded STL surface.

    triangles: read-only float64 array shaped (N, 3, 3) -> triangle, vertex, xyz.
    Winding order is kept exactly as stored in the file.
    """

    triangles: np.ndarray

    def __post_init__(self) -> None:
        tris = np.array(self.triangles, dtype=np.float64).reshape(-1, 3, 3)
        tris.flags.writeable = False
        object.__setattr__(self, "triangles", tris)

    def __len__(self) -> int:
        return int(self.triangles.shape[0])

    @property
    def vertices(self) -> np.ndarray:
        """All triangle corners as (N*3, 3); shared corners are repeated."""
        return self.triangles.reshape(-1, 3)
