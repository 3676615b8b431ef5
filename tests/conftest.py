from __future__ import annotations

import struct
from typing import List, Sequence, Tuple

import pytest

Vec = Tuple[float, float, float]
Tri = Tuple[Vec, Vec, Vec]

# Outward (counter-clockwise seen from outside) faces of a box, as corner indices
_BOX_FACES = [
    (0, 2, 1), (0, 3, 2),  # bottom  -z
    (4, 5, 6), (4, 6, 7),  # top     +z
    (0, 1, 5), (0, 5, 4),  # front   -y
    (3, 7, 6), (3, 6, 2),  # back    +y
    (0, 4, 7), (0, 7, 3),  # left    -x
    (1, 2, 6), (1, 6, 5),  # right   +x
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def box_triangles(sx: float = 10.0, sy: float = 10.0, sz: float = 10.0, origin: Vec = (0.0, 0.0, 0.0)) -> List[Tri]:
    """12 outward-wound triangles of an axis-aligned box starting at origin."""
    ox, oy, oz = origin
    corners = [
        (ox, oy, oz),
        (ox + sx, oy, oz),
        (ox + sx, oy + sy, oz),
        (ox, oy + sy, oz),
        (ox, oy, oz + sz),
        (ox + sx, oy, oz + sz),
        (ox + sx, oy + sy, oz + sz),
        (ox, oy + sy, oz + sz),
    ]
    return [(corners[a], corners[b], corners[c]) for a, b, c in _BOX_FACES]


def cube_triangles(size: float = 10.0) -> List[Tri]:
    """12 triangles forming a cube [0,size] x [0,size] x [0,size]."""
    return box_triangles(size, size, size)


def flip_winding(triangles: Sequence[Tri]) -> List[Tri]:
    return [(a, c, b) for a, b, c in triangles]


def make_binary_stl(triangles: Sequence[Tri], header: bytes = b"") -> bytes:
    """Create binary STL bytes from a list of triangle vertex tuples."""
    header = header[:80].ljust(80, b"\x00")
    count = struct.pack("<I", len(triangles))
    body = b""
    for v1, v2, v3 in triangles:
        normal = struct.pack("<3f", 0.0, 0.0, 0.0)
        verts = struct.pack("<9f", *v1, *v2, *v3)
        attr = struct.pack("<H", 0)
        body += normal + verts + attr
    return header + count + body


def make_ascii_stl(triangles: Sequence[Tri], name: str = "model") -> bytes:
    lines = [f"solid {name}"]
    for tri in triangles:
        lines.append("  facet normal 0 0 0")
        lines.append("    outer loop")
        for x, y, z in tri:
            lines.append(f"      vertex {x!r} {y!r} {z!r}")
        lines.append("    endloop")
        lines.append("  endfacet")
    lines.append(f"endsolid {name}")
    return ("\n".join(lines) + "\n").encode("ascii")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cube_binary() -> bytes:
    return make_binary_stl(cube_triangles())


@pytest.fixture
def cube_ascii() -> bytes:
    return make_ascii_stl(cube_triangles(), name="cube")
