"""
STL decoding (binary + ASCII) straight from a byte buffer.

Binary layout:
  - 80 byte header (free text, may start with "solid")
  - uint32 little-endian triangle count
  - per triangle: normal (3 x f32), 3 vertices (9 x f32), uint16 attribute

The binary reading is only trusted when the declared count accounts for the
whole buffer. Anything else is read as ASCII text.
"""
from __future__ import annotations

import math
from typing import List

import numpy as np

from core.errors import EmptyStlError, MalformedStlError
from core.stl.mesh import Mesh

HEADER_BYTES = 80
COUNT_BYTES = 4
RECORD_BYTES = 50

_RECORD_DTYPE = np.dtype([
    ("normal", "<f4", (3,)),
    ("vertices", "<f4", (3, 3)),
    ("attribute", "<u2"),
])


def _binary_triangle_count(data: bytes) -> int | None:
    """Return the declared triangle count if the buffer is laid out as binary STL."""
    prefix = HEADER_BYTES + COUNT_BYTES
    if len(data) < prefix:
        return None
    count = int.from_bytes(data[HEADER_BYTES:prefix], "little", signed=False)
    if prefix + RECORD_BYTES * count != len(data):
        return None
    return count


def _decode_binary(data: bytes, count: int) -> Mesh:
    if count == 0:
        return Mesh(np.empty((0, 3, 3)))
    records = np.frombuffer(data, dtype=_RECORD_DTYPE, count=count, offset=HEADER_BYTES + COUNT_BYTES)
    tris = records["vertices"].astype(np.float64)
    if not np.isfinite(tris).all():
        raise MalformedStlError("Binary STL contains non-finite vertex coordinates")
    return Mesh(tris)


def _parse_coordinate(token: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise MalformedStlError(f"Invalid vertex coordinate: {token!r}") from None
    if not math.isfinite(value):
        raise MalformedStlError(f"Non-finite vertex coordinate: {token!r}")
    return value


def _body_tokens(text: str) -> List[str]:
    """
    Tokens after the `solid <name>` header.

    The name runs to the end of the first line, so it may hold any words
    (including keywords). A file written on a single line ends its name at
    the first `facet normal` pair instead.
    """
    first_line, _, rest = text.partition("\n")
    header = first_line.split()
    for j in range(1, len(header) - 1):
        if header[j].lower() == "facet" and header[j + 1].lower() == "normal":
            return header[j:] + rest.split()
    return rest.split()


def _decode_ascii(data: bytes) -> Mesh:
    text = data.decode("utf-8-sig", errors="replace").lstrip()
    if not text[:5].lower() == "solid":
        raise MalformedStlError(
            f"Byte length {len(data)} does not match a binary STL and the data is not ASCII STL"
        )
    tokens = _body_tokens(text)

    triangles: List[List[List[float]]] = []
    current: List[List[float]] | None = None
    seen_endsolid = False

    i = 0
    n = len(tokens)
    while i < n:
        word = tokens[i].lower()
        i += 1

        if word == "endsolid":
            if current is not None:
                raise MalformedStlError(f"Facet {len(triangles) + 1} is missing 'endfacet'")
            # the rest is the solid name again
            seen_endsolid = True
            break
        elif word == "facet":
            if current is not None:
                raise MalformedStlError(f"Facet {len(triangles) + 1} is missing 'endfacet'")
            current = []
        elif word == "vertex":
            if current is None:
                raise MalformedStlError("'vertex' found outside of a facet")
            if i + 3 > n:
                raise MalformedStlError("Truncated vertex at end of file")
            current.append([_parse_coordinate(t) for t in tokens[i:i + 3]])
            i += 3
        elif word == "endfacet":
            if current is None:
                raise MalformedStlError("'endfacet' without a matching 'facet'")
            if len(current) != 3:
                raise MalformedStlError(
                    f"Facet {len(triangles) + 1} has {len(current)} vertices, expected 3"
                )
            triangles.append(current)
            current = None

    if current is not None:
        raise MalformedStlError(f"Facet {len(triangles) + 1} is missing 'endfacet'")
    if not triangles and not seen_endsolid:
        raise MalformedStlError("ASCII STL contains no facets")

    return Mesh(np.asarray(triangles, dtype=np.float64).reshape(-1, 3, 3))


def decode_stl(data: bytes) -> Mesh:
    """
    Decode STL bytes into a Mesh.

    Raises EmptyStlError for a zero-length buffer and MalformedStlError when
    neither the binary nor the ASCII reading holds up. Never returns a
    partially decoded mesh.
    """
    data = bytes(data)
    if not data:
        raise EmptyStlError()

    count = _binary_triangle_count(data)
    if count is not None:
        return _decode_binary(data, count)
    return _decode_ascii(data)
