import sys
from pathlib import Path

from core.stl import decode_stl, inspect_mesh, measure_mesh


def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/stl_inspect.py path/to/file.stl")
        return 1
    mesh = decode_stl(Path(sys.argv[1]).read_bytes())
    volume, bbox = measure_mesh(mesh)
    print(f"volume_mm3: {volume:.3f}")
    print(f"extents_mm: {bbox.extents}")
    for k, v in inspect_mesh(mesh).items():
        print(f"{k}: {v}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
