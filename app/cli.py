import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from app.config import get_api_host, get_api_port, get_default_material, get_log_level, load_env
from app.logging_config import setup_logging
from core.errors import WeightBuddyError
from core.materials import MATERIAL_DENSITIES
from core.weight import ORIGINAL_SHELL_FRACTION
from core.workflow import weight_app

logger = logging.getLogger("weightbuddy.cli")

EXIT_IO_ERROR = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    materials = ", ".join(m.lower() for m in MATERIAL_DENSITIES)
    parser = argparse.ArgumentParser(
        prog="weightbuddy",
        description="Estimate the printed weight (grams) of an STL model scaled to the given size",
    )
    parser.add_argument("stl_file", type=Path, nargs="?", help="Path to a binary or ASCII STL file")
    parser.add_argument("x_dim", type=float, nargs="?", help="Target X size in mm")
    parser.add_argument("y_dim", type=float, nargs="?", help="Target Y size in mm")
    parser.add_argument("z_dim", type=float, nargs="?", help="Target Z size in mm")
    parser.add_argument("infill_percentage", type=float, nargs="?", help="Infill percentage (0-100)")
    parser.add_argument(
        "material",
        type=str,
        nargs="?",
        default=None,
        help=f"Filament material ({materials}); defaults to WEIGHTBUDDY_DEFAULT_MATERIAL or pla",
    )
    parser.add_argument(
        "--shell",
        action="store_true",
        help=f"Count {ORIGINAL_SHELL_FRACTION:.0%} of the volume as solid walls/top/bottom instead of pure infill",
    )
    parser.add_argument(
        "--inspect",
        action="store_true",
        help="Include a mesh integrity report (watertight, open edges, ...) in the output",
    )
    parser.add_argument("--api", action="store_true", help="Start the HTTP API server instead")
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    return parser


def run_api() -> int:
    import uvicorn

    host, port = get_api_host(), get_api_port()
    logger.info("Starting API server on http://%s:%d", host, port)
    uvicorn.run("app.main:app", host=host, port=port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(get_log_level(), log_file=args.log_file)

    if args.api:
        return run_api()

    positional = (args.stl_file, args.x_dim, args.y_dim, args.z_dim, args.infill_percentage)
    if any(p is None for p in positional):
        parser.print_usage(sys.stderr)
        print("error: stl_file, x_dim, y_dim, z_dim and infill_percentage are required", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        data = args.stl_file.read_bytes()
    except OSError as exc:
        print(f"error: cannot read {args.stl_file}: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    material = (args.material or "").strip() or get_default_material()

    try:
        result = weight_app.invoke({
            "stl_bytes": data,
            "x_mm": args.x_dim,
            "y_mm": args.y_dim,
            "z_mm": args.z_dim,
            "infill_percentage": args.infill_percentage,
            "material": material,
            "shell_fraction": ORIGINAL_SHELL_FRACTION if args.shell else 0.0,
            "inspect_mesh": args.inspect,
        })
    except WeightBuddyError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    logger.debug(
        "%d triangles, raw %.3f mm3, scale x%.6f, scaled %.3f mm3",
        result["triangle_count"],
        result["raw_volume_mm3"],
        result["volume_scale"],
        result["scaled_volume_mm3"],
    )

    output = {"weight_grams": f"{result['weight_grams']:.2f}"}
    if args.inspect:
        output["mesh"] = result.get("mesh_report", {})
    print(json.dumps(output, separators=(",", ":")))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
