import logging
from typing import Optional

from fastapi import FastAPI, UploadFile, File, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_cors_origins, get_default_material, get_log_level, load_env
from app.logging_config import setup_logging
from core.errors import WeightBuddyError
from core.materials import MATERIAL_DENSITIES
from core.weight import ORIGINAL_SHELL_FRACTION
from core.workflow import weight_app

load_env()
setup_logging(get_log_level())

logger = logging.getLogger("weightbuddy.api")

app = FastAPI(title="WeightBuddy")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)


def format_grams(weight: float) -> str:
    return f"{weight:.2f}"


@app.exception_handler(WeightBuddyError)
async def weightbuddy_error_handler(request: Request, exc: WeightBuddyError):
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"error": str(exc), "kind": type(exc).__name__},
    )


@app.get("/materials")
async def materials_endpoint():
    return JSONResponse({
        "default": get_default_material(),
        "densities_g_cm3": {name.lower(): d for name, d in MATERIAL_DENSITIES.items()},
    })


@app.post("/calculate_weight")
async def calculate_weight_endpoint(
    file: UploadFile = File(...),
    x_dim: float = Query(...),
    y_dim: float = Query(...),
    z_dim: float = Query(...),
    infill_percentage: float = Query(...),
    material: Optional[str] = Query(None),
    shell: bool = Query(False),
    inspect: bool = Query(False),
):
    contents = await file.read()
    if not contents:
        return JSONResponse(status_code=400, content={"error": "No STL file was uploaded", "kind": "EmptyUpload"})

    # Default material is a caller policy, not a core one
    material = (material or "").strip() or get_default_material()

    result = await run_in_threadpool(weight_app.invoke, {
        "stl_bytes": contents,
        "x_mm": x_dim,
        "y_mm": y_dim,
        "z_mm": z_dim,
        "infill_percentage": infill_percentage,
        "material": material,
        "shell_fraction": ORIGINAL_SHELL_FRACTION if shell else 0.0,
        "inspect_mesh": inspect,
    })

    logger.info(
        "%s: %d triangles, %.2f mm3 -> %.2f g (%s, %.1f%% infill)",
        file.filename,
        result["triangle_count"],
        result["scaled_volume_mm3"],
        result["weight_grams"],
        result["material"],
        result["infill_percentage"],
    )

    payload = {"weight_grams": format_grams(result["weight_grams"])}
    if inspect:
        payload["mesh"] = result.get("mesh_report", {})
    return JSONResponse(payload)
