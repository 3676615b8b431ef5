from core.stl.mesh import BoundingBox, Mesh
from core.stl.decode import decode_stl
from core.stl.volume import bounding_box, measure_mesh, signed_volume
from core.stl.scale import axis_scales, scale_volume, volume_scale_factor
from core.stl.analyze import inspect_mesh

__all__ = [
    "BoundingBox",
    "Mesh",
    "decode_stl",
    "bounding_box",
    "measure_mesh",
    "signed_volume",
    "axis_scales",
    "scale_volume",
    "volume_scale_factor",
    "inspect_mesh",
]
