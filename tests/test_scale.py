"""Tests for core.stl.scale -- mapping a bbox onto target dimensions."""

from __future__ import annotations

import math

import pytest

from conftest import box_triangles, cube_triangles
from core.errors import DegenerateAxisError, InvalidTargetError, ScaleError
from core.stl import Mesh, axis_scales, measure_mesh, scale_volume, volume_scale_factor
from core.stl.mesh import BoundingBox

CUBE_BOX = BoundingBox(minimum=(0.0, 0.0, 0.0), maximum=(10.0, 10.0, 10.0))


def test_identity_scaling_keeps_volume():
    volume, bbox = measure_mesh(Mesh(box_triangles(12.0, 7.5, 3.0, origin=(4.0, 4.0, 4.0))))
    target = bbox.extents
    assert volume_scale_factor(bbox, target) == 1.0
    assert scale_volume(volume, bbox, target) == volume


def test_uniform_upscale():
    assert volume_scale_factor(CUBE_BOX, (100.0, 100.0, 100.0)) == pytest.approx(1000.0)
    assert scale_volume(1000.0, CUBE_BOX, (100.0, 100.0, 100.0)) == pytest.approx(1_000_000.0)


@pytest.mark.parametrize("k", [0.5, 2.0, 3.0, 7.25])
def test_single_axis_scales_volume_linearly(k):
    base = scale_volume(1000.0, CUBE_BOX, (10.0, 10.0, 10.0))
    stretched = scale_volume(1000.0, CUBE_BOX, (10.0 * k, 10.0, 10.0))
    assert stretched == pytest.approx(base * k)


def test_axis_scales_are_independent():
    assert axis_scales(CUBE_BOX, (20.0, 5.0, 10.0)) == pytest.approx((2.0, 0.5, 1.0))


@pytest.mark.parametrize("axis_index, axis", [(0, "x"), (1, "y"), (2, "z")])
@pytest.mark.parametrize("bad", [0.0, -10.0, math.nan, math.inf])
def test_invalid_target(axis_index, axis, bad):
    target = [100.0, 100.0, 100.0]
    target[axis_index] = bad
    with pytest.raises(InvalidTargetError) as exc_info:
        volume_scale_factor(CUBE_BOX, target)
    assert exc_info.value.axis == axis


def test_flat_mesh_has_degenerate_axis():
    flat = Mesh([((0.0, 0.0, 0.0), (10.0, 0.0, 0.0), (0.0, 10.0, 0.0))])
    _, bbox = measure_mesh(flat)
    with pytest.raises(DegenerateAxisError) as exc_info:
        volume_scale_factor(bbox, (10.0, 10.0, 10.0))
    assert exc_info.value.axis == "z"
    assert "Z" in str(exc_info.value)


def test_invalid_target_reported_before_degenerate_axis():
    flat = BoundingBox(minimum=(0.0, 0.0, 0.0), maximum=(10.0, 10.0, 0.0))
    with pytest.raises(InvalidTargetError):
        volume_scale_factor(flat, (10.0, 0.0, 10.0))


def test_scale_errors_are_value_errors():
    assert issubclass(InvalidTargetError, ScaleError)
    assert issubclass(DegenerateAxisError, ScaleError)
    assert issubclass(ScaleError, ValueError)


def test_wrong_number_of_targets():
    with pytest.raises(ValueError):
        volume_scale_factor(CUBE_BOX, (10.0, 10.0))


def test_cube_fixture_extents():
    _, bbox = measure_mesh(Mesh(cube_triangles()))
    assert volume_scale_factor(bbox, (10.0, 10.0, 10.0)) == 1.0
