"""Tests for core.stl.volume -- signed tetrahedra volume and bounding box."""

from __future__ import annotations

import pytest

from conftest import box_triangles, cube_triangles, flip_winding, make_ascii_stl, make_binary_stl
from core.stl import Mesh, decode_stl, measure_mesh, signed_volume


def test_cube_volume_and_bbox(cube_binary):
    volume, bbox = measure_mesh(decode_stl(cube_binary))
    assert volume == pytest.approx(1000.0)
    assert bbox.minimum == (0.0, 0.0, 0.0)
    assert bbox.maximum == (10.0, 10.0, 10.0)
    assert bbox.extents == (10.0, 10.0, 10.0)


def test_box_volume():
    volume, bbox = measure_mesh(Mesh(box_triangles(10.0, 20.0, 30.0)))
    assert volume == pytest.approx(6000.0)
    assert bbox.extents == pytest.approx((10.0, 20.0, 30.0))


def test_translation_does_not_change_volume():
    volume, bbox = measure_mesh(Mesh(box_triangles(10.0, 10.0, 10.0, origin=(-37.5, 12.0, 100.0))))
    assert volume == pytest.approx(1000.0)
    assert bbox.minimum == pytest.approx((-37.5, 12.0, 100.0))
    assert bbox.maximum == pytest.approx((-27.5, 22.0, 110.0))


def test_inward_winding_reports_positive_volume():
    mesh = Mesh(flip_winding(cube_triangles()))
    assert signed_volume(mesh) == pytest.approx(-1000.0)
    volume, _ = measure_mesh(mesh)
    assert volume == pytest.approx(1000.0)


def test_binary_and_ascii_agree():
    tris = box_triangles(12.5, 3.25, 7.0, origin=(1.0, -2.0, 0.5))
    v_bin, box_bin = measure_mesh(decode_stl(make_binary_stl(tris)))
    v_txt, box_txt = measure_mesh(decode_stl(make_ascii_stl(tris)))
    assert v_bin == pytest.approx(v_txt)
    assert box_bin.minimum == pytest.approx(box_txt.minimum)
    assert box_bin.maximum == pytest.approx(box_txt.maximum)


def test_open_mesh_is_accepted_best_effort():
    tris = cube_triangles()
    del tris[2]  # one top triangle: its tetrahedron holds 1/6 of the cube
    volume, _ = measure_mesh(Mesh(tris))
    assert volume == pytest.approx(1000.0 - 1000.0 / 6.0)


def test_empty_mesh():
    volume, bbox = measure_mesh(Mesh([]))
    assert volume == 0.0
    assert bbox.is_empty
    assert bbox.extents == (0.0, 0.0, 0.0)
