# tests/test_shapes.py
# Tests for quadric shape defaults and triangle mesh array handling
# Exists to pin the sphere's radius-derived clip planes and the mesh index count check
# RELEVANT FILES: python/pbrtscene/shapes.py, python/pbrtscene/_validate.py

from __future__ import annotations

import numpy as np
import pytest

from pbrtscene.errors import IndexCountError, UnrecognizedTypeError
from pbrtscene.shapes import Cylinder, Disk, Shape, Sphere, TriangleMesh


def test_sphere_defaults(params) -> None:
    assert Shape.from_params("sphere", params()) == Sphere(alpha=1.0, radius=1.0, zmin=-1.0, zmax=1.0, phimax=360.0)


def test_sphere_clip_planes_follow_radius(params) -> None:
    sphere = Shape.from_params("sphere", params({"float radius": 2}))
    assert sphere.zmin == pytest.approx(-2.0)
    assert sphere.zmax == pytest.approx(2.0)


def test_sphere_clip_planes_default_independently(params) -> None:
    sphere = Shape.from_params("sphere", params({"float radius": 2, "float zmin": -0.5}))
    assert sphere.zmin == pytest.approx(-0.5)
    assert sphere.zmax == pytest.approx(2.0)


def test_cylinder_defaults(params) -> None:
    assert Shape.from_params("cylinder", params()) == Cylinder()


def test_disk_annulus(params) -> None:
    disk = Shape.from_params("disk", params({"float innerradius": 0.5, "float height": 1.5}))
    assert isinstance(disk, Disk)
    assert disk.innerradius == pytest.approx(0.5)
    assert disk.height == pytest.approx(1.5)
    assert disk.radius == pytest.approx(1.0)


def test_alpha_shared_by_every_shape(params) -> None:
    for tag in ("cylinder", "disk", "sphere", "trianglemesh"):
        shape = Shape.from_params(tag, params({"float alpha": 0.25}))
        assert shape.TAG == tag
        assert shape.alpha == pytest.approx(0.25)


def test_trianglemesh_arrays(params) -> None:
    mesh = Shape.from_params(
        "trianglemesh",
        params(
            {
                "integer indices": [0, 1, 2, 0, 2, 3],
                "point3 P": [0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 1, 0],
                "point2 uv": [0, 0, 1, 0, 1, 1, 0, 1],
            }
        ),
    )
    assert isinstance(mesh, TriangleMesh)
    assert mesh.triangle_count == 2
    assert mesh.indices.dtype == np.int32
    assert mesh.positions.dtype == np.float32
    np.testing.assert_array_equal(mesh.indices, [0, 1, 2, 0, 2, 3])
    assert mesh.positions.shape == (12,)
    assert mesh.uvs.shape == (8,)
    assert mesh.normals.size == 0
    assert mesh.tangents.size == 0


def test_trianglemesh_arrays_are_read_only(params) -> None:
    mesh = Shape.from_params("trianglemesh", params({"integer indices": [0, 1, 2], "point3 P": [0] * 9}))
    with pytest.raises(ValueError):
        mesh.indices[0] = 5
    with pytest.raises(ValueError):
        mesh.positions[0] = 1.0


def test_empty_trianglemesh(params) -> None:
    mesh = Shape.from_params("trianglemesh", params())
    assert mesh.triangle_count == 0
    assert not mesh.indices.flags.writeable


def test_trianglemesh_rejects_partial_triangle(params) -> None:
    with pytest.raises(IndexCountError, match="multiple of 3") as info:
        Shape.from_params("trianglemesh", params({"integer indices": [0, 1, 2, 3]}))
    assert info.value.field == "indices"
    assert info.value.actual == 4


@pytest.mark.parametrize("tag", ["plymesh", "bilinearmesh", "curve", "Sphere"])
def test_unknown_shape(params, tag) -> None:
    with pytest.raises(UnrecognizedTypeError, match="Unknown shape type"):
        Shape.from_params(tag, params())


def test_trianglemesh_equality_compares_arrays(params) -> None:
    tri = {"integer indices": [0, 1, 2], "point3 P": [0, 0, 0, 1, 0, 0, 0, 1, 0]}
    mesh = Shape.from_params("trianglemesh", params(tri))
    assert mesh != Shape.from_params("trianglemesh", params())
    assert mesh == Shape.from_params("trianglemesh", params(tri))
    moved = dict(tri, **{"point3 P": [0, 0, 1, 1, 0, 1, 0, 1, 1]})
    assert mesh != Shape.from_params("trianglemesh", params(moved))
    assert mesh != Shape.from_params("trianglemesh", params(dict(tri, **{"float alpha": 0.5})))
    assert mesh != Sphere()


def test_trianglemesh_is_unhashable(params) -> None:
    with pytest.raises(TypeError):
        hash(Shape.from_params("trianglemesh", params()))
