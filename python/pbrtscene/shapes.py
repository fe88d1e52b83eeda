# python/pbrtscene/shapes.py
# Geometric shapes parsed from a Shape directive (quadrics and triangle meshes)
# Exists to apply per-shape defaults, the sphere's radius-derived clip planes and mesh array checks
# RELEVANT FILES:python/pbrtscene/_validate.py,python/pbrtscene/scene.py,tests/test_shapes.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar, Dict

import numpy as np

from ._validate import check_multiple, readonly_array, select
from .params import ParameterSource


def _empty(dtype) -> Callable[[], np.ndarray]:
    return lambda: readonly_array(None, dtype)


@dataclass(frozen=True)
class Shape:
    TAG: ClassVar[str] = ""
    # Mask that cuts away regions of the surface.
    alpha: float = 1.0

    @classmethod
    def from_params(cls, ty: str, params: ParameterSource) -> "Shape":
        alpha = params.float("alpha", 1.0)
        return select("shape", ty, _SHAPE_TYPES)(params, alpha)


@dataclass(frozen=True)
class Cylinder(Shape):
    """Always oriented along the z axis."""

    TAG: ClassVar[str] = "cylinder"
    radius: float = 1.0
    zmin: float = -1.0
    zmax: float = 1.0
    # Maximum extent in phi, degrees.
    phimax: float = 360.0


@dataclass(frozen=True)
class Disk(Shape):
    """Perpendicular to the z axis, centered at x=0, y=0 in object space."""

    TAG: ClassVar[str] = "disk"
    # Position along the z axis.
    height: float = 0.0
    radius: float = 1.0
    # Nonzero makes the disk an annulus.
    innerradius: float = 0.0
    phimax: float = 360.0


@dataclass(frozen=True)
class Sphere(Shape):
    """Centered at the object-space origin.

    ``zmin`` and ``zmax`` default to ``-radius`` and ``radius`` independently.
    """

    TAG: ClassVar[str] = "sphere"
    radius: float = 1.0
    zmin: float = -1.0
    zmax: float = 1.0
    phimax: float = 360.0


@dataclass(frozen=True, eq=False)
class TriangleMesh(Shape):
    """Indexed triangle mesh.

    Every successive triplet in ``indices`` addresses the three vertices of one
    triangle. Vertex counts are not cross-checked against the indices here.
    """

    TAG: ClassVar[str] = "trianglemesh"
    indices: np.ndarray = field(default_factory=_empty(np.int32))
    positions: np.ndarray = field(default_factory=_empty(np.float32))
    normals: np.ndarray = field(default_factory=_empty(np.float32))
    tangents: np.ndarray = field(default_factory=_empty(np.float32))
    uvs: np.ndarray = field(default_factory=_empty(np.float32))

    # Arrays are compared by value; meshes are unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.alpha == other.alpha and all(  # type: ignore[attr-defined]
            np.array_equal(getattr(self, name), getattr(other, name)) for name in _MESH_ARRAYS
        )

    @property
    def triangle_count(self) -> int:
        return int(self.indices.size // 3)


_MESH_ARRAYS = ("indices", "positions", "normals", "tangents", "uvs")


def _cylinder(params: ParameterSource, alpha: float) -> Shape:
    return Cylinder(
        alpha=alpha,
        radius=params.float("radius", 1.0),
        zmin=params.float("zmin", -1.0),
        zmax=params.float("zmax", 1.0),
        phimax=params.float("phimax", 360.0),
    )


def _disk(params: ParameterSource, alpha: float) -> Shape:
    return Disk(
        alpha=alpha,
        height=params.float("height", 0.0),
        radius=params.float("radius", 1.0),
        innerradius=params.float("innerradius", 0.0),
        phimax=params.float("phimax", 360.0),
    )


def _sphere(params: ParameterSource, alpha: float) -> Shape:
    radius = params.float("radius", 1.0)
    return Sphere(
        alpha=alpha,
        radius=radius,
        zmin=params.float("zmin", -radius),
        zmax=params.float("zmax", radius),
        phimax=params.float("phimax", 360.0),
    )


def _trianglemesh(params: ParameterSource, alpha: float) -> Shape:
    indices = readonly_array(params.integers("indices"), np.int32)
    check_multiple(indices, 3, "shape", "trianglemesh", "indices")
    return TriangleMesh(
        alpha=alpha,
        indices=indices,
        positions=readonly_array(params.floats("P"), np.float32),
        normals=readonly_array(params.floats("N"), np.float32),
        tangents=readonly_array(params.floats("S"), np.float32),
        uvs=readonly_array(params.floats("uv"), np.float32),
    )


_SHAPE_TYPES: Dict[str, Callable[[ParameterSource, float], Shape]] = {
    "cylinder": _cylinder,
    "disk": _disk,
    "sphere": _sphere,
    "trianglemesh": _trianglemesh,
}
