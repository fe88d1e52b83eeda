# python/pbrtscene/accelerator.py
# Spatial acceleration structure settings parsed from an Accelerator directive
# Exists to validate BVH and k-d tree build parameters before the renderer builds them
# RELEVANT FILES:python/pbrtscene/enums.py,python/pbrtscene/_validate.py,tests/test_accelerator.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Dict

from ._validate import select
from .enums import BvhSplitMethod
from .params import ParameterSource


@dataclass(frozen=True)
class Accelerator:
    TAG: ClassVar[str] = ""

    @classmethod
    def from_params(cls, ty: str, params: ParameterSource) -> "Accelerator":
        return select("accelerator", ty, _ACCELERATOR_TYPES)(params)


@dataclass(frozen=True)
class BvhAccelerator(Accelerator):
    TAG: ClassVar[str] = "bvh"
    # Maximum number of primitives in a node.
    max_node_prims: int = 4
    split_method: BvhSplitMethod = BvhSplitMethod.SAH


@dataclass(frozen=True)
class KdTreeAccelerator(Accelerator):
    TAG: ClassVar[str] = "kdtree"
    # Estimated cost of one ray-object intersection.
    intersect_cost: int = 5
    # Estimated cost of traversing a ray through one node.
    traversal_cost: int = 1
    # Bonus for nodes that represent empty space.
    empty_bonus: float = 0.5
    max_prims: int = 1
    # Negative means the renderer picks a depth from the primitive count.
    max_depth: int = -1


def _bvh(params: ParameterSource) -> Accelerator:
    method = params.string("splitmethod")
    return BvhAccelerator(
        max_node_prims=params.integer("maxnodeprims", 4),
        split_method=BvhSplitMethod.default() if method is None else BvhSplitMethod.parse(method, "splitmethod"),
    )


def _kdtree(params: ParameterSource) -> Accelerator:
    return KdTreeAccelerator(
        intersect_cost=params.integer("intersectcost", 5),
        traversal_cost=params.integer("traversalcost", 1),
        empty_bonus=params.float("emptybonus", 0.5),
        max_prims=params.integer("maxprims", 1),
        max_depth=params.integer("maxdepth", -1),
    )


_ACCELERATOR_TYPES: Dict[str, Callable[[ParameterSource], Accelerator]] = {
    "bvh": _bvh,
    "kdtree": _kdtree,
}
