# python/pbrtscene/lights.py
# Light sources parsed from a LightSource directive
# Exists to validate light type tags and the infinite light's environment settings
# RELEVANT FILES:python/pbrtscene/_validate.py,python/pbrtscene/scene.py,tests/test_lights.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Optional, Tuple

from ._validate import fixed_floats, select
from .params import ParameterSource

Rgb = Tuple[float, float, float]


@dataclass(frozen=True)
class Light:
    """Light sources cast illumination in the scene."""

    TAG: ClassVar[str] = ""

    @classmethod
    def from_params(cls, ty: str, params: ParameterSource) -> "Light":
        return select("light", ty, _LIGHT_TYPES)(params)


@dataclass(frozen=True)
class DistantLight(Light):
    """Directional light "at infinity" arriving from a single direction."""

    TAG: ClassVar[str] = "distant"


@dataclass(frozen=True)
class GonioPhotometricLight(Light):
    TAG: ClassVar[str] = "goniometric"


@dataclass(frozen=True)
class InfiniteLight(Light):
    """Infinitely far away light that may illuminate from every direction.

    With neither ``filename`` nor ``l`` set the light emits uniform unit radiance.
    """

    TAG: ClassVar[str] = "infinite"
    # Environment map
    filename: Optional[str] = None
    # Spectral distribution of emission ("L")
    l: Optional[Rgb] = None


@dataclass(frozen=True)
class PointLight(Light):
    TAG: ClassVar[str] = "point"


@dataclass(frozen=True)
class ProjectionLight(Light):
    TAG: ClassVar[str] = "projection"


@dataclass(frozen=True)
class SpotLight(Light):
    TAG: ClassVar[str] = "spot"


def _infinite(params: ParameterSource) -> Light:
    return InfiniteLight(
        filename=params.string("filename"),
        l=fixed_floats(params, "L", 3, "light", "infinite"),  # type: ignore[arg-type]
    )


def _fieldless(cls) -> Callable[[ParameterSource], Light]:
    # TODO: parse "from"/"to", "I", "scale" and "power" for the non-infinite lights.
    return lambda params: cls()


_LIGHT_TYPES: Dict[str, Callable[[ParameterSource], Light]] = {
    "distant": _fieldless(DistantLight),
    "goniometric": _fieldless(GonioPhotometricLight),
    "infinite": _infinite,
    "point": _fieldless(PointLight),
    "projection": _fieldless(ProjectionLight),
    "spot": _fieldless(SpotLight),
}
