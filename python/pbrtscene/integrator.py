# python/pbrtscene/integrator.py
# Light-transport integrator configuration parsed from an Integrator directive
# Exists to validate integrator settings; only volumetric path tracing is wired up so far
# RELEVANT FILES:python/pbrtscene/_validate.py,python/pbrtscene/errors.py,tests/test_integrator.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Optional

from ._validate import select
from .errors import UnimplementedVariantError
from .params import ParameterSource


@dataclass(frozen=True)
class Integrator:
    """Computes radiance arriving at the film from surfaces and media.

    For high quality images one of ``bdpt``, ``mlt``, ``sppm`` or ``volpath``
    is almost always the right choice; the others exist mainly for debugging.
    """

    TAG: ClassVar[str] = ""

    @classmethod
    def from_params(cls, ty: str, params: ParameterSource) -> "Integrator":
        build = select("integrator", ty, _INTEGRATOR_TYPES)
        if build is None:
            raise UnimplementedVariantError("integrator", ty)
        return build(params)


@dataclass(frozen=True)
class VolPathIntegrator(Integrator):
    TAG: ClassVar[str] = "volpath"
    # Maximum length of a light-carrying path.
    max_depth: int = 5


def _volpath(params: ParameterSource) -> Integrator:
    return VolPathIntegrator(max_depth=params.integer("maxdepth", 5))


# Declared tags map to None until their constructor exists.
_INTEGRATOR_TYPES: Dict[str, Optional[Callable[[ParameterSource], Integrator]]] = {
    "ambientocclusion": None,
    "bdpt": None,
    "lightpath": None,
    "mlt": None,
    "path": None,
    "randomwalk": None,
    "simplepath": None,
    "simplevolpath": None,
    "sppm": None,
    "volpath": _volpath,
}


def supported_integrators() -> list:
    """Tags whose constructor is implemented."""
    return sorted(tag for tag, build in _INTEGRATOR_TYPES.items() if build is not None)
