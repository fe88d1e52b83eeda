# python/pbrtscene/options.py
# Scene-wide rendering options and application of individual Option directives
# Exists to hold renderer toggles that are not owned by any single scene entity
# RELEVANT FILES:python/pbrtscene/enums.py,python/pbrtscene/scene.py,tests/test_options.py

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Optional, Tuple

from .enums import CoordinateSystem
from .errors import ParameterDeclarationError, UnimplementedVariantError
from .params import Param, ParameterSource


def _coord_sys(value: str, name: str) -> CoordinateSystem:
    return CoordinateSystem.parse(value, field=name)


# option name -> (parameter kind, Options field, value converter)
_OPTIONS: Dict[str, Tuple[str, str, Callable[[Any, str], Any]]] = {
    "disablepixeljitter": ("bool", "disable_pixel_jitter", lambda v, _: bool(v)),
    "disabletexturefiltering": ("bool", "disable_texture_filtering", lambda v, _: bool(v)),
    "disablewavelengthjitter": ("bool", "disable_wavelength_jitter", lambda v, _: bool(v)),
    "displacementedgescale": ("float", "displacement_edge_scale", lambda v, _: float(v)),
    "msereferenceimage": ("string", "mse_reference_image", lambda v, _: str(v)),
    "msereferenceout": ("string", "mse_reference_out", lambda v, _: str(v)),
    "rendercoordsys": ("string", "render_coord_sys", _coord_sys),
}


@dataclass(frozen=True)
class Options:
    # Forces all pixel samples through the center of the pixel area.
    disable_pixel_jitter: bool = False
    # Point-samples the finest MIP level for every texture lookup.
    disable_texture_filtering: bool = False
    # Every sample within a pixel uses the same wavelengths.
    disable_wavelength_jitter: bool = False
    # Scale applied to triangle edge lengths before the displacement refinement test.
    displacement_edge_scale: float = 1.0
    # Reference image for mean squared error versus sample count.
    mse_reference_image: Optional[str] = None
    # Output filename for per-sample mean squared error results.
    mse_reference_out: Optional[str] = None
    render_coord_sys: CoordinateSystem = CoordinateSystem.CAMERA_WORLD

    def apply(self, param: Param) -> "Options":
        """Return a copy with one ``Option`` directive parameter applied.

        Unknown option names raise ``UnimplementedVariantError``; a known name
        declared with the wrong kind raises ``ParameterDeclarationError``.
        """
        entry = _OPTIONS.get(param.name)
        if entry is None:
            raise UnimplementedVariantError("option", param.name)
        kind, attr, convert = entry
        if param.kind != kind:
            raise ParameterDeclarationError(
                f"expected a {kind} value, got {param.kind}", family="option", field=param.name
            )
        if not param.values:
            raise ParameterDeclarationError("option has no value", family="option", field=param.name)
        return replace(self, **{attr: convert(param.values[0], param.name)})

    @classmethod
    def from_params(cls, params: ParameterSource) -> "Options":
        base = cls()
        rcs = params.string("rendercoordsys")
        return cls(
            disable_pixel_jitter=_bool_or(params.boolean("disablepixeljitter"), base.disable_pixel_jitter),
            disable_texture_filtering=_bool_or(
                params.boolean("disabletexturefiltering"), base.disable_texture_filtering
            ),
            disable_wavelength_jitter=_bool_or(
                params.boolean("disablewavelengthjitter"), base.disable_wavelength_jitter
            ),
            displacement_edge_scale=params.float("displacementedgescale", base.displacement_edge_scale),
            mse_reference_image=params.string("msereferenceimage"),
            mse_reference_out=params.string("msereferenceout"),
            render_coord_sys=base.render_coord_sys if rcs is None else _coord_sys(rcs, "rendercoordsys"),
        )

    def to_dict(self) -> dict:
        return {
            "disable_pixel_jitter": self.disable_pixel_jitter,
            "disable_texture_filtering": self.disable_texture_filtering,
            "disable_wavelength_jitter": self.disable_wavelength_jitter,
            "displacement_edge_scale": self.displacement_edge_scale,
            "mse_reference_image": self.mse_reference_image,
            "mse_reference_out": self.mse_reference_out,
            "render_coord_sys": self.render_coord_sys.value,
        }


def _bool_or(value: Optional[bool], default: bool) -> bool:
    return default if value is None else value
