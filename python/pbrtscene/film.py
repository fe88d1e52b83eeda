# python/pbrtscene/film.py
# Film (image sensor) configuration parsed from a Film directive
# Exists to validate resolution, crop window and sensor settings plus per-type payloads
# RELEVANT FILES:python/pbrtscene/_validate.py,python/pbrtscene/scene.py,tests/test_film.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar, Dict, Tuple

from ._validate import FLOAT_MAX, fixed_floats, select
from .params import ParameterSource

CropWindow = Tuple[float, float, float, float]

_DEFAULT_CROP: CropWindow = (0.0, 1.0, 0.0, 1.0)


@dataclass(frozen=True)
class FilmType:
    """Type-specific film payload; subclasses are the closed set of film types."""

    TAG: ClassVar[str] = ""


@dataclass(frozen=True)
class RgbFilm(FilmType):
    """Stores RGB images using the color space current at the Film directive."""

    TAG: ClassVar[str] = "rgb"


@dataclass(frozen=True)
class GBufferFilm(FilmType):
    """RGB plus extra channels describing the visible geometry in each pixel."""

    TAG: ClassVar[str] = "gbuffer"
    # "camera" by default; "world" stores geometry in world space
    coordinate_system: str = "camera"


@dataclass(frozen=True)
class SpectralFilm(FilmType):
    """RGB plus a discretized spectral distribution at each pixel."""

    TAG: ClassVar[str] = "spectral"
    nbuckets: int = 16
    lambda_min: float = 360.0
    lambda_max: float = 830.0


def _rgb(params: ParameterSource) -> FilmType:
    return RgbFilm()


def _gbuffer(params: ParameterSource) -> FilmType:
    coord = params.string("coordinatesystem")
    return GBufferFilm(coordinate_system="camera" if coord is None else coord)


def _spectral(params: ParameterSource) -> FilmType:
    return SpectralFilm(
        nbuckets=params.integer("nbuckets", 16),
        lambda_min=params.float("lambdamin", 360.0),
        lambda_max=params.float("lambdamax", 830.0),
    )


_FILM_TYPES: Dict[str, Callable[[ParameterSource], FilmType]] = {
    "rgb": _rgb,
    "gbuffer": _gbuffer,
    "spectral": _spectral,
}


@dataclass(frozen=True)
class Film:
    """Characteristics of the image being generated by the renderer."""

    xresolution: int = 1280
    yresolution: int = 720
    crop_window: CropWindow = _DEFAULT_CROP
    # Diagonal length of the film, in mm.
    diagonal: float = 35.0
    filename: str = "pbrt.exr"
    # Save OpenEXR output as 16-bit rather than 32-bit floats.
    save_fp16: bool = True
    # Final pixel values are scaled by iso / 100.
    iso: float = 100.0
    # Reference color temperature in kelvin; zero disables white balancing.
    white_balance: float = 0.0
    sensor: str = "cie1931"
    # Samples with a larger luminance are clamped to it.
    max_component_value: float = FLOAT_MAX
    ty: FilmType = field(default_factory=RgbFilm)

    @classmethod
    def from_params(cls, ty: str, params: ParameterSource) -> "Film":
        payload = select("film", ty, _FILM_TYPES)(params)
        crop = fixed_floats(params, "cropwindow", 4, "film", ty)
        filename = params.string("filename")
        save_fp16 = params.boolean("savefp16")
        sensor = params.string("sensor")
        return cls(
            xresolution=params.integer("xresolution", 1280),
            yresolution=params.integer("yresolution", 720),
            crop_window=_DEFAULT_CROP if crop is None else crop,  # type: ignore[arg-type]
            diagonal=params.float("diagonal", 35.0),
            filename="pbrt.exr" if filename is None else filename,
            save_fp16=True if save_fp16 is None else save_fp16,
            iso=params.float("iso", 100.0),
            white_balance=params.float("whitebalance", 0.0),
            sensor="cie1931" if sensor is None else sensor,
            max_component_value=params.float("maxcomponentvalue", FLOAT_MAX),
            ty=payload,
        )
