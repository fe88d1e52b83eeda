# python/pbrtscene/camera.py
# Camera models parsed from a Camera directive
# Exists to map the camera type tag onto one validated camera variant
# RELEVANT FILES:python/pbrtscene/_validate.py,python/pbrtscene/scene.py,tests/test_camera.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Optional

from ._validate import select
from .params import ParameterSource


@dataclass(frozen=True)
class Camera:
    """Base of the camera variants; the shutter interval is shared by all of them."""

    TAG: ClassVar[str] = ""
    # Time at which the virtual shutter opens.
    shutter_open: float = 0.0
    # Time at which the virtual shutter closes.
    shutter_close: float = 1.0

    @classmethod
    def from_params(cls, ty: str, params: ParameterSource) -> "Camera":
        shutter_open = params.float("shutteropen", 0.0)
        shutter_close = params.float("shutterclose", 1.0)
        return select("camera", ty, _CAMERA_TYPES)(params, shutter_open, shutter_close)


@dataclass(frozen=True)
class OrthographicCamera(Camera):
    TAG: ClassVar[str] = "orthographic"


@dataclass(frozen=True)
class PerspectiveCamera(Camera):
    TAG: ClassVar[str] = "perspective"
    fov: float = 90.0


@dataclass(frozen=True)
class RealisticCamera(Camera):
    """Images light passing through a lens system described by ``lensfile``."""

    TAG: ClassVar[str] = "realistic"
    lensfile: Optional[str] = None
    # Aperture diameter in mm.
    aperture_diameter: float = 1.0
    # Focus distance in meters.
    focus_distance: float = 10.0
    # Built-in shape ("gaussian", "square", "pentagon", "star") or an image filename.
    aperture: Optional[str] = None


@dataclass(frozen=True)
class SphericalCamera(Camera):
    """Captures light arriving at the camera from all directions."""

    TAG: ClassVar[str] = "spherical"
    # Octahedral equal-area mapping unless "equirectangular" is requested.
    mapping: str = "equalarea"


def _orthographic(params: ParameterSource, shutter_open: float, shutter_close: float) -> Camera:
    return OrthographicCamera(shutter_open=shutter_open, shutter_close=shutter_close)


def _perspective(params: ParameterSource, shutter_open: float, shutter_close: float) -> Camera:
    return PerspectiveCamera(
        shutter_open=shutter_open,
        shutter_close=shutter_close,
        fov=params.float("fov", 90.0),
    )


def _realistic(params: ParameterSource, shutter_open: float, shutter_close: float) -> Camera:
    return RealisticCamera(
        shutter_open=shutter_open,
        shutter_close=shutter_close,
        lensfile=params.string("lensfile"),
        aperture_diameter=params.float("aperturediameter", 1.0),
        focus_distance=params.float("focusdistance", 10.0),
        aperture=params.string("aperture"),
    )


def _spherical(params: ParameterSource, shutter_open: float, shutter_close: float) -> Camera:
    mapping = params.string("mapping")
    return SphericalCamera(
        shutter_open=shutter_open,
        shutter_close=shutter_close,
        mapping="equalarea" if mapping is None else mapping,
    )


_CAMERA_TYPES: Dict[str, Callable[[ParameterSource, float, float], Camera]] = {
    "orthographic": _orthographic,
    "perspective": _perspective,
    "realistic": _realistic,
    "spherical": _spherical,
}
