# tests/test_camera.py
# Tests for camera variant dispatch and shared shutter parameters
# Exists to ensure each camera type carries exactly its documented fields and defaults
# RELEVANT FILES: python/pbrtscene/camera.py, python/pbrtscene/_validate.py

from __future__ import annotations

import pytest

from pbrtscene.camera import (
    Camera,
    OrthographicCamera,
    PerspectiveCamera,
    RealisticCamera,
    SphericalCamera,
)
from pbrtscene.errors import UnrecognizedTypeError


def test_perspective_with_fov_and_default_shutter(params) -> None:
    cam = Camera.from_params("perspective", params({"float fov": 60}))
    assert isinstance(cam, PerspectiveCamera)
    assert cam.shutter_open == pytest.approx(0.0)
    assert cam.shutter_close == pytest.approx(1.0)
    assert cam.fov == pytest.approx(60.0)


def test_perspective_default_fov(params) -> None:
    assert Camera.from_params("perspective", params()).fov == pytest.approx(90.0)


def test_orthographic_reads_shutter(params) -> None:
    cam = Camera.from_params("orthographic", params({"float shutteropen": 0.25, "float shutterclose": 0.5}))
    assert cam == OrthographicCamera(shutter_open=0.25, shutter_close=0.5)


def test_shutter_shared_by_every_variant(params) -> None:
    for tag in ("orthographic", "perspective", "realistic", "spherical"):
        cam = Camera.from_params(tag, params({"float shutterclose": 2.0}))
        assert cam.TAG == tag
        assert cam.shutter_close == pytest.approx(2.0)


def test_realistic_defaults(params) -> None:
    cam = Camera.from_params("realistic", params())
    assert cam == RealisticCamera(
        shutter_open=0.0,
        shutter_close=1.0,
        lensfile=None,
        aperture_diameter=1.0,
        focus_distance=10.0,
        aperture=None,
    )


def test_realistic_overrides(params) -> None:
    cam = Camera.from_params(
        "realistic",
        params(
            {
                "string lensfile": "wide.22mm.dat",
                "float aperturediameter": 2.8,
                "float focusdistance": 3.5,
                "string aperture": "pentagon",
            }
        ),
    )
    assert cam.lensfile == "wide.22mm.dat"
    assert cam.aperture_diameter == pytest.approx(2.8)
    assert cam.focus_distance == pytest.approx(3.5)
    assert cam.aperture == "pentagon"


def test_spherical_mapping_default_and_override(params) -> None:
    assert Camera.from_params("spherical", params()).mapping == "equalarea"
    cam = Camera.from_params("spherical", params({"string mapping": "equirectangular"}))
    assert isinstance(cam, SphericalCamera)
    assert cam.mapping == "equirectangular"


@pytest.mark.parametrize("tag", ["fisheye", "Perspective", ""])
def test_unknown_camera_type(params, tag) -> None:
    with pytest.raises(UnrecognizedTypeError, match="camera"):
        Camera.from_params(tag, params())


def test_camera_does_not_keep_params(params) -> None:
    cam = Camera.from_params("perspective", params({"float fov": 45}))
    assert not any(isinstance(v, type(params())) for v in vars(cam).values())
