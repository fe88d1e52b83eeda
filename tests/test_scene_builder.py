# tests/test_scene_builder.py
# Tests for assembling a Scene from a directive stream
# Exists to cover texture handle assignment, the raise/skip error policy and unused-parameter logging
# RELEVANT FILES: python/pbrtscene/scene.py, python/pbrtscene/config.py

from __future__ import annotations

import json
import logging

import pytest

from pbrtscene.camera import PerspectiveCamera
from pbrtscene.enums import CoordinateSystem
from pbrtscene.errors import (
    ArityMismatchError,
    DirectiveError,
    UnimplementedVariantError,
    UnknownTextureError,
)
from pbrtscene.film import SpectralFilm
from pbrtscene.integrator import VolPathIntegrator
from pbrtscene.sampler import HaltonSampler
from pbrtscene.scene import SceneBuilder, load_scene

pytestmark = pytest.mark.scene


def _cornell():
    return [
        {"directive": "Option", "params": {"string rendercoordsys": "world"}},
        {"directive": "Film", "type": "spectral", "params": {"integer xresolution": 400, "integer nbuckets": 8}},
        {"directive": "Camera", "type": "perspective", "params": {"float fov": 39}},
        {"directive": "Sampler", "type": "halton"},
        {"directive": "Integrator", "type": "volpath", "params": {"integer maxdepth": 8}},
        {"directive": "LightSource", "type": "infinite", "params": {"rgb L": [0.4, 0.45, 0.5]}},
        {"directive": "Texture", "type": "spectrum", "name": "checks", "class": "checkerboard"},
        {"directive": "Texture", "type": "float", "name": "rough", "class": "constant"},
        {
            "directive": "Material",
            "type": "conductor",
            "params": {"texture roughness": "rough", "texture reflectance": "checks"},
        },
        {"directive": "Shape", "type": "sphere", "params": {"float radius": 0.5}},
        {"directive": "Shape", "type": "trianglemesh", "params": {"integer indices": [0, 1, 2], "point3 P": [0] * 9}},
        {"directive": "MakeNamedMedium", "name": "fog", "params": {"string type": "homogeneous"}},
    ]


def test_build_full_scene() -> None:
    scene = SceneBuilder().build(_cornell())
    assert scene.options.render_coord_sys is CoordinateSystem.WORLD
    assert isinstance(scene.film.ty, SpectralFilm)
    assert scene.film.ty.nbuckets == 8
    assert scene.film.xresolution == 400
    assert isinstance(scene.camera, PerspectiveCamera)
    assert isinstance(scene.sampler, HaltonSampler)
    assert scene.integrator == VolPathIntegrator(max_depth=8)
    assert scene.accelerator is None
    assert len(scene.lights) == 1
    assert len(scene.shapes) == 2
    assert list(scene.media) == ["fog"]
    assert scene.errors == []


def test_texture_handles_follow_declaration_order() -> None:
    scene = SceneBuilder().build(_cornell())
    (material,) = scene.materials
    assert material.texture_handle("reflectance") == 0
    assert material.texture_handle("roughness") == 1
    assert scene.texture(1).name == "rough"


def test_material_before_texture_is_an_error() -> None:
    directives = [
        {"directive": "Material", "type": "diffuse", "params": {"texture reflectance": "checks"}},
        {"directive": "Texture", "type": "spectrum", "name": "checks", "class": "checkerboard"},
    ]
    with pytest.raises(DirectiveError, match="directive #0") as info:
        SceneBuilder().build(directives)
    assert isinstance(info.value.__cause__, UnknownTextureError)
    assert info.value.field == "reflectance"


def test_redefined_texture_rebinds_later_materials(caplog) -> None:
    directives = [
        {"directive": "Texture", "type": "float", "name": "r", "class": "constant"},
        {"directive": "Texture", "type": "float", "name": "r", "class": "imagemap"},
        {"directive": "Material", "type": "dielectric", "params": {"texture roughness": "r"}},
    ]
    with caplog.at_level(logging.WARNING, logger="pbrtscene.scene"):
        scene = SceneBuilder().build(directives)
    assert len(scene.textures) == 2
    assert scene.materials[0].texture_handle("roughness") == 1
    assert "redefined" in caplog.text


def test_raise_policy_stops_at_first_error() -> None:
    directives = [
        {"directive": "Camera", "type": "perspective"},
        {"directive": "Integrator", "type": "bdpt"},
        {"directive": "Film", "type": "hdr"},
    ]
    with pytest.raises(DirectiveError, match="not yet supported") as info:
        SceneBuilder(on_error="raise").build(directives)
    assert info.value.index == 1
    assert isinstance(info.value.cause, UnimplementedVariantError)


def test_skip_policy_collects_errors(caplog) -> None:
    directives = [
        {"directive": "Integrator", "type": "bdpt"},
        {"directive": "LightSource", "type": "infinite", "params": {"rgb L": [1, 2]}},
        {"directive": "Shape", "type": "sphere"},
        {"directive": "Film", "type": "hdr"},
    ]
    with caplog.at_level(logging.WARNING, logger="pbrtscene.scene"):
        scene = SceneBuilder({"on_error": "skip"}).build(directives)
    assert [e.index for e in scene.errors] == [0, 1, 3]
    assert isinstance(scene.errors[1].cause, ArityMismatchError)
    assert scene.integrator is None
    assert scene.film is None
    assert len(scene.shapes) == 1
    assert "Skipping directive #3" in caplog.text


def test_unsupported_option_respects_strict_options() -> None:
    directives = [{"directive": "Option", "params": {"bool seed": True, "bool disablepixeljitter": True}}]
    with pytest.raises(DirectiveError, match="option"):
        SceneBuilder().build(directives)
    scene = SceneBuilder(strict_options=False).build(directives)
    assert scene.options.disable_pixel_jitter is True


def test_unused_parameters_logged(caplog) -> None:
    directives = [{"directive": "Camera", "type": "perspective", "params": {"float fov": 50, "float frameaspectratio": 1.5}}]
    with caplog.at_level(logging.DEBUG, logger="pbrtscene.scene"):
        SceneBuilder().build(directives)
    debug = [r for r in caplog.records if "ignored parameters" in r.getMessage()]
    assert debug and debug[0].levelno == logging.DEBUG
    assert "frameaspectratio" in debug[0].getMessage()

    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="pbrtscene.scene"):
        SceneBuilder(warn_unused=True).build(directives)
    warned = [r for r in caplog.records if "ignored parameters" in r.getMessage()]
    assert warned and warned[0].levelno == logging.WARNING


def test_load_scene_from_json(tmp_path) -> None:
    path = tmp_path / "scene.json"
    path.write_text(json.dumps({"directives": _cornell()}), encoding="utf-8")
    scene = load_scene(path)
    data = scene.to_dict()
    assert data["options"]["render_coord_sys"] == "world"
    assert data["film"]["ty"] == {"type": "spectral", "nbuckets": 8, "lambda_min": 360.0, "lambda_max": 830.0}
    assert data["integrator"] == {"type": "volpath", "max_depth": 8}
    assert data["shapes"][1]["indices"] == [0, 1, 2]
    assert data["materials"][0]["textures"] == {"roughness": 1, "reflectance": 0}
    assert data["media"] == {"fog": {}}
    json.dumps(data)


def test_build_accepts_generator() -> None:
    scene = SceneBuilder().build(d for d in _cornell()[:3])
    assert scene.camera is not None


def test_wrong_kind_parameter_is_reported(caplog) -> None:
    directives = [{"directive": "Shape", "type": "sphere", "params": {"integer radius": 2, "float zmax": 0.5}}]
    with caplog.at_level(logging.DEBUG, logger="pbrtscene.scene"):
        scene = SceneBuilder().build(directives)
    assert scene.shapes[0].radius == pytest.approx(1.0)
    warned = [r for r in caplog.records if r.levelno == logging.WARNING and "'radius'" in r.getMessage()]
    assert warned
    assert "declared as integer" in warned[0].getMessage()
    assert not any("zmax" in r.getMessage() for r in caplog.records)


def test_literal_material_parameters_are_reported(caplog) -> None:
    directives = [{"directive": "Material", "type": "diffuse", "params": {"rgb reflectance": [0.5, 0.5, 0.5]}}]
    with caplog.at_level(logging.WARNING, logger="pbrtscene.scene"):
        SceneBuilder().build(directives)
    assert "'reflectance'" in caplog.text


def test_unknown_builder_override_rejected() -> None:
    with pytest.raises(TypeError, match="on_eror"):
        SceneBuilder(on_eror="skip")
    with pytest.raises(TypeError, match="on_eror"):
        load_scene([], on_eror="skip")
