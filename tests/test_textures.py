# tests/test_textures.py
# Tests for named texture declarations
# RELEVANT FILES: python/pbrtscene/textures.py, python/pbrtscene/enums.py

from __future__ import annotations

import pytest

from pbrtscene.enums import TextureType
from pbrtscene.errors import UnrecognizedTypeError
from pbrtscene.textures import Texture


def test_spectrum_texture(params) -> None:
    tex = Texture.from_params("checks", "spectrum", "checkerboard", params({"float uscale": 8}))
    assert tex == Texture(name="checks", ty=TextureType.SPECTRUM, class_name="checkerboard")


def test_float_texture(params) -> None:
    tex = Texture.from_params("bump", "float", "imagemap", params({"string filename": "bump.png"}))
    assert tex.ty is TextureType.FLOAT
    assert tex.class_name == "imagemap"


@pytest.mark.parametrize("ty", ["color", "Float", "rgb"])
def test_unknown_texture_type(params, ty) -> None:
    with pytest.raises(UnrecognizedTypeError, match="Unknown texture type"):
        Texture.from_params("t", ty, "imagemap", params())
