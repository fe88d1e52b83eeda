# python/pbrtscene/textures.py
# Named texture declarations parsed from a Texture directive
# Exists to register float/spectrum textures so materials can bind to them by name
# RELEVANT FILES:python/pbrtscene/materials.py,python/pbrtscene/scene.py,tests/test_textures.py

from __future__ import annotations

from dataclasses import dataclass

from .enums import TextureType
from .errors import UnrecognizedTokenError, UnrecognizedTypeError
from .params import ParameterSource


@dataclass(frozen=True)
class Texture:
    name: str
    ty: TextureType
    # Texture class ("imagemap", "checkerboard", "scale", ...)
    class_name: str

    @classmethod
    def from_params(cls, name: str, ty: str, class_name: str, params: ParameterSource) -> "Texture":
        """Declare a texture.

        Class-specific parameters (image filenames, noise settings, scale and
        offset, ...) are accepted but not parsed yet.
        """
        try:
            texture_type = TextureType.parse(ty)
        except UnrecognizedTokenError:
            raise UnrecognizedTypeError("texture", ty) from None
        return cls(name=name, ty=texture_type, class_name=class_name)
