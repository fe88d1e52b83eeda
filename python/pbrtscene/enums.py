# python/pbrtscene/enums.py
# Closed enumerations parsed from exact scene-description tokens
# Exists to give every enumerated parameter one strict, case-sensitive parser
# RELEVANT FILES:python/pbrtscene/options.py,python/pbrtscene/accelerator.py,tests/test_enums.py

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

from .errors import UnrecognizedTokenError

_E = TypeVar("_E", bound=Enum)


def _parse_token(enum_cls: Type[_E], token: str, label: str, field: Optional[str] = None) -> _E:
    if not isinstance(token, str):
        raise UnrecognizedTokenError(label, token, field=field)
    try:
        return enum_cls(token)
    except ValueError:
        raise UnrecognizedTokenError(label, token, field=field) from None


class CoordinateSystem(Enum):
    """Coordinate system used for rendering computation."""
    CAMERA_WORLD = "cameraworld"  # camera translated to the origin
    CAMERA = "camera"
    WORLD = "world"

    @classmethod
    def parse(cls, token: str, field: Optional[str] = None) -> "CoordinateSystem":
        return _parse_token(cls, token, "coordinate system", field)

    @classmethod
    def default(cls) -> "CoordinateSystem":
        return cls.CAMERA_WORLD


class BvhSplitMethod(Enum):
    """Primitive partitioning strategy used while building a BVH."""
    SAH = "sah"
    MIDDLE = "middle"
    EQUAL = "equal"
    HLBVH = "hlbvh"

    @classmethod
    def parse(cls, token: str, field: Optional[str] = None) -> "BvhSplitMethod":
        return _parse_token(cls, token, "BVH split method", field)

    @classmethod
    def default(cls) -> "BvhSplitMethod":
        return cls.SAH


class TextureType(Enum):
    FLOAT = "float"
    SPECTRUM = "spectrum"

    @classmethod
    def parse(cls, token: str, field: Optional[str] = None) -> "TextureType":
        return _parse_token(cls, token, "texture type", field)
