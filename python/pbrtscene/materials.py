# python/pbrtscene/materials.py
# Material declarations with named-texture parameter binding.
# Exists to resolve texture references to lightweight handles owned by the scene assembler.
# RELEVANT FILES:python/pbrtscene/textures.py,python/pbrtscene/scene.py,tests/test_materials.py

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from .errors import UnknownTextureError
from .params import ParameterSource

# Material parameters that may carry a spatially-varying texture instead of a literal.
TEXTURABLE_PARAMS = (
    "reflectance",
    "transmittance",
    "albedo",
    "roughness",
    "uroughness",
    "vroughness",
    "eta",
    "k",
    "mfp",
    "g",
    "thickness",
    "displacement",
    "conductor.eta",
    "conductor.k",
    "interface.roughness",
)


def _no_textures() -> Mapping[str, int]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Material:
    ty: str
    # parameter name -> texture handle
    textures: Mapping[str, int] = field(default_factory=_no_textures, hash=False)

    @classmethod
    def from_params(
        cls,
        name: str,
        params: ParameterSource,
        texture_map: Optional[Mapping[str, int]] = None,
    ) -> "Material":
        # Literal material parameters are not parsed yet; only texture bindings are.
        lookup: Optional[Callable[[str], Optional[str]]] = getattr(params, "texture", None)
        if lookup is None:
            return cls(ty=name)
        texture_map = {} if texture_map is None else texture_map
        bound: Dict[str, int] = {}
        for param in TEXTURABLE_PARAMS:
            texture = lookup(param)
            if texture is None:
                continue
            if texture not in texture_map:
                raise UnknownTextureError("material", name, param, texture)
            bound[param] = texture_map[texture]
        return cls(ty=name, textures=MappingProxyType(bound))

    def texture_handle(self, param: str) -> Optional[int]:
        return self.textures.get(param)
