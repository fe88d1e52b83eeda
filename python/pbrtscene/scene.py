# python/pbrtscene/scene.py
# Directive records, per-family dispatch and a scene assembler over the entity constructors
# Exists to turn a list of scene directives into entities while owning texture handles and error policy
# RELEVANT FILES:python/pbrtscene/config.py,python/pbrtscene/params.py,tests/test_scene.py,tests/test_scene_builder.py

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

import numpy as np

from .accelerator import Accelerator
from .camera import Camera
from .config import ConfigSource, LoaderConfig, load_loader_config, split_loader_overrides
from .errors import (
    DirectiveError,
    ParameterDeclarationError,
    SceneParseError,
    UnimplementedVariantError,
    UnrecognizedTypeError,
)
from .film import Film
from .integrator import Integrator
from .lights import Light
from .materials import Material
from .media import Medium
from .options import Options
from .params import ParamList, ParamSource
from .sampler import Sampler
from .shapes import Shape
from .textures import Texture

logger = logging.getLogger(__name__)

# Directive keyword (lower-cased) -> entity family
_DIRECTIVE_FAMILIES: Dict[str, str] = {
    "option": "option",
    "film": "film",
    "camera": "camera",
    "integrator": "integrator",
    "accelerator": "accelerator",
    "sampler": "sampler",
    "lightsource": "light",
    "light": "light",
    "texture": "texture",
    "material": "material",
    "shape": "shape",
    "makenamedmedium": "medium",
    "medium": "medium",
}

# Families whose directive carries no type tag
_UNTAGGED_FAMILIES = frozenset({"option", "medium"})

DirectiveSource = Union[str, Path, Mapping[str, Any], Sequence[Any]]


@dataclass
class Directive:
    """One scene statement: entity family, type tag and its parameter list.

    ``name`` is used by Texture and MakeNamedMedium, ``class_name`` by Texture.
    """

    family: str
    tag: Optional[str] = None
    params: ParamList = field(default_factory=ParamList)
    name: Optional[str] = None
    class_name: Optional[str] = None

    @classmethod
    def create(
        cls,
        directive: str,
        tag: Optional[str] = None,
        params: ParamSource = None,
        name: Optional[str] = None,
        class_name: Optional[str] = None,
    ) -> "Directive":
        key = str(directive).strip().lower()
        if key not in _DIRECTIVE_FAMILIES:
            raise UnrecognizedTypeError("directive", directive)
        family = _DIRECTIVE_FAMILIES[key]
        if tag is None and family not in _UNTAGGED_FAMILIES:
            raise ParameterDeclarationError(f"{family} directive requires a type", family=family, field="type")
        if family == "texture":
            if name is None:
                raise ParameterDeclarationError("texture directive requires a name", family="texture", tag=tag, field="name")
            if class_name is None:
                raise ParameterDeclarationError("texture directive requires a class", family="texture", tag=tag, field="class")
        if family == "medium" and name is None:
            raise ParameterDeclarationError("medium directive requires a name", family="medium", field="name")
        return cls(family, tag, ParamList.coerce(params), name, class_name)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Directive":
        if "directive" not in data:
            raise ParameterDeclarationError("directive entry requires a 'directive' key", field="directive")
        params = data.get("params")
        if params is not None and not isinstance(params, Mapping):
            raise TypeError("directive params must be a mapping")
        return cls.create(
            data["directive"],
            data.get("type"),
            params,
            name=data.get("name"),
            class_name=data.get("class"),
        )


def _option(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Options:
    for param in directive.params:
        options = options.apply(param)
    return options


def _film(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Film:
    return Film.from_params(directive.tag, directive.params)  # type: ignore[arg-type]


def _camera(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Camera:
    return Camera.from_params(directive.tag, directive.params)  # type: ignore[arg-type]


def _integrator(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Integrator:
    return Integrator.from_params(directive.tag, directive.params)  # type: ignore[arg-type]


def _accelerator(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Accelerator:
    return Accelerator.from_params(directive.tag, directive.params)  # type: ignore[arg-type]


def _sampler(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Sampler:
    return Sampler.from_params(directive.tag, directive.params)  # type: ignore[arg-type]


def _light(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Light:
    return Light.from_params(directive.tag, directive.params)  # type: ignore[arg-type]


def _texture(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Texture:
    return Texture.from_params(directive.name, directive.tag, directive.class_name, directive.params)  # type: ignore[arg-type]


def _material(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Material:
    return Material.from_params(directive.tag, directive.params, texture_map)  # type: ignore[arg-type]


def _shape(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Shape:
    return Shape.from_params(directive.tag, directive.params)  # type: ignore[arg-type]


def _medium(directive: Directive, texture_map: Mapping[str, int], options: Options) -> Medium:
    return Medium.from_params(directive.params)


_BUILDERS: Dict[str, Callable[[Directive, Mapping[str, int], Options], Any]] = {
    "option": _option,
    "film": _film,
    "camera": _camera,
    "integrator": _integrator,
    "accelerator": _accelerator,
    "sampler": _sampler,
    "light": _light,
    "texture": _texture,
    "material": _material,
    "shape": _shape,
    "medium": _medium,
}


def build_entity(
    directive: Directive,
    texture_map: Optional[Mapping[str, int]] = None,
    options: Optional[Options] = None,
) -> Any:
    """Construct the entity a single directive describes.

    ``option`` directives return ``options`` (or the defaults) with every
    parameter applied in order.
    """
    build = _BUILDERS.get(directive.family)
    if build is None:
        raise UnrecognizedTypeError("directive", directive.family)
    return build(
        directive,
        {} if texture_map is None else texture_map,
        Options() if options is None else options,
    )


def _load_from_path(path: Path) -> Any:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".json", ""}:
        return json.loads(text)
    raise ValueError(f"Unsupported scene description file format: {path}")


def load_directives(source: DirectiveSource) -> List[Directive]:
    """Read directives from a JSON path, ``{"directives": [...]}`` or a list."""
    if isinstance(source, (str, Path)):
        data = _load_from_path(Path(source))
    else:
        data = source
    if isinstance(data, Mapping):
        if "directives" not in data:
            raise ValueError("scene description mapping requires a 'directives' list")
        data = data["directives"]
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise TypeError("directives must be a sequence of mappings")
    out: List[Directive] = []
    for item in data:
        if isinstance(item, Directive):
            out.append(item)
        elif isinstance(item, Mapping):
            out.append(Directive.from_mapping(item))
        else:
            raise TypeError("directive entries must be mappings")
    return out


def entity_to_dict(entity: Any) -> Any:
    """Plain-data view of an entity; variant classes contribute a ``type`` key."""
    if isinstance(entity, Enum):
        return entity.value
    if isinstance(entity, np.ndarray):
        return entity.tolist()
    if dataclasses.is_dataclass(entity) and not isinstance(entity, type):
        out: Dict[str, Any] = {}
        tag = getattr(entity, "TAG", "")
        if tag:
            out["type"] = tag
        for f in dataclasses.fields(entity):
            out[f.name] = entity_to_dict(getattr(entity, f.name))
        return out
    if isinstance(entity, Mapping):
        return {k: entity_to_dict(v) for k, v in entity.items()}
    if isinstance(entity, (list, tuple)):
        return [entity_to_dict(v) for v in entity]
    return entity


@dataclass
class Scene:
    """Entities assembled from one directive stream."""

    options: Options = field(default_factory=Options)
    film: Optional[Film] = None
    camera: Optional[Camera] = None
    sampler: Optional[Sampler] = None
    integrator: Optional[Integrator] = None
    accelerator: Optional[Accelerator] = None
    lights: List[Light] = field(default_factory=list)
    shapes: List[Shape] = field(default_factory=list)
    materials: List[Material] = field(default_factory=list)
    # Texture handles index into this list.
    textures: List[Texture] = field(default_factory=list)
    media: Dict[str, Medium] = field(default_factory=dict)
    errors: List[DirectiveError] = field(default_factory=list)

    def texture(self, handle: int) -> Texture:
        return self.textures[handle]

    def to_dict(self) -> dict:
        return {
            "options": self.options.to_dict(),
            "film": entity_to_dict(self.film),
            "camera": entity_to_dict(self.camera),
            "sampler": entity_to_dict(self.sampler),
            "integrator": entity_to_dict(self.integrator),
            "accelerator": entity_to_dict(self.accelerator),
            "lights": [entity_to_dict(light) for light in self.lights],
            "shapes": [entity_to_dict(shape) for shape in self.shapes],
            "materials": [entity_to_dict(material) for material in self.materials],
            "textures": [entity_to_dict(texture) for texture in self.textures],
            "media": {name: entity_to_dict(medium) for name, medium in self.media.items()},
        }


class SceneBuilder:
    """Builds a ``Scene`` from directives according to a ``LoaderConfig``."""

    def __init__(self, config: ConfigSource = None, **overrides: Any) -> None:
        overrides, unknown = split_loader_overrides(overrides)
        if unknown:
            raise TypeError(f"Unknown loader option(s): {', '.join(sorted(unknown))}")
        self.config: LoaderConfig = load_loader_config(config, overrides)

    def build(self, directives: Union[DirectiveSource, Iterable[Directive]]) -> Scene:
        if not isinstance(directives, (str, Path, Mapping)):
            directives = list(directives)
        directives = load_directives(directives)
        scene = Scene()
        texture_map: Dict[str, int] = {}
        for index, directive in enumerate(directives):
            try:
                self._add(scene, texture_map, directive)
            except SceneParseError as exc:
                error = DirectiveError(index, exc)
                if self.config.on_error == "raise":
                    raise error from exc
                logger.warning(f"Skipping directive #{index}: {error}")
                scene.errors.append(error)
                continue
            self._report_unused(index, directive)
        logger.debug(
            f"Built scene: {len(scene.shapes)} shapes, {len(scene.lights)} lights, "
            f"{len(scene.materials)} materials, {len(scene.textures)} textures, {len(scene.errors)} skipped"
        )
        return scene

    def _add(self, scene: Scene, texture_map: Dict[str, int], directive: Directive) -> None:
        family = directive.family
        if family == "option":
            scene.options = self._apply_options(scene.options, directive)
            return
        entity = build_entity(directive, texture_map, scene.options)
        logger.debug(f"Built {family} {directive.tag!r}")
        if family == "texture":
            if directive.name in texture_map:
                logger.warning(f"Texture {directive.name!r} redefined; later materials bind the new definition")
            texture_map[directive.name] = len(scene.textures)  # type: ignore[index]
            scene.textures.append(entity)
        elif family == "material":
            scene.materials.append(entity)
        elif family == "light":
            scene.lights.append(entity)
        elif family == "shape":
            scene.shapes.append(entity)
        elif family == "medium":
            scene.media[directive.name] = entity  # type: ignore[index]
        else:
            setattr(scene, family, entity)

    def _apply_options(self, options: Options, directive: Directive) -> Options:
        for param in directive.params:
            try:
                options = options.apply(param)
            except UnimplementedVariantError:
                if self.config.strict_options:
                    raise
                logger.warning(f"Ignoring unsupported option {param.name!r}")
        return options

    def _report_unused(self, index: int, directive: Directive) -> None:
        if directive.family == "option":
            return
        where = f"Directive #{index} ({directive.family} {directive.tag!r})"
        mismatched = directive.params.mismatched()
        for name, kind in mismatched.items():
            logger.warning(f"{where} ignored parameter {name!r}: declared as {kind}, which does not match the kind it is read as")
        unused = [name for name in directive.params.unused() if name not in mismatched]
        if not unused:
            return
        message = f"{where} ignored parameters: {', '.join(unused)}"
        if self.config.warn_unused:
            logger.warning(message)
        else:
            logger.debug(message)


def load_scene(source: DirectiveSource, config: ConfigSource = None, **overrides: Any) -> Scene:
    return SceneBuilder(config, **overrides).build(load_directives(source))
