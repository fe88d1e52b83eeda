# python/pbrtscene/__init__.py
# Public Python API for turning scene-description directives into typed renderer entities
# Exists to gather the entity constructors, parameter lists and scene assembler under one import
# RELEVANT FILES: python/pbrtscene/scene.py, python/pbrtscene/params.py, python/pbrtscene/errors.py, tests/test_api.py
from __future__ import annotations

from .accelerator import Accelerator, BvhAccelerator, KdTreeAccelerator
from .camera import Camera, OrthographicCamera, PerspectiveCamera, RealisticCamera, SphericalCamera
from .config import LoaderConfig, load_loader_config, split_loader_overrides
from .enums import BvhSplitMethod, CoordinateSystem, TextureType
from .errors import (
    ArityMismatchError,
    DirectiveError,
    IndexCountError,
    ParameterDeclarationError,
    SceneParseError,
    UnimplementedVariantError,
    UnknownTextureError,
    UnrecognizedTokenError,
    UnrecognizedTypeError,
)
from .film import Film, FilmType, GBufferFilm, RgbFilm, SpectralFilm
from .integrator import Integrator, VolPathIntegrator, supported_integrators
from .lights import (
    DistantLight,
    GonioPhotometricLight,
    InfiniteLight,
    Light,
    PointLight,
    ProjectionLight,
    SpotLight,
)
from .materials import Material
from .media import Medium
from .options import Options
from .params import Param, ParameterSource, ParamList
from .sampler import (
    HaltonSampler,
    IndependentSampler,
    PaddedSobolSampler,
    Sampler,
    SobolSampler,
    StratifiedSampler,
    ZSobolSampler,
)
from .scene import Directive, Scene, SceneBuilder, build_entity, entity_to_dict, load_directives, load_scene
from .shapes import Cylinder, Disk, Shape, Sphere, TriangleMesh
from .textures import Texture

__version__ = "0.1.0"

__all__ = [
    # parameters
    "Param",
    "ParamList",
    "ParameterSource",
    # enumerations
    "BvhSplitMethod",
    "CoordinateSystem",
    "TextureType",
    # entities
    "Options",
    "Film",
    "FilmType",
    "RgbFilm",
    "GBufferFilm",
    "SpectralFilm",
    "Camera",
    "OrthographicCamera",
    "PerspectiveCamera",
    "RealisticCamera",
    "SphericalCamera",
    "Integrator",
    "VolPathIntegrator",
    "supported_integrators",
    "Accelerator",
    "BvhAccelerator",
    "KdTreeAccelerator",
    "Sampler",
    "HaltonSampler",
    "IndependentSampler",
    "PaddedSobolSampler",
    "SobolSampler",
    "StratifiedSampler",
    "ZSobolSampler",
    "Light",
    "DistantLight",
    "GonioPhotometricLight",
    "InfiniteLight",
    "PointLight",
    "ProjectionLight",
    "SpotLight",
    "Texture",
    "Material",
    "Shape",
    "Cylinder",
    "Disk",
    "Sphere",
    "TriangleMesh",
    "Medium",
    # assembly
    "Directive",
    "Scene",
    "SceneBuilder",
    "build_entity",
    "entity_to_dict",
    "load_directives",
    "load_scene",
    "LoaderConfig",
    "load_loader_config",
    "split_loader_overrides",
    # errors
    "SceneParseError",
    "UnrecognizedTokenError",
    "UnrecognizedTypeError",
    "ArityMismatchError",
    "IndexCountError",
    "UnimplementedVariantError",
    "UnknownTextureError",
    "ParameterDeclarationError",
    "DirectiveError",
]
