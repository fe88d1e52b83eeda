# python/pbrtscene/sampler.py
# Sample generator selection parsed from a Sampler directive
# Exists to map sampler type tags to their variants; sampler settings are not read yet
# RELEVANT FILES:python/pbrtscene/_validate.py,python/pbrtscene/scene.py,tests/test_sampler.py

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Type

from ._validate import select
from .params import ParameterSource


@dataclass(frozen=True)
class Sampler:
    """Generates samples for the image, time, lens and Monte Carlo integration.

    Sampler parameters (pixelsamples, seed, jitter, randomization) are accepted
    but not read yet; the scene assembler reports them as unused.
    """

    TAG: ClassVar[str] = ""

    @classmethod
    def from_params(cls, ty: str, params: ParameterSource) -> "Sampler":
        return select("sampler", ty, _SAMPLER_TYPES)()

    @classmethod
    def default(cls) -> "Sampler":
        return ZSobolSampler()


@dataclass(frozen=True)
class HaltonSampler(Sampler):
    TAG: ClassVar[str] = "halton"


@dataclass(frozen=True)
class IndependentSampler(Sampler):
    TAG: ClassVar[str] = "independent"


@dataclass(frozen=True)
class PaddedSobolSampler(Sampler):
    TAG: ClassVar[str] = "paddedsobol"


@dataclass(frozen=True)
class SobolSampler(Sampler):
    TAG: ClassVar[str] = "sobol"


@dataclass(frozen=True)
class StratifiedSampler(Sampler):
    TAG: ClassVar[str] = "stratified"


@dataclass(frozen=True)
class ZSobolSampler(Sampler):
    TAG: ClassVar[str] = "zsobol"


_SAMPLER_TYPES: Dict[str, Type[Sampler]] = {
    cls.TAG: cls
    for cls in (
        HaltonSampler,
        IndependentSampler,
        PaddedSobolSampler,
        SobolSampler,
        StratifiedSampler,
        ZSobolSampler,
    )
}
