# python/pbrtscene/media.py
# Participating medium placeholder parsed from a MakeNamedMedium directive
# Exists so named media can be declared and referenced before their parameters are modelled
# RELEVANT FILES:python/pbrtscene/scene.py,tests/test_media.py

from __future__ import annotations

from dataclasses import dataclass

from .params import ParameterSource


@dataclass(frozen=True)
class Medium:
    """Field-less placeholder; medium parameters are not parsed yet."""

    @classmethod
    def from_params(cls, params: ParameterSource) -> "Medium":
        return cls()
