# python/pbrtscene/config.py
# Scene loader configuration parsing (error policy, unused-parameter reporting)
# Exists to keep SceneBuilder behaviour configurable from mappings, JSON files and flat overrides
# RELEVANT FILES: python/pbrtscene/scene.py, python/pbrtscene/__init__.py, tests/test_config.py
from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional, Tuple, Union

ConfigSource = Union["LoaderConfig", Mapping[str, Any], str, Path, None]

_ERROR_POLICIES: Dict[str, str] = {
    "raise": "raise",
    "strict": "raise",
    "fail": "raise",
    "skip": "skip",
    "ignore": "skip",
    "lenient": "skip",
}

# Flat keyword overrides accepted by load_loader_config and SceneBuilder
_OVERRIDE_KEYS = frozenset(
    {
        "on_error",
        "error_policy",
        "errors",
        "skip_invalid",
        "warn_unused",
        "warn_unused_params",
        "strict_options",
        "strict",
    }
)


def _normalize_key(value: Any) -> str:
    return "".join(
        c
        for c in str(value).strip().lower()
        if c not in {"-", "_", " ", "."}
    )


def _normalize_choice(value: Any, mapping: Mapping[str, str], label: str) -> str:
    key = _normalize_key(value)
    if key not in mapping:
        raise ValueError(f"Unknown {label}: {value!r}")
    return mapping[key]


@dataclass
class LoaderConfig:
    on_error: str = "raise"
    warn_unused: bool = False
    strict_options: bool = True

    def to_dict(self) -> dict:
        return {
            "on_error": self.on_error,
            "warn_unused": self.warn_unused,
            "strict_options": self.strict_options,
        }

    def copy(self) -> "LoaderConfig":
        return copy.deepcopy(self)

    def validate(self) -> None:
        if self.on_error not in set(_ERROR_POLICIES.values()):
            raise ValueError(f"on_error must be one of 'raise' or 'skip', got {self.on_error!r}")
        if not isinstance(self.warn_unused, bool):
            raise TypeError("warn_unused must be a bool")
        if not isinstance(self.strict_options, bool):
            raise TypeError("strict_options must be a bool")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["LoaderConfig"] = None) -> "LoaderConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        if "on_error" in data:
            base.on_error = _normalize_choice(data["on_error"], _ERROR_POLICIES, "error policy")
        if "warn_unused" in data:
            base.warn_unused = bool(data["warn_unused"])
        if "strict_options" in data:
            base.strict_options = bool(data["strict_options"])
        return base


def _load_from_path(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".json", ""}:
        data = json.loads(text)
        if not isinstance(data, Mapping):
            raise TypeError(f"loader config file must contain a JSON object: {path}")
        return data
    raise ValueError(f"Unsupported loader config file format: {path}")


def _build_override_mapping(overrides: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key in {"on_error", "error_policy", "errors"}:
            out["on_error"] = value
        elif key == "skip_invalid":
            out["on_error"] = "skip" if value else "raise"
        elif key in {"warn_unused", "warn_unused_params"}:
            out["warn_unused"] = value
        elif key in {"strict_options", "strict"}:
            out["strict_options"] = value
        else:
            raise TypeError(f"Unknown loader option: {key!r}")
    return out


def load_loader_config(config: ConfigSource = None, overrides: Optional[Mapping[str, Any]] = None) -> LoaderConfig:
    if isinstance(config, LoaderConfig):
        cfg = config.copy()
    elif isinstance(config, Mapping):
        cfg = LoaderConfig.from_mapping(config)
    elif isinstance(config, (str, Path)):
        cfg = LoaderConfig.from_mapping(_load_from_path(Path(config)))
    elif config is None:
        cfg = LoaderConfig()
    else:
        raise TypeError("config must be LoaderConfig, mapping, path, or None")

    if overrides:
        merged = _build_override_mapping(overrides)
        if merged:
            cfg = LoaderConfig.from_mapping(merged, cfg)
    cfg.validate()
    return cfg


def split_loader_overrides(kwargs: MutableMapping[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    overrides: Dict[str, Any] = {}
    remaining: Dict[str, Any] = {}
    for key, value in list(kwargs.items()):
        if key in _OVERRIDE_KEYS:
            overrides[key] = kwargs.pop(key)
        else:
            remaining[key] = value
    return overrides, remaining
