# python/pbrtscene/params.py
# Parameter source protocol and a mapping-backed parameter list for scene directives
# Exists to decouple the entity constructors from whatever tokenizer produced the arguments
# RELEVANT FILES:python/pbrtscene/errors.py,python/pbrtscene/scene.py,tests/test_params.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Protocol, Sequence, Tuple, Union

import numpy as np

from .errors import ParameterDeclarationError


class ParameterSource(Protocol):
    """Read-only, string-keyed, typed lookup over one directive's arguments.

    Scalar accessors take the caller's default; the remaining accessors return
    ``None`` when the name is absent.
    """

    def float(self, name: str, default: float) -> float: ...

    def integer(self, name: str, default: int) -> int: ...

    def boolean(self, name: str) -> Optional[bool]: ...

    def string(self, name: str) -> Optional[str]: ...

    def floats(self, name: str) -> Optional[Sequence[float]]: ...

    def integers(self, name: str) -> Optional[Sequence[int]]: ...


# Kinds whose values are read back through floats()
_FLOAT_ARRAY_KINDS = {
    "float",
    "rgb",
    "spectrum",
    "blackbody",
    "point",
    "point2",
    "point3",
    "vector",
    "vector2",
    "vector3",
    "normal",
    "normal3",
}

_KINDS = _FLOAT_ARRAY_KINDS | {"integer", "bool", "string", "texture"}

_BOOL_TOKENS = {"true": True, "false": False}


def _as_sequence(value: Any) -> List[Any]:
    if isinstance(value, np.ndarray):
        return value.ravel().tolist()
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _coerce_float(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise ParameterDeclarationError(f"expected a number, got {value!r}", field=name)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ParameterDeclarationError(f"expected a number, got {value!r}", field=name) from exc


def _coerce_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ParameterDeclarationError(f"expected an integer, got {value!r}", field=name)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ParameterDeclarationError(f"expected an integer, got {value!r}", field=name) from exc
    raise ParameterDeclarationError(f"expected an integer, got {value!r}", field=name)


def _coerce_bool(value: Any, name: str) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str) and value in _BOOL_TOKENS:
        return _BOOL_TOKENS[value]
    raise ParameterDeclarationError(f"expected true or false, got {value!r}", field=name)


def _coerce_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ParameterDeclarationError(f"expected a string, got {value!r}", field=name)
    return value


@dataclass(frozen=True)
class Param:
    """One typed parameter: ``kind`` ("float", "rgb", ...), ``name`` and its values."""

    kind: str
    name: str
    values: Tuple[Any, ...]

    @classmethod
    def declare(cls, declaration: str, value: Any) -> "Param":
        """Build a parameter from a ``"<kind> <name>"`` declaration and a raw value."""
        parts = str(declaration).split()
        if len(parts) != 2:
            raise ParameterDeclarationError(
                f"parameter declaration must be '<kind> <name>', got {declaration!r}"
            )
        return cls.create(parts[0], parts[1], value)

    @classmethod
    def create(cls, kind: str, name: str, value: Any) -> "Param":
        if kind not in _KINDS:
            raise ParameterDeclarationError(f"unknown parameter kind {kind!r}", field=name)
        items = _as_sequence(value)
        if kind in _FLOAT_ARRAY_KINDS:
            values = tuple(_coerce_float(v, name) for v in items)
        elif kind == "integer":
            values = tuple(_coerce_int(v, name) for v in items)
        elif kind == "bool":
            values = tuple(_coerce_bool(v, name) for v in items)
        else:
            values = tuple(_coerce_str(v, name) for v in items)
        return cls(kind, name, values)

    @property
    def declaration(self) -> str:
        return f"{self.kind} {self.name}"


ParamSource = Union["ParamList", Mapping[str, Any], Iterable[Param], None]


class ParamList:
    """Parameter source backed by a dict of typed ``Param`` entries.

    Lookups are exact and case-sensitive. A lookup through an accessor of the
    wrong kind behaves as if the parameter were absent and leaves it unused.
    """

    def __init__(self, params: Iterable[Param] = ()) -> None:
        self._params: Dict[str, Param] = {}
        self._used: set = set()
        # names looked up only through accessors of another kind
        self._mismatched: set = set()
        for param in params:
            if param.name in self._params:
                raise ParameterDeclarationError("parameter declared more than once", field=param.name)
            self._params[param.name] = param

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParamList":
        """Parse ``{"float fov": 60, "rgb L": [1, 1, 1]}`` style mappings."""
        return cls(Param.declare(key, value) for key, value in data.items())

    @classmethod
    def coerce(cls, source: ParamSource) -> "ParamList":
        if source is None:
            return cls()
        if isinstance(source, ParamList):
            return source
        if isinstance(source, Mapping):
            return cls.from_mapping(source)
        return cls(source)

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __len__(self) -> int:
        return len(self._params)

    def __iter__(self) -> Iterator[Param]:
        return iter(self._params.values())

    def __repr__(self) -> str:
        inner = ", ".join(f"{p.declaration!r}: {list(p.values)!r}" for p in self._params.values())
        return f"ParamList({{{inner}}})"

    def _lookup(self, name: str, kinds: Iterable[str]) -> Optional[Param]:
        param = self._params.get(name)
        if param is None:
            return None
        if param.kind not in kinds:
            self._mismatched.add(name)
            return None
        self._used.add(name)
        return param

    def get(self, name: str) -> Optional[Param]:
        self._used.add(name)
        return self._params.get(name)

    def names(self) -> List[str]:
        return list(self._params)

    def unused(self) -> List[str]:
        """Names that no accessor of the declared kind has read yet."""
        return [name for name in self._params if name not in self._used]

    def mismatched(self) -> Dict[str, str]:
        """Unused names that were asked for with the wrong kind, mapped to their declared kind."""
        return {
            name: self._params[name].kind
            for name in self._params
            if name in self._mismatched and name not in self._used
        }

    def float(self, name: str, default: float) -> float:
        param = self._lookup(name, ("float",))
        if param is None or not param.values:
            return default
        return param.values[0]

    def integer(self, name: str, default: int) -> int:
        param = self._lookup(name, ("integer",))
        if param is None or not param.values:
            return default
        return param.values[0]

    def boolean(self, name: str) -> Optional[bool]:
        param = self._lookup(name, ("bool",))
        if param is None or not param.values:
            return None
        return param.values[0]

    def string(self, name: str) -> Optional[str]:
        param = self._lookup(name, ("string",))
        if param is None or not param.values:
            return None
        return param.values[0]

    def texture(self, name: str) -> Optional[str]:
        param = self._lookup(name, ("texture",))
        if param is None or not param.values:
            return None
        return param.values[0]

    def floats(self, name: str) -> Optional[Tuple[float, ...]]:
        param = self._lookup(name, _FLOAT_ARRAY_KINDS)
        if param is None:
            return None
        return param.values

    def integers(self, name: str) -> Optional[Tuple[int, ...]]:
        param = self._lookup(name, ("integer",))
        if param is None:
            return None
        return param.values
