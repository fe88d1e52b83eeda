# python/pbrtscene/_validate.py
# Shared validation helpers for the entity constructors (arity checks, tag dispatch, read-only arrays)
# Exists so every entity family reports bad input through the same error types
# RELEVANT FILES:python/pbrtscene/errors.py,python/pbrtscene/film.py,python/pbrtscene/shapes.py

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple, TypeVar

import numpy as np

from .errors import ArityMismatchError, IndexCountError, UnrecognizedTypeError
from .params import ParameterSource

_T = TypeVar("_T")

# float32 max, the renderer's "unbounded" sentinel
FLOAT_MAX = float(np.finfo(np.float32).max)


def select(family: str, tag: str, table: Mapping[str, _T]) -> _T:
    """Look up ``tag`` in a family's dispatch table; unknown tags are errors."""
    if not isinstance(tag, str) or tag not in table:
        raise UnrecognizedTypeError(family, tag)
    return table[tag]


def fixed_floats(
    params: ParameterSource,
    name: str,
    arity: int,
    family: str,
    tag: Optional[str],
) -> Optional[Tuple[float, ...]]:
    values = params.floats(name)
    if values is None:
        return None
    if len(values) != arity:
        raise ArityMismatchError(family, tag, name, arity, len(values))
    return tuple(float(v) for v in values)


def readonly_array(values: Optional[Sequence], dtype) -> np.ndarray:
    arr = np.array(values if values is not None else (), dtype=dtype)
    arr.setflags(write=False)
    return arr


def check_multiple(arr: np.ndarray, multiple: int, family: str, tag: str, name: str) -> np.ndarray:
    if arr.size % multiple != 0:
        raise IndexCountError(family, tag, name, multiple, int(arr.size))
    return arr

