# (C) 2024 Irreducible Inc.

import math
from fractions import Fraction
from typing import Any, Iterable, TypeVar

import numpy as np

T = TypeVar("T")

_NUMERIC_TOWER: tuple[type, ...] = (bool, int, Fraction, float, complex)
_BUILTIN_NUMBERS: tuple[type, ...] = (bool, int, float, complex)


def is_zero(value: Any) -> bool:
    return bool(value == 0)


def zero_of(value: Any) -> Any:
    """Returns the additive identity of the type of `value`."""
    if isinstance(value, np.ndarray):
        return np.zeros_like(value)
    return type(value)(0)


def promote_type(values: Iterable[Any]) -> type | None:
    """Returns the common type that all of `values` promote to.

    Builtin numbers follow the tower bool < int < Fraction < float < complex; as soon as a numpy scalar is involved
    numpy's own promotion rules apply. None means there is nothing to promote (no values, or values of some other
    scalar type, e.g. finite field elements, which are left as they are).
    """
    values = list(values)
    if not values:
        return None
    if any(isinstance(v, np.generic) for v in values):
        if all(isinstance(v, (np.generic, *_BUILTIN_NUMBERS)) for v in values):
            return np.result_type(*values).type
        return None
    rank = 0
    for v in values:
        if type(v) not in _NUMERIC_TOWER:
            return None
        rank = max(rank, _NUMERIC_TOWER.index(type(v)))
    return _NUMERIC_TOWER[rank]


def promote(values: Iterable[Any], *others: Any) -> tuple:
    """Converts `values` to the common type of `values` and `others`."""
    values = tuple(values)
    target = promote_type(values + others)
    if target is None:
        return values
    return tuple(v if type(v) is target else target(v) for v in values)


def muladd(a: Any, b: Any, c: Any) -> Any:
    """a ⋅ b + c, fused into a single rounding when all three are python floats."""
    if type(a) is float and type(b) is float and type(c) is float:
        return math.fma(a, b, c)
    return a * b + c


def default_rtol(value: Any) -> float:
    # √ε for inexact types, 0 for exact ones (integers, rationals, field elements).
    if isinstance(value, (np.floating, np.complexfloating)):
        return float(np.sqrt(np.finfo(value.dtype).eps))
    if isinstance(value, (float, complex)):
        return math.sqrt(np.finfo(float).eps)
    return 0.0


def is_approx_zero(value: Any, rtol: float, atol: float) -> bool:
    """Tests |value - 0| ≤ max(atol, rtol ⋅ max(|value|, |0|))."""
    if is_zero(value):
        return True
    magnitude = abs(value)
    return bool(magnitude <= max(atol, rtol * magnitude))
