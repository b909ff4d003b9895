# (C) 2024 Irreducible Inc.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hypothesis import strategies as st

from ..polynomials.immutable_polynomial import ImmutablePolynomial


def integer_polynomials(
    min_size: int = 0,
    max_size: int = 6,
    bound: int = 100,
    var: str = "x",
) -> st.SearchStrategy[ImmutablePolynomial[int]]:
    """Normalized polynomials with small integer coefficients; trailing zeros in the draw are trimmed away."""
    return st.lists(st.integers(-bound, bound), min_size=min_size, max_size=max_size).map(
        lambda cs: ImmutablePolynomial(cs, var)
    )


def float_polynomials(min_size: int = 0, max_size: int = 6, bound: float = 10.0) -> st.SearchStrategy:
    return st.lists(
        st.floats(-bound, bound, allow_nan=False, allow_infinity=False),
        min_size=min_size,
        max_size=max_size,
    ).map(ImmutablePolynomial)


def _value(other: Any) -> int:
    return other.value if isinstance(other, Mod6) else other


@dataclass(frozen=True)
class Mod6:
    """Integers modulo 6: a ring with zero divisors, so leading terms can cancel in products."""

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value % 6)

    def __add__(self, other: Any) -> Mod6:
        return Mod6(self.value + _value(other))

    __radd__ = __add__

    def __mul__(self, other: Any) -> Mod6:
        return Mod6(self.value * _value(other))

    __rmul__ = __mul__

    def __neg__(self) -> Mod6:
        return Mod6(-self.value)

    def __eq__(self, other: Any) -> bool:
        return self.value == _value(other) % 6
