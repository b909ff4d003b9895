# (C) 2024 Irreducible Inc.

import math
from decimal import Decimal
from fractions import Fraction

import galois
import numpy as np
import pytest

from .scalars import default_rtol, is_approx_zero, is_zero, muladd, promote, promote_type, zero_of

GF7 = galois.GF(7)


@pytest.mark.parametrize("value", [0, 0.0, -0.0, 0j, Fraction(0), np.float32(0), np.int64(0), GF7(0)])
def test_is_zero(value) -> None:
    assert is_zero(value)


@pytest.mark.parametrize("value", [1, 1e-300, 1j, Fraction(1, 3), np.float32(1e-30), GF7(3), math.nan])
def test_is_not_zero(value) -> None:
    assert not is_zero(value)


@pytest.mark.parametrize("value", [3, 2.5, 1 + 2j, Fraction(1, 2), np.float32(1.5), np.int16(4)])
def test_zero_of_keeps_type(value) -> None:
    zero = zero_of(value)
    assert zero == 0
    assert type(zero) is type(value)


def test_zero_of_array() -> None:
    zero = zero_of(np.array([1.0, 2.0]))
    assert zero.shape == (2,)
    assert not zero.any()


@pytest.mark.parametrize(
    "values,expected",
    [
        ((1, 2), int),
        ((True, 1), int),
        ((1, 2.0), float),
        ((1, Fraction(1, 2)), Fraction),
        ((Fraction(1, 2), 0.5), float),
        ((1.0, 1j), complex),
        ((np.float32(1), np.float64(2)), np.float64),
        ((np.int8(1), np.int32(2)), np.int32),
    ],
)
def test_promote_type(values, expected) -> None:
    assert promote_type(values) is expected


@pytest.mark.parametrize("values", [(), (Decimal(1), 2), (GF7(1), GF7(2)), (np.float64(1), Fraction(1, 2))])
def test_promote_type_leaves_other_scalars_alone(values) -> None:
    assert promote_type(values) is None
    assert promote(values) == tuple(values)


def test_promote() -> None:
    promoted = promote((1, 2, Fraction(1, 2)))
    assert promoted == (Fraction(1), Fraction(2), Fraction(1, 2))
    assert all(type(c) is Fraction for c in promoted)

    promoted = promote((1, 2), 0.0)
    assert promoted == (1.0, 2.0)
    assert all(type(c) is float for c in promoted)


def test_muladd() -> None:
    assert muladd(2, 3, 4) == 10
    assert muladd(Fraction(1, 2), 4, Fraction(1, 3)) == Fraction(7, 3)
    assert muladd(0.5, 4.0, 1.0) == 3.0
    # 0.1 ⋅ 10 rounds to exactly 1.0 unfused; the fused result keeps the representation error of 0.1
    assert muladd(0.1, 10.0, -1.0) == 2.0**-54


def test_default_rtol() -> None:
    assert default_rtol(1.0) == pytest.approx(math.sqrt(2.0**-52))
    assert default_rtol(1j) == pytest.approx(math.sqrt(2.0**-52))
    assert default_rtol(np.float32(1)) == pytest.approx(math.sqrt(2.0**-23))
    assert default_rtol(1) == 0
    assert default_rtol(Fraction(1, 2)) == 0
    assert default_rtol(GF7(1)) == 0


def test_is_approx_zero() -> None:
    assert is_approx_zero(0, 0, 0)
    assert is_approx_zero(1e-10, 0, 1e-9)
    assert is_approx_zero(-1e-10, 1e-8, 1e-9)
    assert is_approx_zero(1e-10j, 0, 1e-9)
    assert not is_approx_zero(1e-8, 0, 1e-9)
    # a relative tolerance below 1 never makes a non-zero value close to zero on its own.
    assert not is_approx_zero(1e-300, 0.5, 0)
