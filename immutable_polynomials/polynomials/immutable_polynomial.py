# (C) 2024 Irreducible Inc.

from __future__ import annotations

import copy
import logging
import numbers
from typing import Any, Iterable, Self, TypeVar

import numpy as np

from ..utils.scalars import default_rtol, is_approx_zero, is_zero, promote, zero_of
from .abstract_polynomial import DEFAULT_VAR, AbstractPolynomial
from .errors import ImmutableMutationRejected, InvalidLeadingCoefficient, VariableMismatch
from .kernels import convolve, find_last_nonzero, horner, padded_sum
from .norms import norm

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _coefficient_tuple(coeffs: Any) -> tuple:
    # a lone scalar is the constant polynomial
    if isinstance(coeffs, np.ndarray):
        return tuple(coeffs) if coeffs.ndim else (coeffs,)
    if isinstance(coeffs, AbstractPolynomial):
        return coeffs.coeffs
    if isinstance(coeffs, Iterable) and not isinstance(coeffs, str):
        return tuple(coeffs)
    return (coeffs,)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Number) or (isinstance(value, np.ndarray) and value.ndim == 0)


def _elementwise_equal(left: tuple, right: tuple) -> bool:
    return len(left) == len(right) and all(bool(a == b) for a, b in zip(left, right))


class ImmutablePolynomial(AbstractPolynomial[T]):
    """An immutable polynomial with a fixed number of coefficients.

    The coefficient tuple is lowest order first and, once normalized, never ends in a zero: the zero polynomial has no
    coefficients at all, and a polynomial of degree n has exactly n + 1 of them. `var` names the indeterminate; it only
    matters for checking that two operands are compatible.

    >>> ImmutablePolynomial((1, 0, 3, 4)).coeffs
    (1, 0, 3, 4)
    >>> ImmutablePolynomial((1, 2, 0)).coeffs
    (1, 2)

    Addition of two polynomials of the same length keeps that length, even if the leading terms cancel. Such a value
    has a zero top coefficient; it still compares equal to its trimmed form.
    """

    __slots__ = ("_coeffs", "_var")

    _coeffs: tuple[T, ...]
    _var: str

    def __init__(self, coeffs: Iterable[T] | T = (), var: str = DEFAULT_VAR) -> None:
        cs = promote(_coefficient_tuple(coeffs))
        n = find_last_nonzero(cs)
        object.__setattr__(self, "_coeffs", cs[: n + 1])
        object.__setattr__(self, "_var", str(var))

    @classmethod
    def raw(cls, coeffs: Iterable[T], var: str = DEFAULT_VAR) -> Self:
        """Builds a polynomial from exactly these coefficients, without trimming.

        :raises InvalidLeadingCoefficient: if the last coefficient is zero.
        """
        cs = promote(_coefficient_tuple(coeffs))
        if cs and is_zero(cs[-1]):
            raise InvalidLeadingCoefficient(f"leading coefficient must be non-zero: {cs!r}")
        return cls._unchecked(cs, var)

    @classmethod
    def _unchecked(cls, cs: tuple, var: str) -> Self:
        p = cls.__new__(cls)
        object.__setattr__(p, "_coeffs", cs)
        object.__setattr__(p, "_var", str(var))
        return p

    @classmethod
    def zero(cls, var: str = DEFAULT_VAR) -> Self:
        return cls._unchecked((), var)

    @classmethod
    def one(cls, var: str = DEFAULT_VAR) -> Self:
        return cls._unchecked((1,), var)

    @classmethod
    def variable(cls, var: str = DEFAULT_VAR) -> Self:
        return cls._unchecked((0, 1), var)

    @property
    def coeffs(self) -> tuple[T, ...]:
        return self._coeffs

    @property
    def var(self) -> str:
        return self._var

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutableMutationRejected(f"cannot set {name!r}: {type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise ImmutableMutationRejected(f"cannot delete {name!r}: {type(self).__name__} is immutable")

    def __copy__(self) -> Self:
        return self._unchecked(self._coeffs, self._var)

    def __deepcopy__(self, memo: dict) -> Self:
        return self._unchecked(copy.deepcopy(self._coeffs, memo), self._var)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._coeffs!r}, {self._var!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, AbstractPolynomial):
            if self.var != other.var:
                return False
            cs1, cs2 = self.coeffs, other.coeffs
            if _elementwise_equal(cs1, cs2):
                return True
            # tolerate trailing zeros left behind by same-length addition
            n1 = find_last_nonzero(cs1)
            n2 = find_last_nonzero(cs2)
            if n1 < 0 and n2 < 0:
                return True
            if n1 < 0 or n2 < 0:
                return False
            return _elementwise_equal(cs1[: n1 + 1], cs2[: n2 + 1])
        if _is_scalar(other):
            return find_last_nonzero(self._coeffs) <= 0 and bool(self[0] == other)
        return NotImplemented

    def __hash__(self) -> int:
        n = find_last_nonzero(self._coeffs)
        if n <= 0:
            return hash(self[0])  # agrees with scalar equality
        return hash((self._var, self._coeffs[: n + 1]))

    def evaluate(self, x: Any) -> Any:
        return horner(self._coeffs, x)

    def negate(self) -> Self:
        return self._unchecked(tuple(-c for c in self._coeffs), self._var)

    def add(self, other: AbstractPolynomial) -> Self:
        n, m = len(self), len(other)
        if n == 0:
            return self._unchecked(promote(other.coeffs), other.var)
        if m == 0:
            return self._unchecked(promote(self._coeffs), self._var)

        if self.var != other.var:
            if self.is_constant():
                logger.debug("constant %r adopts variable %r", self, other.var)
                return self._unchecked(self._coeffs, other.var).add(other)
            if other.is_constant():
                logger.debug("constant %r adopts variable %r", other, self.var)
                return self.add(self._unchecked(other.coeffs, self.var))
            raise VariableMismatch(f"polynomials must have the same variable: {self.var!r} != {other.var!r}")

        if n == m:
            cs = promote(a + b for a, b in zip(self._coeffs, other.coeffs))
            if is_zero(cs[-1]):
                # the length is kept on purpose; equality trims, arithmetic does not
                logger.debug("leading terms cancelled in addition; keeping length %d", n)
            return self._unchecked(cs, self._var)
        if n < m:
            cs = padded_sum(other.coeffs, self._coeffs)
        else:
            cs = padded_sum(self._coeffs, other.coeffs)
        # the longer operand keeps its top coefficient, zero or not
        return self._unchecked(promote(cs), self._var)

    def multiply(self, other: AbstractPolynomial) -> Self:
        if self.is_constant():
            return type(self)(other.coeffs, other.var).scalar_multiply(self[0])
        if other.is_constant():
            return self.scalar_multiply(other[0])
        if self.var != other.var:
            raise VariableMismatch(f"polynomials must have the same variable: {self.var!r} != {other.var!r}")

        cs = promote(convolve(self._coeffs, other.coeffs))
        if not is_zero(cs[-1]):
            return self.raw(cs, self._var)
        n = find_last_nonzero(cs)
        logger.debug("leading terms cancelled in product; trimming length %d to %d", len(cs), n + 1)
        return self._unchecked(cs[: n + 1], self._var)

    def scalar_add(self, c: Any) -> Self:
        if is_zero(c):
            return self._unchecked(promote(self._coeffs, c), self._var)
        n = len(self)
        if n == 0:
            return self.raw((c,), self._var)
        if n == 1:
            return type(self)((self._coeffs[0] + c,), self._var)
        return self.add(self.raw((c,), self._var))

    def scalar_multiply(self, c: Any) -> Self:
        cs = promote(a * c for a in self._coeffs)
        if is_zero(self[self.degree] * c):
            logger.debug("scalar product %r * %r renormalized", self, c)
            return type(self)(cs, self._var)
        return self.raw(cs, self._var)

    def scalar_divide(self, c: Any) -> Self:
        cs = promote(a / c for a in self._coeffs)
        if not cs or is_zero(cs[-1]):
            logger.debug("scalar quotient %r / %r renormalized", self, c)
            return type(self)(cs, self._var)
        return self.raw(cs, self._var)

    def chop(self, rtol: float | None = None, atol: float = 0) -> Self:
        """Drops the trailing coefficients that are approximately zero.

        :param rtol: relative tolerance, defaults to √ε for inexact coefficient types and 0 otherwise.
        :param atol: absolute tolerance.
        """
        cs = self._coeffs
        if rtol is None:
            rtol = default_rtol(cs[0]) if cs else 0.0
        for i in range(len(cs) - 1, -1, -1):
            if not is_approx_zero(cs[i], rtol, atol):
                return self.raw(cs[: i + 1], self._var)
        return self.zero(self._var)

    def truncate(self, rtol: float | None = None, atol: float = 0) -> Self:
        """Chops, then zeroes every coefficient at or below max|cᵢ| ⋅ rtol + atol."""
        cs = self._coeffs
        if rtol is None:
            rtol = default_rtol(cs[0]) if cs else 0.0
        q = self.chop(rtol=rtol, atol=atol)
        if q.is_zero():
            return q
        thresh = max(abs(c) for c in q.coeffs) * rtol + atol
        return type(self)(tuple(zero_of(c) if abs(c) <= thresh else c for c in q.coeffs), self._var)

    # there is nothing to do in place; the "!" spellings return new values as well.
    chop_ = chop
    truncate_ = truncate

    def norm(self, deg: float = 2) -> Any:
        return norm(self, deg)
