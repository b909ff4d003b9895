# (C) 2024 Irreducible Inc.

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, Self, TypeVar

from ..utils.scalars import zero_of
from .errors import ImmutableMutationRejected

T = TypeVar("T")

DEFAULT_VAR = "x"


class AbstractPolynomial(ABC, Generic[T]):
    """A univariate polynomial in the standard basis 1, x, x², ….

    This class cannot be instantiated directly. Each representation implements the named operations below; the
    arithmetic operators are thin wrappers over them, the same way the operators of a field element forward to its
    field.
    """

    __slots__ = ()

    # numpy (and galois) scalars on the left of an operator must defer to our reflected operators.
    __array_ufunc__ = None

    @property
    @abstractmethod
    def coeffs(self) -> tuple[T, ...]:
        """The coefficients c₀, c₁, …, lowest degree first."""
        pass

    @property
    @abstractmethod
    def var(self) -> str:
        pass

    @abstractmethod
    def add(self, other: Self) -> Self:
        pass

    @abstractmethod
    def multiply(self, other: Self) -> Self:
        pass

    @abstractmethod
    def negate(self) -> Self:
        pass

    @abstractmethod
    def scalar_add(self, c: Any) -> Self:
        pass

    @abstractmethod
    def scalar_multiply(self, c: Any) -> Self:
        pass

    @abstractmethod
    def scalar_divide(self, c: Any) -> Self:
        pass

    @abstractmethod
    def evaluate(self, x: Any) -> Any:
        pass

    @classmethod
    @abstractmethod
    def one(cls, var: str = DEFAULT_VAR) -> Self:
        pass

    def subtract(self, other: Self) -> Self:
        return self.add(other.negate())

    def power(self, exponent: int) -> Self:
        """Raises to a non-negative integer power by square and multiply."""
        exponent = operator.index(exponent)
        if exponent < 0:
            raise ValueError("polynomials can only be raised to non-negative powers")
        acc = self.one(self.var)
        val = self

        while exponent:
            if exponent % 2:
                acc = acc.multiply(val)
            exponent >>= 1
            if exponent:
                val = val.multiply(val)

        return acc

    @property
    def degree(self) -> int:
        """len - 1; the zero polynomial has degree -1."""
        return len(self.coeffs) - 1

    def is_constant(self) -> bool:
        return len(self.coeffs) <= 1

    def is_zero(self) -> bool:
        return all(c == 0 for c in self.coeffs)

    def to_list(self) -> list[T]:
        return list(self.coeffs)

    def __len__(self) -> int:
        return len(self.coeffs)

    def __iter__(self) -> Iterator[T]:
        return iter(self.coeffs)

    def __getitem__(self, idx: int) -> T:
        # total over the integers: anything outside [0, len) is a zero coefficient.
        idx = operator.index(idx)
        cs = self.coeffs
        if 0 <= idx < len(cs):
            return cs[idx]
        return zero_of(cs[0]) if cs else 0

    def __setitem__(self, idx: int, value: Any) -> None:
        raise ImmutableMutationRejected(f"{type(self).__name__} is immutable")

    def __call__(self, x: Any) -> Any:
        return self.evaluate(x)

    def __neg__(self) -> Self:
        return self.negate()

    def __pos__(self) -> Self:
        return self

    def __add__(self, other: Any) -> Self:
        if isinstance(other, AbstractPolynomial):
            return self.add(other)
        return self.scalar_add(other)

    def __radd__(self, other: Any) -> Self:
        return self.scalar_add(other)

    def __sub__(self, other: Any) -> Self:
        if isinstance(other, AbstractPolynomial):
            return self.subtract(other)
        return self.scalar_add(-other)

    def __rsub__(self, other: Any) -> Self:
        return self.negate().scalar_add(other)

    def __mul__(self, other: Any) -> Self:
        if isinstance(other, AbstractPolynomial):
            return self.multiply(other)
        return self.scalar_multiply(other)

    def __rmul__(self, other: Any) -> Self:
        return self.scalar_multiply(other)

    def __truediv__(self, other: Any) -> Self:
        if isinstance(other, AbstractPolynomial):
            return NotImplemented
        return self.scalar_divide(other)

    def __pow__(self, exponent: int) -> Self:
        return self.power(exponent)
