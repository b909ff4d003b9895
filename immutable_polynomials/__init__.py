# (C) 2024 Irreducible Inc.

from .polynomials.abstract_polynomial import DEFAULT_VAR, AbstractPolynomial
from .polynomials.errors import (
    ImmutableMutationRejected,
    InvalidLeadingCoefficient,
    PolynomialError,
    VariableMismatch,
)
from .polynomials.immutable_polynomial import ImmutablePolynomial
from .polynomials.norms import norm

__all__ = [
    "DEFAULT_VAR",
    "AbstractPolynomial",
    "ImmutableMutationRejected",
    "ImmutablePolynomial",
    "InvalidLeadingCoefficient",
    "PolynomialError",
    "VariableMismatch",
    "norm",
]
