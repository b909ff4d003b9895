# (C) 2024 Irreducible Inc.


class PolynomialError(Exception):
    """Base class of the errors raised by polynomial operations."""


class InvalidLeadingCoefficient(PolynomialError, ValueError):
    """A fixed-length coefficient sequence ends in zero.

    Only the raw constructor raises this; the normalizing constructor trims trailing zeros instead.
    """


class VariableMismatch(PolynomialError, ValueError):
    """Two non-constant polynomials in different variables were combined."""


class ImmutableMutationRejected(PolynomialError, TypeError):
    """Immutable polynomials cannot be modified; construct a new value instead."""
