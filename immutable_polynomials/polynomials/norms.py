# (C) 2024 Irreducible Inc.

import math
from typing import Any

from ..utils.scalars import is_zero, zero_of
from .abstract_polynomial import AbstractPolynomial


def _norm_p0(c: Any) -> Any:
    magnitude = abs(c)
    return zero_of(magnitude) if is_zero(c) else type(magnitude)(1)


def norm(p: AbstractPolynomial, deg: float = 2) -> Any:
    """Computes the ℓᵖ norm of the coefficient vector of `p`.

    deg = ∞ gives max |cᵢ|, deg = 0 counts the non-zero coefficients, and any other positive deg gives
    (Σ |cᵢ|ᵈᵉᵍ)^(1/deg). The zero polynomial has norm 0 for every deg.

    :param p: the polynomial
    :param deg: the degree p of the norm; 2 (the euclidean norm) by default
    """
    if math.isnan(deg) or deg < 0:
        raise ValueError(f"norm degree must be non-negative, got {deg}")
    cs = p.coeffs
    if not cs:
        return 0.0
    if deg == math.inf:
        return max(abs(c) for c in cs)
    if deg == 1:
        return sum(abs(c) for c in cs)
    if deg == 2:
        return math.hypot(*(abs(c) for c in cs))  # scaled, so it doesn't overflow on large coefficients
    if deg == 0:
        return sum(_norm_p0(c) for c in cs)
    return sum(abs(c) ** deg for c in cs) ** (1 / deg)
