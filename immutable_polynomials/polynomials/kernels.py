# (C) 2024 Irreducible Inc.

from typing import Any, Sequence

from ..utils.scalars import is_zero, muladd, zero_of


def find_last_nonzero(coeffs: Sequence[Any]) -> int:
    """Returns the index of the highest non-zero coefficient, or -1 when all of them are zero.

    `coeffs[: find_last_nonzero(coeffs) + 1]` is therefore always the trimmed sequence.
    """
    for i in range(len(coeffs) - 1, -1, -1):
        if not is_zero(coeffs[i]):
            return i
    return -1


def horner(coeffs: Sequence[Any], x: Any) -> Any:
    """Evaluates c₀ + c₁ ⋅ x + ⋯ + cₙ₋₁ ⋅ xⁿ⁻¹."""
    if not coeffs:
        return zero_of(x)
    acc = coeffs[-1] + zero_of(x)
    for i in range(len(coeffs) - 2, -1, -1):
        acc = muladd(acc, x, coeffs[i])
    return acc


def padded_sum(longer: Sequence[Any], shorter: Sequence[Any]) -> tuple:
    """Elementwise sum, with `shorter` implicitly padded by zeros up to the length of `longer`.

    The output length is always len(longer), so callers must pass strictly different lengths for the top coefficient
    to be left untouched.
    """
    assert len(longer) > len(shorter), f"padded sum of lengths {len(longer)} and {len(shorter)}"
    m = len(shorter)
    return tuple(longer[i] + shorter[i] for i in range(m)) + tuple(longer[m:])


def convolve(p1: Sequence[Any], p2: Sequence[Any]) -> tuple:
    """Discrete convolution: out[k] = Σᵢ₊ⱼ₌ₖ p1[i] ⋅ p2[j], for k ∈ {0, …, n + m − 2}."""
    n, m = len(p1), len(p2)
    assert n > 0 and m > 0
    out: list[Any] = [None] * (n + m - 1)
    for i in range(n):
        for j in range(m):
            k = i + j
            if out[k] is None:
                out[k] = p1[i] * p2[j]
            else:
                out[k] = muladd(p1[i], p2[j], out[k])
    return tuple(out)
