"""Binomial coefficients and Bernstein basis polynomials."""

from __future__ import annotations

import math

MAX_DEGREE = 25

_BINOMIALS = tuple(
    tuple(math.comb(n, k) for k in range(n + 1)) for n in range(MAX_DEGREE + 1)
)


def binomial(n: float, k: float) -> int:
    """Binomial coefficient from the table of degrees 0 to 25."""
    n, k = int(n), int(k)
    if not 0 <= n <= MAX_DEGREE:
        raise ValueError(f"degree {n} outside 0..{MAX_DEGREE}")
    if k < 0 or k > n:
        return 0
    return _BINOMIALS[n][k]


def bernstein_basis(n: float, t: float, k: float) -> float:
    """Value of the Bernstein polynomial B(n, k) at ``t``."""
    if k < 0 or k > n:
        return 0.0
    term1 = t ** k
    term2 = 1.0 if (t == 1 and n - k == 0) else (1 - t) ** (n - k)
    return binomial(n, k) * term1 * term2


def bernstein_basis_derivative(n: float, t: float, k: float) -> float:
    """Derivative term of the Bernstein polynomial B(n, k) at ``t``."""
    if k > n:
        return 0.0
    a, b = int(n), int(k)
    term1 = 0.0 if b == 0 else binomial(a, b) * b * t ** (b - 1) * (1 - t) ** (a - b)
    term2 = 0.0 if a == b else binomial(a, b - 1) * (a - b) * t ** b * (1 - t) ** (a - b - 1)
    return term1 - term2