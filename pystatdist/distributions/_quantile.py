"""
Bracketed Newton search for quantiles on [0, inf).

Used by the chi-square and F quantiles. Newton steps from a good seed,
but the iterate is kept inside a bracket [lo, hi] that always contains
the root; any step that leaves the bracket (or has a flat density) is
replaced by bisection.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from pystatdist.core.compute.tolerances import QUANTILE_SEARCH
from pystatdist.core.exceptions import ConvergenceError


def bracketed_newton(
    cdf: Callable[[float], float],
    pdf: Callable[[float], float],
    p: float,
    x0: float,
) -> tuple[float, bool]:
    """
    Solve cdf(x) = p for x >= 0.

    Args:
        cdf: Non-decreasing CDF supported on [0, inf)
        pdf: Its derivative
        p: Target probability, strictly inside (0, 1)
        x0: Starting guess (> 0)

    Returns:
        (x, converged). x is the best estimate after at most
        QUANTILE_SEARCH.max_iter Newton/bisection steps.

    Raises:
        ConvergenceError: If no upper bracket with cdf(hi) >= p is found
    """
    limit = QUANTILE_SEARCH
    lo = 0.0
    hi = 2.0 * max(x0, 1.0)
    for _ in range(limit.max_iter):
        if cdf(hi) >= p:
            break
        lo = hi
        hi *= 2.0
    else:
        raise ConvergenceError(
            f"could not bracket quantile for p={p}: cdf({hi:g}) < p",
            iterations=limit.max_iter,
            reason='no_bracket',
        )

    x = x0 if lo < x0 < hi else 0.5 * (lo + hi)
    for _ in range(limit.max_iter):
        value = cdf(x)
        if value == p:
            return x, True
        if value < p:
            lo = x
        else:
            hi = x

        density = pdf(x)
        x_new = x - (value - p) / density if density > 0.0 else np.nan
        if not np.isfinite(x_new) or x_new <= lo or x_new >= hi:
            x_new = 0.5 * (lo + hi)

        scale = limit.tol * x
        if abs(x_new - x) <= scale or hi - lo <= scale:
            return float(x_new), True
        x = x_new

    return float(x), False
