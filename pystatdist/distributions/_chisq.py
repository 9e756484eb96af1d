"""
Chi-square distribution.

CDF is the regularized lower incomplete gamma P(df/2, x/2). The quantile
starts from the Wilson-Hilferty approximation and refines it with a
bracketed Newton search.
"""

from __future__ import annotations

import numpy as np

from pystatdist.core.validation import check_scalar, check_probability
from pystatdist.distributions._common import ChiSquareParams
from pystatdist.distributions._normal import normal_inverse_cdf
from pystatdist.distributions._quantile import bracketed_newton
from pystatdist.special import log_gamma, regularized_gamma_lower

_LOG_TWO = np.log(2.0)


def chi_square_pdf(x: float, df: float) -> float:
    """
    Chi-square density x^(k-1) e^(-x/2) / (2^k Gamma(k)), k = df/2.

    Zero for x < 0. At x = 0 the density is +inf for df < 2, 1/2 for
    df = 2 and 0 for df > 2.
    """
    params = ChiSquareParams(df)
    x = check_scalar(x, "x")
    return _pdf(x, params.df)


def chi_square_cdf(x: float, df: float) -> float:
    """P(X <= x) = P(df/2, x/2); zero for x <= 0."""
    params = ChiSquareParams(df)
    x = check_scalar(x, "x")
    return _cdf(x, params.df)


def chi_square_inverse_cdf(p: float, df: float) -> float:
    """
    Chi-square quantile.

    p = 0 gives 0 (the bottom of the support) and p = 1 gives +inf.
    """
    params = ChiSquareParams(df)
    p = check_probability(p, "p")
    value, _ = _quantile(p, params.df)
    return value


# --- Helpers shared with the hypothesis facade ---

def _pdf(x: float, df: float) -> float:
    if x < 0.0 or np.isinf(x):
        return 0.0
    k = df / 2.0
    if x == 0.0:
        if df < 2.0:
            return float(np.inf)
        return 0.5 if df == 2.0 else 0.0
    log_density = (k - 1.0) * np.log(x) - x / 2.0 - k * _LOG_TWO - log_gamma(k)
    return float(np.exp(log_density))


def _cdf(x: float, df: float) -> float:
    if x <= 0.0:
        return 0.0
    return regularized_gamma_lower(df / 2.0, x / 2.0)


def _quantile(p: float, df: float) -> tuple[float, bool]:
    if p == 0.0:
        return 0.0, True
    if p == 1.0:
        return float(np.inf), True

    # Wilson-Hilferty: (X/df)^(1/3) is approximately normal
    z = normal_inverse_cdf(p)
    h = 2.0 / (9.0 * df)
    seed = df * max(1.0 - h + z * np.sqrt(h), 1e-4) ** 3

    return bracketed_newton(
        lambda x: _cdf(x, df),
        lambda x: _pdf(x, df),
        p,
        seed,
    )
