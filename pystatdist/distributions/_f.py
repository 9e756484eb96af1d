"""
Fisher's F distribution.

The density uses the beta-function ratio
exp(log_gamma((d1+d2)/2) - log_gamma(d1/2) - log_gamma(d2/2)) times the
power terms. The CDF is I_{d1 x / (d1 x + d2)}(d1/2, d2/2).
"""

from __future__ import annotations

import numpy as np

from pystatdist.core.validation import check_scalar, check_probability
from pystatdist.distributions._common import FParams
from pystatdist.distributions._quantile import bracketed_newton
from pystatdist.special import log_gamma
from pystatdist.special._beta import _incomplete_beta


def f_pdf(x: float, df1: float, df2: float) -> float:
    """
    F density.

    Zero for x < 0. At x = 0 it is +inf for df1 < 2, 1 for df1 = 2 and
    0 for df1 > 2.
    """
    params = FParams(df1, df2)
    x = check_scalar(x, "x")
    return _pdf(x, params.df1, params.df2)


def f_cdf(x: float, df1: float, df2: float) -> float:
    """P(X <= x) for X ~ F(df1, df2); zero for x <= 0."""
    params = FParams(df1, df2)
    x = check_scalar(x, "x")
    return _cdf(x, params.df1, params.df2)


def f_inverse_cdf(p: float, df1: float, df2: float) -> float:
    """
    F quantile by bracketed Newton search.

    p = 0 gives 0 and p = 1 gives +inf.
    """
    params = FParams(df1, df2)
    p = check_probability(p, "p")
    value, _ = _quantile(p, params.df1, params.df2)
    return value


# --- Helpers shared with the hypothesis facade ---

def _pdf(x: float, d1: float, d2: float) -> float:
    if x < 0.0 or np.isinf(x):
        return 0.0
    if x == 0.0:
        if d1 < 2.0:
            return float(np.inf)
        return 1.0 if d1 == 2.0 else 0.0

    log_ratio = log_gamma((d1 + d2) / 2.0) - log_gamma(d1 / 2.0) - log_gamma(d2 / 2.0)
    log_density = (
        log_ratio
        + (d1 / 2.0) * np.log(d1 / d2)
        + (d1 / 2.0 - 1.0) * np.log(x)
        - ((d1 + d2) / 2.0) * np.log1p(d1 * x / d2)
    )
    return float(np.exp(log_density))


def _cdf(x: float, d1: float, d2: float) -> float:
    if x <= 0.0:
        return 0.0
    if np.isinf(x):
        return 1.0
    return _incomplete_beta(d1 / 2.0, d2 / 2.0, d1 * x / (d1 * x + d2))


def _quantile(p: float, d1: float, d2: float) -> tuple[float, bool]:
    if p == 0.0:
        return 0.0, True
    if p == 1.0:
        return float(np.inf), True

    return bracketed_newton(
        lambda x: _cdf(x, d1, d2),
        lambda x: _pdf(x, d1, d2),
        p,
        1.0,
    )
