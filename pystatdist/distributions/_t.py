"""
Student's t distribution.

One canonical CDF for every call site:

    df == 1   Cauchy closed form      0.5 + atan(t) / pi
    df == 2   closed form             0.5 + t / (2 sqrt(2 + t^2))
    df >= 100 standard normal
    otherwise incomplete beta         P(T <= t) = 1 - I_x(df/2, 1/2) / 2 for t > 0
                                      with x = df / (df + t^2), mirrored for t < 0

The quantile uses the matching closed forms and otherwise Newton-Raphson
seeded from the normal quantile.
"""

from __future__ import annotations

import numpy as np

from pystatdist.core.compute.tolerances import (
    FLAT_DERIVATIVE, T_NORMAL_DF_CUTOFF, T_QUANTILE_NEWTON,
)
from pystatdist.core.validation import check_scalar, check_probability
from pystatdist.distributions._common import TParams
from pystatdist.distributions._normal import normal_cdf, normal_inverse_cdf
from pystatdist.special import log_gamma
from pystatdist.special._beta import _incomplete_beta


def t_pdf(t: float, df: float) -> float:
    """
    Student's t density.

    Gamma((df+1)/2) / (sqrt(df pi) Gamma(df/2)) * (1 + t^2/df)^(-(df+1)/2),
    evaluated in log space for every df.
    """
    params = TParams(df)
    t = check_scalar(t, "t")
    return _pdf(t, params.df)


def t_cdf(t: float, df: float) -> float:
    """
    P(T <= t) for T ~ t(df), df > 0 (fractional df allowed).

    Returns exactly 0.5 at t = 0 and 0 / 1 at -inf / +inf.
    """
    params = TParams(df)
    t = check_scalar(t, "t")
    return _cdf(t, params.df)


def t_inverse_cdf(p: float, df: float) -> float:
    """
    Quantile of the t distribution.

    Parameters
    ----------
    p : float
        Probability in [0, 1]; p = 0 gives -inf and p = 1 gives +inf.
    df : float
        Degrees of freedom, > 0.

    Notes
    -----
    For df outside {1, 2} and below 100, at most 10 Newton steps are
    taken; iteration stops early once |cdf(t) - p| < 1e-8 or the density
    drops below 1e-10. Whatever estimate is current then is returned.
    """
    params = TParams(df)
    p = check_probability(p, "p")
    value, _ = _quantile(p, params.df)
    return value


# --- Helpers shared with the hypothesis facade ---

def _pdf(t: float, df: float) -> float:
    if np.isinf(t):
        return 0.0
    log_density = (
        log_gamma((df + 1.0) / 2.0) - log_gamma(df / 2.0)
        - 0.5 * np.log(df * np.pi)
        - (df + 1.0) / 2.0 * np.log1p(t * t / df)
    )
    return float(np.exp(log_density))


def _cdf(t: float, df: float) -> float:
    if np.isinf(t):
        return 0.0 if t < 0 else 1.0
    if df == 1.0:
        return float(0.5 + np.arctan(t) / np.pi)
    if df == 2.0:
        return float(0.5 + t / (2.0 * np.sqrt(2.0 + t * t)))
    if df >= T_NORMAL_DF_CUTOFF:
        return normal_cdf(t)

    x = df / (df + t * t)
    tail = 0.5 * _incomplete_beta(df / 2.0, 0.5, x)
    return float(tail) if t < 0 else float(1.0 - tail)


def _quantile(p: float, df: float) -> tuple[float, bool]:
    """Quantile and whether the iteration met its tolerance."""
    if p == 0.0:
        return float(-np.inf), True
    if p == 1.0:
        return float(np.inf), True
    if df == 1.0:
        return float(np.tan(np.pi * (p - 0.5))), True
    if df == 2.0:
        u = 2.0 * p - 1.0
        return float(u * np.sqrt(2.0 / (1.0 - u * u))), True
    if df >= T_NORMAL_DF_CUTOFF:
        return normal_inverse_cdf(p), True

    t = normal_inverse_cdf(p)
    for _ in range(T_QUANTILE_NEWTON.max_iter):
        residual = _cdf(t, df) - p
        if abs(residual) < T_QUANTILE_NEWTON.tol:
            return float(t), True
        density = _pdf(t, df)
        if density < FLAT_DERIVATIVE:
            return float(t), False
        t -= residual / density

    return float(t), abs(_cdf(t, df) - p) < T_QUANTILE_NEWTON.tol
