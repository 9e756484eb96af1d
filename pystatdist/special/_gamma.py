"""
Log-gamma and the lower incomplete gamma function.

log_gamma uses the Lanczos approximation (g=7, 9 coefficients) with the
reflection formula below 1/2. The incomplete gamma is evaluated in
regularized form P(a, x) with a series below x = a + 1 and a Lentz
continued fraction above it (Numerical Recipes gser/gcf).

Both branches stop at 100 terms. Near x = a the series terms decay like
exp(-n^2 / 2a), so it needs about sqrt(46 a) terms to reach 1e-10 and is
truncated early once a exceeds about 200. P(a, x) for x just below a + 1
then comes out low: by about 4e-4 at a = 2000, x = 1950. chi_square_cdf
inherits this for df in the thousands.
"""

from __future__ import annotations

import numpy as np

from pystatdist.core.compute.tolerances import (
    FPMIN, GAMMA_SERIES, GAMMA_CONTINUED_FRACTION,
)
from pystatdist.core.exceptions import ValidationError
from pystatdist.core.validation import check_scalar, check_positive
from pystatdist.special._constants import (
    LANCZOS_G, LANCZOS_COEFFICIENTS, LANCZOS_OFFSETS,
    HALF_LOG_TWO_PI, LOG_PI,
)


def log_gamma(x: float) -> float:
    """
    Natural log of |Gamma(x)|.

    Parameters
    ----------
    x : float
        Any real number.

    Returns
    -------
    float
        log|Gamma(x)|, relative error ~1e-15 away from the poles.

    Notes
    -----
    Gamma has poles at 0, -1, -2, ...; log_gamma returns +inf there.
    This is a domain boundary, not a numerical failure. For x < 0.5 the
    reflection formula log(pi) - log|sin(pi x)| - log_gamma(1 - x) is
    used; its recursive argument is always >= 0.5, so it recurses once.
    """
    x = check_scalar(x, "x")
    if x <= 0.0 and x == np.floor(x):
        return float(np.inf)
    if np.isinf(x):
        return float(np.inf)

    if x < 0.5:
        return float(
            LOG_PI - np.log(abs(np.sin(np.pi * x))) - log_gamma(1.0 - x)
        )

    x -= 1.0
    series = LANCZOS_COEFFICIENTS[0] + np.sum(
        LANCZOS_COEFFICIENTS[1:] / (x + LANCZOS_OFFSETS)
    )
    t = x + LANCZOS_G + 0.5
    return float(HALF_LOG_TWO_PI + (x + 0.5) * np.log(t) - t + np.log(series))


def regularized_gamma_lower(a: float, x: float) -> float:
    """
    Regularized lower incomplete gamma P(a, x) = gamma(a, x) / Gamma(a).

    Parameters
    ----------
    a : float
        Shape, > 0.
    x : float
        Upper integration limit, >= 0 (+inf allowed).

    Returns
    -------
    float
        P(a, x) in [0, 1].

    Notes
    -----
    Series for x < a + 1, stopping when the latest term is below 1e-10 of
    the running sum or after 100 terms; continued fraction for Q = 1 - P
    otherwise, with the same cap. Both are scaled by
    exp(a log x - x - log_gamma(a)) so x**a and Gamma(a) never overflow.
    """
    a = check_positive(a, "a")
    x = check_scalar(x, "x")
    if x < 0.0:
        raise ValidationError(f"x: must be >= 0, got {x}")
    if x == 0.0:
        return 0.0
    if np.isinf(x):
        return 1.0

    log_prefactor = a * np.log(x) - x - log_gamma(a)

    if x < a + 1.0:
        total = _gamma_series(a, x) * np.exp(log_prefactor)
        return float(min(total, 1.0))

    q = _gamma_continued_fraction(a, x) * np.exp(log_prefactor)
    return float(min(max(1.0 - q, 0.0), 1.0))


def incomplete_gamma_lower(a: float, x: float) -> float:
    """
    Lower incomplete gamma gamma(a, x) = integral_0^x t^(a-1) e^(-t) dt.

    Not regularized. Computed as P(a, x) * Gamma(a); overflows to +inf
    once Gamma(a) does (a > ~171).

    Parameters
    ----------
    a : float
        Shape, > 0.
    x : float
        Upper integration limit, >= 0.
    """
    p = regularized_gamma_lower(a, x)
    if p == 0.0:
        return 0.0
    return float(p * np.exp(log_gamma(a)))


def _gamma_series(a: float, x: float) -> float:
    """Sum 1/a + x/(a(a+1)) + ... ; P(a, x) = sum * x^a e^-x / Gamma(a)."""
    ap = a
    term = 1.0 / a
    total = term
    for _ in range(GAMMA_SERIES.max_iter):
        ap += 1.0
        term *= x / ap
        total += term
        if abs(term) < abs(total) * GAMMA_SERIES.tol:
            break
    return total


def _gamma_continued_fraction(a: float, x: float) -> float:
    """Modified Lentz for Q(a, x); result still needs x^a e^-x / Gamma(a)."""
    b = x + 1.0 - a
    c = 1.0 / FPMIN
    d = 1.0 / b if abs(b) >= FPMIN else 1.0 / FPMIN
    h = d
    for i in range(1, GAMMA_CONTINUED_FRACTION.max_iter + 1):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < FPMIN:
            d = FPMIN
        c = b + an / c
        if abs(c) < FPMIN:
            c = FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < GAMMA_CONTINUED_FRACTION.tol:
            break
    return h
