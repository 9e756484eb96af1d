"""
Special functions.

The leaf layer of pystatdist. Every distribution function is built on
these four approximations.

Public API:
    erf(x)                               - error function (A&S 7.1.26)
    log_gamma(x)                         - log|Gamma(x)| (Lanczos)
    log_beta(a, b)                       - log B(a, b)
    incomplete_gamma_lower(a, x)         - gamma(a, x), not regularized
    regularized_gamma_lower(a, x)        - P(a, x)
    incomplete_beta_regularized(a, b, x) - I_x(a, b)
"""

from pystatdist.special._erf import erf
from pystatdist.special._gamma import (
    log_gamma,
    incomplete_gamma_lower,
    regularized_gamma_lower,
)
from pystatdist.special._beta import log_beta, incomplete_beta_regularized

__all__ = [
    "erf",
    "log_gamma",
    "log_beta",
    "incomplete_gamma_lower",
    "regularized_gamma_lower",
    "incomplete_beta_regularized",
]
