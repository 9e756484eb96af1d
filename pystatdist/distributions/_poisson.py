"""
Poisson distribution.

pmf(k) = lam^k e^-lam / k!, evaluated in log space so lam^k cannot
overflow. k! is exact up to 170! and comes from log_gamma(k + 1) beyond,
so large k keeps working where an iterative factorial would overflow.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from pystatdist.core.compute.tolerances import FACTORIAL_MAX_K, POISSON_TAIL_SDS
from pystatdist.core.validation import check_scalar, check_nonnegative_integer
from pystatdist.distributions._common import PoissonParams
from pystatdist.special import log_gamma


def poisson_pmf(k: float, lam: float) -> float:
    """
    P(X = k) for X ~ Poisson(lam).

    Zero for negative or non-integer k.
    """
    params = PoissonParams(lam)
    k = check_scalar(k, "k")
    if k < 0 or np.isinf(k) or k != np.floor(k):
        return 0.0
    k = int(k)
    return float(np.exp(k * np.log(params.lam) - params.lam - _log_factorial(k)))


def poisson_cdf(k: float, lam: float) -> float:
    """
    P(X <= k) = sum_{i=0}^{floor(k)} pmf(i).

    The sum stops once the remaining upper tail is below double
    resolution, so huge k costs no more than k ~ lam + 40 sqrt(lam).
    """
    params = PoissonParams(lam)
    k = check_scalar(k, "k")
    if k < 0:
        return 0.0
    cutoff = _tail_cutoff(params.lam)
    if k >= cutoff:
        return 1.0
    table = _pmf_table(int(np.floor(k)), params.lam)
    return float(min(np.sum(table), 1.0))


def poisson_pmf_table(k_max: int, lam: float) -> NDArray[np.float64]:
    """PMF for k = 0..k_max (element k is P(X = k))."""
    params = PoissonParams(lam)
    k_max = check_nonnegative_integer(k_max, "k_max")
    return _pmf_table(k_max, params.lam)


def poisson_cdf_table(k_max: int, lam: float) -> NDArray[np.float64]:
    """CDF for k = 0..k_max (element k is P(X <= k))."""
    params = PoissonParams(lam)
    k_max = check_nonnegative_integer(k_max, "k_max")
    return np.minimum(np.cumsum(_pmf_table(k_max, params.lam)), 1.0)


# --- Helpers ---

def _log_factorial(k: int) -> float:
    if k <= FACTORIAL_MAX_K:
        return float(np.log(float(math.factorial(k))))
    return log_gamma(k + 1.0)


def _tail_cutoff(lam: float) -> float:
    return lam + POISSON_TAIL_SDS * np.sqrt(lam) + POISSON_TAIL_SDS


def _pmf_table(k_max: int, lam: float) -> NDArray[np.float64]:
    k = np.arange(k_max + 1, dtype=np.float64)
    # log k! as a running sum of log i
    log_fact = np.concatenate(([0.0], np.cumsum(np.log(k[1:]))))
    return np.exp(k * np.log(lam) - lam - log_fact)
