"""
Binomial distribution.

The coefficient is built as the running product prod (n - i) / (i + 1),
never from factorials. Up to n = 1000 the PMF is C(n, k) p^k (1-p)^(n-k)
directly; beyond that C(n, k) can overflow a double and the PMF is
evaluated through log_gamma instead.

binomial_cdf sums the PMF table, which is O(n). Callers evaluating many
CDF values for the same (n, p) should take binomial_cdf_table once.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pystatdist.core.compute.tolerances import BINOMIAL_DIRECT_MAX_N
from pystatdist.core.validation import check_scalar, check_nonnegative_integer
from pystatdist.distributions._common import BinomialParams
from pystatdist.special import log_gamma


def binomial_coefficient(n: int, k: float) -> float:
    """
    n choose k as a float, computed iteratively.

    Returns 0 for k > n, k < 0 or non-integer k, and 1 for k in {0, n}.
    """
    n = check_nonnegative_integer(n, "n")
    k = check_scalar(k, "k")
    if k < 0 or k > n or k != np.floor(k):
        return 0.0
    k = int(k)
    if k == 0 or k == n:
        return 1.0

    k = min(k, n - k)
    result = 1.0
    for i in range(k):
        result = result * (n - i) / (i + 1)
    return result


def binomial_pmf(k: float, n: int, p: float) -> float:
    """
    P(X = k) for X ~ Binomial(n, p).

    Zero outside [0, n] and for non-integer k.
    """
    params = BinomialParams(n, p)
    k = check_scalar(k, "k")
    if k < 0 or k > params.n or k != np.floor(k):
        return 0.0
    return _pmf(int(k), params.n, params.p)


def binomial_cdf(k: float, n: int, p: float) -> float:
    """
    P(X <= k) = sum_{i=0}^{floor(k)} pmf(i).

    Returns 0 for k < 0 and exactly 1 for k >= n.
    """
    params = BinomialParams(n, p)
    k = check_scalar(k, "k")
    if k < 0:
        return 0.0
    if k >= params.n:
        return 1.0
    table = _pmf_table(params.n, params.p)
    return float(min(np.sum(table[:int(np.floor(k)) + 1]), 1.0))


def binomial_pmf_table(n: int, p: float) -> NDArray[np.float64]:
    """PMF over the whole support: element k is P(X = k), k = 0..n."""
    params = BinomialParams(n, p)
    return _pmf_table(params.n, params.p)


def binomial_cdf_table(n: int, p: float) -> NDArray[np.float64]:
    """CDF over the whole support: element k is P(X <= k), k = 0..n."""
    params = BinomialParams(n, p)
    cdf = np.minimum(np.cumsum(_pmf_table(params.n, params.p)), 1.0)
    cdf[-1] = 1.0
    return cdf


# --- Helpers ---

def _pmf(k: int, n: int, p: float) -> float:
    """PMF on validated integer k in [0, n]."""
    if p == 0.0:
        return 1.0 if k == 0 else 0.0
    if p == 1.0:
        return 1.0 if k == n else 0.0

    if n <= BINOMIAL_DIRECT_MAX_N:
        coeff = binomial_coefficient(n, k)
        return float(coeff * p ** k * (1.0 - p) ** (n - k))

    log_coeff = log_gamma(n + 1.0) - log_gamma(k + 1.0) - log_gamma(n - k + 1.0)
    return float(np.exp(log_coeff + k * np.log(p) + (n - k) * np.log1p(-p)))


def _pmf_table(n: int, p: float) -> NDArray[np.float64]:
    """Vectorized PMF for k = 0..n."""
    k = np.arange(n + 1, dtype=np.float64)
    if p == 0.0 or p == 1.0:
        table = np.zeros(n + 1)
        table[0 if p == 0.0 else n] = 1.0
        return table

    if n <= BINOMIAL_DIRECT_MAX_N:
        coeff = np.ones(n + 1)
        coeff[1:] = np.cumprod((n - k[:-1]) / (k[:-1] + 1.0))
        return coeff * p ** k * (1.0 - p) ** (n - k)

    log_fact = np.array([log_gamma(i + 1.0) for i in range(n + 1)])
    log_coeff = log_fact[n] - log_fact - log_fact[::-1]
    return np.exp(log_coeff + k * np.log(p) + (n - k) * np.log1p(-p))
