"""
Power and sample-size calculations.

Closed-form normal approximations. For the z and t families the test is
two-sided at level alpha with noncentrality ncp = effect_size * sqrt(n):

    power = 1 - Phi(z_crit - ncp) - Phi(-z_crit - ncp),
    z_crit = Phi^-1(1 - alpha/2)

with ncp taken as |ncp|, since the test is two-sided. The far-tail
rejection probability Phi(-z_crit - ncp) is subtracted, not added, so
power(effect_size=0) is 0 rather than alpha and the far tail never adds
power. The t family uses the same normal approximation rather than a
noncentral t.

For one-way ANOVA, effect_size is Cohen's f and

    power ~= 1 - exp(-n f^2 / 2)

This is a coarse heuristic, not a noncentral-F computation; it does not
depend on alpha.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatdist.core.exceptions import NumericalError, DimensionError
from pystatdist.core.validation import (
    check_finite, check_positive, check_open_probability, check_choice,
)
from pystatdist.distributions._normal import normal_cdf, normal_inverse_cdf
from pystatdist.hypothesis._common import POWER_FAMILIES


def power(
    family: str,
    effect_size: float,
    sample_size: float,
    alpha: float = 0.05,
) -> float:
    """
    Probability of rejecting H0 when the true effect is effect_size.

    Parameters
    ----------
    family : str
        "z", "t" or "anova".
    effect_size : float
        Standardized effect (Cohen's d for z/t, Cohen's f for anova).
    sample_size : float
        n > 0.
    alpha : float
        Significance level in (0, 1).

    Returns
    -------
    float
        Power in [0, 1].
    """
    family = check_choice(family, POWER_FAMILIES, "family")
    effect_size = check_finite(effect_size, "effect_size")
    sample_size = check_positive(sample_size, "sample_size")
    alpha = check_open_probability(alpha, "alpha")
    return _power(family, effect_size, sample_size, alpha)


def required_sample_size(
    family: str,
    effect_size: float,
    power: float = 0.8,
    alpha: float = 0.05,
) -> int:
    """
    Smallest n reaching the target power, by the normal approximation.

        z, t:   n = ceil(((z_{1-alpha/2} + z_power) / effect_size)^2)
        anova:  n = ceil(((z_{1-alpha} + z_power) / effect_size)^2)

    The anova form uses a one-sided critical value and is not the inverse
    of the anova power heuristic.

    Returns
    -------
    int
        n >= 1.

    Raises
    ------
    NumericalError
        If effect_size is zero (no finite n detects a null effect).
    """
    family = check_choice(family, POWER_FAMILIES, "family")
    effect_size = check_finite(effect_size, "effect_size")
    target = check_open_probability(power, "power")
    alpha = check_open_probability(alpha, "alpha")

    if effect_size == 0.0:
        raise NumericalError(
            "effect_size: must be non-zero to compute a sample size"
        )

    if family == "anova":
        z_alpha = normal_inverse_cdf(1.0 - alpha)
    else:
        z_alpha = normal_inverse_cdf(1.0 - alpha / 2.0)
    z_power = normal_inverse_cdf(target)

    n = ((z_alpha + z_power) / effect_size) ** 2
    return max(1, math.ceil(n))


def power_curve(
    family: str,
    effect_sizes: ArrayLike,
    sample_size: float,
    alpha: float = 0.05,
) -> NDArray[np.float64]:
    """
    Power evaluated over a 1-D grid of effect sizes.

    Returns
    -------
    ndarray
        Same length as effect_sizes.
    """
    family = check_choice(family, POWER_FAMILIES, "family")
    sample_size = check_positive(sample_size, "sample_size")
    alpha = check_open_probability(alpha, "alpha")

    grid = np.asarray(effect_sizes, dtype=np.float64)
    if grid.ndim != 1:
        raise DimensionError(
            f"effect_sizes: expected 1-D array, got {grid.ndim}-D"
        )

    return np.array([
        _power(family, check_finite(es, "effect_sizes"), sample_size, alpha)
        for es in grid
    ])


def _power(family: str, effect_size: float, n: float, alpha: float) -> float:
    if family == "anova":
        ncp = n * effect_size * effect_size
        return float(-np.expm1(-ncp / 2.0))

    z_crit = normal_inverse_cdf(1.0 - alpha / 2.0)
    ncp = abs(effect_size) * math.sqrt(n)
    value = 1.0 - normal_cdf(z_crit - ncp) - normal_cdf(-z_crit - ncp)
    return float(min(max(value, 0.0), 1.0))
