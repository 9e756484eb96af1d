"""
Solver dispatch for the hypothesis-test facade.

Provides p_value(), critical_value() and evaluate_test(). All three
build a TestDesign, then dispatch on its family to the distribution
layer:

    z           normal_cdf / normal_inverse_cdf
    t           t_cdf / t_inverse_cdf
    chi-square  chi_square_cdf / chi_square_inverse_cdf
    f           f_cdf / f_inverse_cdf
"""

from __future__ import annotations

from typing import Any, Literal

import numpy as np

from pystatdist.core.exceptions import ValidationError
from pystatdist.core.result import Result
from pystatdist.core.compute.timing import Timer
from pystatdist.distributions import _normal, _t, _chisq, _f
from pystatdist.hypothesis._common import (
    SYMMETRIC_FAMILIES, UPPER_TAIL_FAMILIES, FAMILY_METHODS, TestParams,
)
from pystatdist.hypothesis.design import TestDesign
from pystatdist.hypothesis.solution import TestSolution


TailChoice = Literal["two-tailed", "left-tailed", "right-tailed"]


def p_value(
    family: str | TestDesign,
    statistic: float | None = None,
    df: Any = None,
    tail: TailChoice = "two-tailed",
) -> float:
    """
    p-value of a test statistic.

    Parameters
    ----------
    family : str or TestDesign
        "z", "t", "chi-square" or "f", or a pre-built design.
    statistic : float
        Observed statistic. Infinite values are allowed.
    df : float, (float, float) or None
        Degrees of freedom: none for z, one value for t and chi-square,
        (df1, df2) for f.
    tail : str
        "two-tailed" (default), "left-tailed" or "right-tailed".

    Returns
    -------
    float
        p-value in [0, 1].

    Notes
    -----
    Two-tailed p-values are 2 * min(cdf, 1 - cdf) for the symmetric z and
    t families, but 2 * (1 - cdf) for chi-square and F, whose statistics
    are non-negative and tested against the upper tail. The latter can
    exceed 1 for small statistics and is capped at 1.
    """
    if isinstance(family, TestDesign):
        design = _require(family, "statistic")
    else:
        design = TestDesign.for_p_value(family, statistic, df, tail)
    value, _ = _p_value(design)
    return value


def critical_value(
    family: str | TestDesign,
    alpha: float | None = None,
    tail: TailChoice = "two-tailed",
    df: Any = None,
) -> float:
    """
    Critical value of a test at significance level alpha.

    Parameters
    ----------
    family : str or TestDesign
        "z", "t", "chi-square" or "f", or a pre-built design.
    alpha : float
        Significance level in (0, 1).
    tail : str
        "two-tailed" (default), "left-tailed" or "right-tailed".
    df : float, (float, float) or None
        Degrees of freedom as for p_value().

    Returns
    -------
    float
        left-tailed:  quantile(alpha)
        right-tailed: quantile(1 - alpha)
        two-tailed:   quantile(1 - alpha/2). For z and t this is the
                      magnitude c of the symmetric region |stat| >= c;
                      for chi-square and F it is the upper bound, which
                      matches the upper-tail two-tailed p-value.
    """
    if isinstance(family, TestDesign):
        design = _require(family, "alpha")
    else:
        design = TestDesign.for_critical_value(family, alpha, tail, df)
    value, _ = _critical_value(design)
    return value


def evaluate_test(
    family: str | TestDesign,
    statistic: float | None = None,
    df: Any = None,
    tail: TailChoice = "two-tailed",
    alpha: float = 0.05,
) -> TestSolution:
    """
    Full significance-test evaluation.

    Computes the p-value, the critical value at alpha and the decision
    (reject when p < alpha), and collects non-fatal warnings: quantile
    searches that hit their iteration cap, capped two-tailed p-values,
    and statistics outside the family's support.

    Returns
    -------
    TestSolution
        With p_value, critical_value, reject, warnings and summary().
    """
    if isinstance(family, TestDesign):
        design = _require(family, "statistic", "alpha")
    else:
        design = TestDesign.for_evaluation(family, statistic, df, tail, alpha)

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    if design.family in UPPER_TAIL_FAMILIES and design.statistic < 0:
        warnings_list.append(
            f"{design.family} statistic {design.statistic:g} is negative; "
            "the distribution is supported on [0, inf)"
        )

    with timer.section('p_value'):
        p, capped = _p_value(design)
    if capped:
        warnings_list.append(
            "two-tailed p-value 2 * (1 - cdf) exceeded 1 and was capped at 1"
        )

    with timer.section('critical_value'):
        crit, converged = _critical_value(design)
    if not converged:
        warnings_list.append(
            "critical value search reached its iteration cap; "
            "value is the best available estimate"
        )

    timer.stop()

    params = TestParams(
        family=design.family,
        statistic=design.statistic,
        parameter=design.parameter,
        tail=design.tail,
        p_value=p,
        alpha=design.alpha,
        critical_value=crit,
        reject=bool(p < design.alpha),
        method=FAMILY_METHODS[design.family],
    )
    result = Result(
        params=params,
        info={'family': design.family, 'quantile_converged': converged},
        timing=timer.result(),
        backend_name='cpu_reference',
        warnings=tuple(warnings_list),
    )
    return TestSolution(_result=result, _design=design)


# --- Dispatch helpers ---

def _require(design: TestDesign, *fields: str) -> TestDesign:
    """Reject a design built for a different operation."""
    for name in fields:
        if getattr(design, name) is None:
            raise ValidationError(
                f"design: has no {name}; build it with a TestDesign factory "
                f"that sets {name}"
            )
    return design


def _cdf(design: TestDesign, x: float) -> float:
    """CDF of the design's reference distribution at x."""
    family = design.family
    if family == "z":
        return _normal.normal_cdf(x)
    if family == "t":
        return _t._cdf(x, design.df[0])
    if family == "chi-square":
        return _chisq._cdf(x, design.df[0])
    if family == "f":
        return _f._cdf(x, design.df[0], design.df[1])
    raise ValueError(f"Unknown family: {family!r}")


def _quantile(design: TestDesign, p: float) -> tuple[float, bool]:
    """Quantile of the design's reference distribution, with convergence flag."""
    family = design.family
    if family == "z":
        return _normal.normal_inverse_cdf(p), True
    if family == "t":
        return _t._quantile(p, design.df[0])
    if family == "chi-square":
        return _chisq._quantile(p, design.df[0])
    if family == "f":
        return _f._quantile(p, design.df[0], design.df[1])
    raise ValueError(f"Unknown family: {family!r}")


def _p_value(design: TestDesign) -> tuple[float, bool]:
    """p-value and whether a two-tailed upper-tail value was capped at 1."""
    cdf = _cdf(design, design.statistic)
    tail = design.tail

    if tail == "left-tailed":
        return _clip(cdf), False
    if tail == "right-tailed":
        return _clip(1.0 - cdf), False

    if design.family in SYMMETRIC_FAMILIES:
        return _clip(2.0 * min(cdf, 1.0 - cdf)), False

    raw = 2.0 * (1.0 - cdf)
    return _clip(raw), raw > 1.0


def _critical_value(design: TestDesign) -> tuple[float, bool]:
    alpha = design.alpha
    tail = design.tail
    if tail == "left-tailed":
        return _quantile(design, alpha)
    if tail == "right-tailed":
        return _quantile(design, 1.0 - alpha)
    return _quantile(design, 1.0 - alpha / 2.0)


def _clip(value: float) -> float:
    return float(np.clip(value, 0.0, 1.0))
