"""
Common types for the hypothesis-test facade.

Defines the family and tail vocabularies and TestParams, the payload
carried inside Result[TestParams] by evaluate_test().
"""

from __future__ import annotations

from dataclasses import dataclass


VALID_FAMILIES = ("z", "t", "chi-square", "f")
VALID_TAILS = ("two-tailed", "left-tailed", "right-tailed")
POWER_FAMILIES = ("z", "t", "anova")

# Symmetric about zero: two-tailed p-value is 2 * min(cdf, 1 - cdf).
SYMMETRIC_FAMILIES = ("z", "t")
# Non-negative statistics tested against the upper tail by convention:
# two-tailed p-value is 2 * (1 - cdf).
UPPER_TAIL_FAMILIES = ("chi-square", "f")

FAMILY_METHODS = {
    "z": "z test",
    "t": "t test",
    "chi-square": "Chi-squared test",
    "f": "F test",
}


@dataclass(frozen=True)
class TestParams:
    """
    Parameter payload for an evaluated significance test.

    Attributes
    ----------
    family : str
        "z", "t", "chi-square" or "f".
    statistic : float
        Observed test statistic.
    parameter : dict or None
        Degrees of freedom, e.g. {"df": 10} or {"df1": 3, "df2": 12}.
        None for the z test.
    tail : str
        "two-tailed", "left-tailed" or "right-tailed".
    p_value : float
        p-value in [0, 1].
    alpha : float
        Significance level.
    critical_value : float
        Rejection boundary at alpha for this tail (a magnitude for
        two-tailed z/t tests).
    reject : bool
        True when p_value < alpha.
    method : str
        Human-readable test name.
    """
    __test__ = False  # not a pytest test class despite the name

    family: str
    statistic: float
    parameter: dict[str, float] | None
    tail: str
    p_value: float
    alpha: float
    critical_value: float
    reject: bool
    method: str
