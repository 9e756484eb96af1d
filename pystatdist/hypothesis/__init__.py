"""
Hypothesis-test facade.

Turns a test statistic into a p-value, looks up critical values, and
answers power and sample-size questions, on top of the distribution
layer.

Public API:
    p_value(family, statistic, df, tail)          - p-value by tail
    critical_value(family, alpha, tail, df)       - rejection boundary
    evaluate_test(family, statistic, df, tail, alpha) - full decision
    power(family, effect_size, n, alpha)          - normal-approximation power
    required_sample_size(family, effect_size, power, alpha)
    power_curve(family, effect_sizes, n, alpha)   - power over a grid
"""

from pystatdist.hypothesis.solvers import p_value, critical_value, evaluate_test
from pystatdist.hypothesis._power import power, required_sample_size, power_curve
from pystatdist.hypothesis.design import TestDesign
from pystatdist.hypothesis._common import (
    TestParams, VALID_FAMILIES, VALID_TAILS, POWER_FAMILIES,
)
from pystatdist.hypothesis.solution import TestSolution

__all__ = [
    "p_value",
    "critical_value",
    "evaluate_test",
    "power",
    "required_sample_size",
    "power_curve",
    "TestDesign",
    "TestParams",
    "TestSolution",
    "VALID_FAMILIES",
    "VALID_TAILS",
    "POWER_FAMILIES",
]
