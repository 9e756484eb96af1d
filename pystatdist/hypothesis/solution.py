"""
Hypothesis test solution types.

TestSolution wraps Result[TestParams] and provides an R-style summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np

from pystatdist.core.result import Result
from pystatdist.hypothesis._common import TestParams

if TYPE_CHECKING:
    from pystatdist.hypothesis.design import TestDesign

_STATISTIC_NAMES = {"z": "z", "t": "t", "chi-square": "X-squared", "f": "F"}

_TAIL_REGIONS = {
    "two-tailed": "two-tailed",
    "left-tailed": "left tail",
    "right-tailed": "right tail",
}


@dataclass
class TestSolution:
    """
    User-facing significance test results.

    Wraps Result[TestParams]; all payload fields are available as
    properties and summary() renders a print.htest-like block.
    """
    __test__ = False  # not a pytest test class despite the name

    _result: Result[TestParams]
    _design: 'TestDesign | None'

    @property
    def family(self) -> str:
        return self._result.params.family

    @property
    def statistic(self) -> float:
        """Observed test statistic."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Conventional symbol for the statistic (e.g. 't', 'X-squared')."""
        return _STATISTIC_NAMES[self._result.params.family]

    @property
    def parameter(self) -> dict[str, float] | None:
        """Degrees of freedom (e.g. {'df': 9})."""
        return self._result.params.parameter

    @property
    def tail(self) -> str:
        return self._result.params.tail

    @property
    def p_value(self) -> float:
        """p-value of the test."""
        return self._result.params.p_value

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def critical_value(self) -> float:
        """Rejection boundary at alpha."""
        return self._result.params.critical_value

    @property
    def reject(self) -> bool:
        """True when p_value < alpha."""
        return self._result.params.reject

    @property
    def method(self) -> str:
        return self._result.params.method

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as an R-style test report.

        Produces output like:
            t test

        t = 2.5, df = 10, p-value = 0.03144
        tail: two-tailed, alpha = 0.05
        critical value: 2.228139
        decision: reject the null hypothesis
        """
        p = self._result.params
        lines = [f"\t{p.method}", ""]

        parts = [f"{self.statistic_name} = {_format_number(p.statistic)}"]
        if p.parameter is not None:
            for name, val in p.parameter.items():
                parts.append(f"{name} = {val:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        lines.append(f"tail: {_TAIL_REGIONS[p.tail]}, alpha = {p.alpha:g}")
        lines.append(f"critical value: {_format_number(p.critical_value)}")
        if p.reject:
            lines.append("decision: reject the null hypothesis")
        else:
            lines.append("decision: fail to reject the null hypothesis")

        for w in self._result.warnings:
            lines.append(f"warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TestSolution(method={p.method!r}, "
            f"{self.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g}, reject={p.reject})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    """Format a number, handling infinity."""
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
