"""
TestDesign: validated inputs for the hypothesis-test facade.

Factory classmethods per operation validate the family, tail, degrees of
freedom and the operation-specific number (statistic or alpha). The
design is immutable after construction; the solvers never re-validate.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np

from pystatdist.core.exceptions import ValidationError, DimensionError
from pystatdist.core.validation import (
    check_scalar, check_positive, check_open_probability, check_choice,
)
from pystatdist.hypothesis._common import VALID_FAMILIES, VALID_TAILS


def _validate_df(family: str, df: Any) -> tuple[float, ...] | None:
    """
    Normalize degrees of freedom for a family.

    z takes none (any df passed is ignored with a UserWarning), t and
    chi-square take one positive number, f takes a (df1, df2) pair.
    """
    if family == "z":
        if df is not None:
            warnings.warn(
                f"df={df!r} is ignored for the 'z' family",
                UserWarning,
                stacklevel=4,
            )
        return None

    if df is None:
        raise ValidationError(f"df: required for the {family!r} family")

    if family == "f":
        if np.ndim(df) != 1 or len(df) != 2:
            raise DimensionError(
                f"df: the 'f' family needs (df1, df2), got {df!r}"
            )
        return (check_positive(df[0], "df1"), check_positive(df[1], "df2"))

    if np.ndim(df) == 1 and len(df) == 1:
        df = df[0]
    return (check_positive(df, "df"),)


@dataclass(frozen=True)
class TestDesign:
    """
    Design for p-value, critical-value and full test evaluation.

    Do not construct directly; use factory classmethods.
    """
    __test__ = False  # not a pytest test class despite the name

    family: str
    tail: str
    _df: tuple[float, ...] | None = None
    _statistic: float | None = None
    _alpha: float | None = None

    # --- Properties ---

    @property
    def df(self) -> tuple[float, ...] | None:
        return self._df

    @property
    def statistic(self) -> float | None:
        return self._statistic

    @property
    def alpha(self) -> float | None:
        return self._alpha

    @property
    def parameter(self) -> dict[str, float] | None:
        """Degrees of freedom keyed by name, for reporting."""
        if self._df is None:
            return None
        if self.family == "f":
            return {"df1": self._df[0], "df2": self._df[1]}
        return {"df": self._df[0]}

    # --- Factory classmethods ---

    @classmethod
    def for_p_value(
        cls,
        family: str,
        statistic: float,
        df: Any = None,
        tail: str = "two-tailed",
    ) -> TestDesign:
        """Build design for p_value()."""
        family = check_choice(family, VALID_FAMILIES, "family")
        tail = check_choice(tail, VALID_TAILS, "tail")
        return cls(
            family=family,
            tail=tail,
            _df=_validate_df(family, df),
            _statistic=check_scalar(statistic, "statistic"),
        )

    @classmethod
    def for_critical_value(
        cls,
        family: str,
        alpha: float,
        tail: str = "two-tailed",
        df: Any = None,
    ) -> TestDesign:
        """Build design for critical_value()."""
        family = check_choice(family, VALID_FAMILIES, "family")
        tail = check_choice(tail, VALID_TAILS, "tail")
        return cls(
            family=family,
            tail=tail,
            _df=_validate_df(family, df),
            _alpha=check_open_probability(alpha, "alpha"),
        )

    @classmethod
    def for_evaluation(
        cls,
        family: str,
        statistic: float,
        df: Any = None,
        tail: str = "two-tailed",
        alpha: float = 0.05,
    ) -> TestDesign:
        """Build design for evaluate_test()."""
        family = check_choice(family, VALID_FAMILIES, "family")
        tail = check_choice(tail, VALID_TAILS, "tail")
        return cls(
            family=family,
            tail=tail,
            _df=_validate_df(family, df),
            _statistic=check_scalar(statistic, "statistic"),
            _alpha=check_open_probability(alpha, "alpha"),
        )
