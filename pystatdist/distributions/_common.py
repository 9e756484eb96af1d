"""
Parameter sets for the six distribution families.

Each parameter set is a frozen value type that validates itself on
construction. Every distribution function builds one before computing,
so a domain violation raises the same ValidationError regardless of
which function received it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from pystatdist.core.validation import (
    check_finite,
    check_positive,
    check_probability,
    check_nonnegative_integer,
)


@dataclass(frozen=True)
class NormalParams:
    """Normal(mean, sd), sd > 0."""
    mean: float = 0.0
    sd: float = 1.0

    family: ClassVar[str] = "normal"
    discrete: ClassVar[bool] = False

    def __post_init__(self):
        object.__setattr__(self, "mean", check_finite(self.mean, "mean"))
        object.__setattr__(self, "sd", check_positive(self.sd, "sd"))


@dataclass(frozen=True)
class BinomialParams:
    """Binomial(n, p): n >= 0 trials, success probability p in [0, 1]."""
    n: int
    p: float

    family: ClassVar[str] = "binomial"
    discrete: ClassVar[bool] = True

    def __post_init__(self):
        object.__setattr__(self, "n", check_nonnegative_integer(self.n, "n"))
        object.__setattr__(self, "p", check_probability(self.p, "p"))


@dataclass(frozen=True)
class PoissonParams:
    """Poisson(lam), lam > 0."""
    lam: float

    family: ClassVar[str] = "poisson"
    discrete: ClassVar[bool] = True

    def __post_init__(self):
        object.__setattr__(self, "lam", check_positive(self.lam, "lam"))


@dataclass(frozen=True)
class TParams:
    """Student's t with df > 0 (fractional df allowed)."""
    df: float

    family: ClassVar[str] = "t"
    discrete: ClassVar[bool] = False

    def __post_init__(self):
        object.__setattr__(self, "df", check_positive(self.df, "df"))


@dataclass(frozen=True)
class ChiSquareParams:
    """Chi-square with df > 0."""
    df: float

    family: ClassVar[str] = "chi-square"
    discrete: ClassVar[bool] = False

    def __post_init__(self):
        object.__setattr__(self, "df", check_positive(self.df, "df"))


@dataclass(frozen=True)
class FParams:
    """Fisher's F with numerator df1 > 0 and denominator df2 > 0."""
    df1: float
    df2: float

    family: ClassVar[str] = "f"
    discrete: ClassVar[bool] = False

    def __post_init__(self):
        object.__setattr__(self, "df1", check_positive(self.df1, "df1"))
        object.__setattr__(self, "df2", check_positive(self.df2, "df2"))


DistributionParams = Union[
    NormalParams, BinomialParams, PoissonParams,
    TParams, ChiSquareParams, FParams,
]
