"""
Probability calculator.

One entry point answering the four questions a distribution calculator
asks of any family: the density/mass at a point, the lower tail, the
upper tail, and the mass between two points.

Discrete families (binomial, Poisson) treat both endpoints as included:

    upper    P(X >= x)        = 1 - cdf(ceil(x) - 1)
    between  P(a <= X <= b)   = cdf(b) - cdf(ceil(a) - 1)

Continuous families use P(X > x) = 1 - cdf(x) and
P(a < X <= b) = cdf(b) - cdf(a); the distinction is immaterial there.
"""

from __future__ import annotations

import numpy as np

from pystatdist.core.exceptions import ValidationError
from pystatdist.core.validation import check_scalar, check_choice
from pystatdist.distributions._common import (
    DistributionParams,
    NormalParams, BinomialParams, PoissonParams,
    TParams, ChiSquareParams, FParams,
)
from pystatdist.distributions._normal import normal_pdf, normal_cdf
from pystatdist.distributions._binomial import binomial_pmf, binomial_cdf
from pystatdist.distributions._poisson import poisson_pmf, poisson_cdf
from pystatdist.distributions._t import t_pdf, t_cdf
from pystatdist.distributions._chisq import chi_square_pdf, chi_square_cdf
from pystatdist.distributions._f import f_pdf, f_cdf

VALID_KINDS = ("density", "lower", "upper", "between")

_PARAM_TYPES = (
    NormalParams, BinomialParams, PoissonParams,
    TParams, ChiSquareParams, FParams,
)


def density(params: DistributionParams, x: float) -> float:
    """PDF (continuous) or PMF (discrete) of the family at x."""
    if isinstance(params, NormalParams):
        return normal_pdf(x, params.mean, params.sd)
    if isinstance(params, BinomialParams):
        return binomial_pmf(x, params.n, params.p)
    if isinstance(params, PoissonParams):
        return poisson_pmf(x, params.lam)
    if isinstance(params, TParams):
        return t_pdf(x, params.df)
    if isinstance(params, ChiSquareParams):
        return chi_square_pdf(x, params.df)
    if isinstance(params, FParams):
        return f_pdf(x, params.df1, params.df2)
    raise _unknown_params(params)


def cdf(params: DistributionParams, x: float) -> float:
    """P(X <= x) for the family described by params."""
    if isinstance(params, NormalParams):
        return normal_cdf(x, params.mean, params.sd)
    if isinstance(params, BinomialParams):
        return binomial_cdf(x, params.n, params.p)
    if isinstance(params, PoissonParams):
        return poisson_cdf(x, params.lam)
    if isinstance(params, TParams):
        return t_cdf(x, params.df)
    if isinstance(params, ChiSquareParams):
        return chi_square_cdf(x, params.df)
    if isinstance(params, FParams):
        return f_cdf(x, params.df1, params.df2)
    raise _unknown_params(params)


def probability(
    params: DistributionParams,
    kind: str,
    x: float,
    upper: float | None = None,
) -> float:
    """
    Evaluate a calculator query.

    Parameters
    ----------
    params : parameter set
        NormalParams, BinomialParams, PoissonParams, TParams,
        ChiSquareParams or FParams.
    kind : str
        "density", "lower", "upper" or "between".
    x : float
        The point, or the lower end for "between".
    upper : float or None
        Upper end; required for "between" and must be >= x.

    Returns
    -------
    float
        Density/mass (>= 0) or a probability in [0, 1].

    Examples
    --------
    >>> probability(BinomialParams(10, 0.5), "between", 3, 7)
    0.890625
    """
    _check_params(params)
    kind = check_choice(kind, VALID_KINDS, "kind")
    x = check_scalar(x, "x")

    if kind == "density":
        return density(params, x)
    if kind == "lower":
        return cdf(params, x)

    if kind == "upper":
        return _clip(1.0 - _cdf_below(params, x))

    if upper is None:
        raise ValidationError("upper: required when kind='between'")
    upper = check_scalar(upper, "upper")
    if upper < x:
        raise ValidationError(
            f"upper: must be >= x, got upper={upper}, x={x}"
        )
    return _clip(cdf(params, upper) - _cdf_below(params, x))


def _cdf_below(params: DistributionParams, x: float) -> float:
    """P(X < x) for discrete families, P(X <= x) for continuous ones."""
    if params.discrete:
        return cdf(params, float(np.ceil(x)) - 1.0)
    return cdf(params, x)


def _clip(value: float) -> float:
    return float(min(max(value, 0.0), 1.0))


def _check_params(params) -> None:
    if not isinstance(params, _PARAM_TYPES):
        raise _unknown_params(params)


def _unknown_params(params) -> ValidationError:
    return ValidationError(
        "params must be a distribution parameter set, "
        f"got {type(params).__name__}"
    )
