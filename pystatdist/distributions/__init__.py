"""
Probability distributions.

Six families, each as plain functions of (x, parameters) returning
floats, plus a frozen parameter-set type per family.

Public API:
    normal_pdf / normal_cdf / normal_inverse_cdf
    binomial_coefficient / binomial_pmf / binomial_cdf
    binomial_pmf_table / binomial_cdf_table
    poisson_pmf / poisson_cdf / poisson_pmf_table / poisson_cdf_table
    t_pdf / t_cdf / t_inverse_cdf
    chi_square_pdf / chi_square_cdf / chi_square_inverse_cdf
    f_pdf / f_cdf / f_inverse_cdf
    probability(params, kind, x, upper) - calculator queries
"""

from pystatdist.distributions._common import (
    DistributionParams,
    NormalParams,
    BinomialParams,
    PoissonParams,
    TParams,
    ChiSquareParams,
    FParams,
)
from pystatdist.distributions._normal import (
    normal_pdf, normal_cdf, normal_inverse_cdf,
)
from pystatdist.distributions._binomial import (
    binomial_coefficient, binomial_pmf, binomial_cdf,
    binomial_pmf_table, binomial_cdf_table,
)
from pystatdist.distributions._poisson import (
    poisson_pmf, poisson_cdf, poisson_pmf_table, poisson_cdf_table,
)
from pystatdist.distributions._t import t_pdf, t_cdf, t_inverse_cdf
from pystatdist.distributions._chisq import (
    chi_square_pdf, chi_square_cdf, chi_square_inverse_cdf,
)
from pystatdist.distributions._f import f_pdf, f_cdf, f_inverse_cdf
from pystatdist.distributions.probability import probability, density, cdf

__all__ = [
    # Parameter sets
    "DistributionParams",
    "NormalParams",
    "BinomialParams",
    "PoissonParams",
    "TParams",
    "ChiSquareParams",
    "FParams",
    # Normal
    "normal_pdf",
    "normal_cdf",
    "normal_inverse_cdf",
    # Binomial
    "binomial_coefficient",
    "binomial_pmf",
    "binomial_cdf",
    "binomial_pmf_table",
    "binomial_cdf_table",
    # Poisson
    "poisson_pmf",
    "poisson_cdf",
    "poisson_pmf_table",
    "poisson_cdf_table",
    # t
    "t_pdf",
    "t_cdf",
    "t_inverse_cdf",
    # Chi-square
    "chi_square_pdf",
    "chi_square_cdf",
    "chi_square_inverse_cdf",
    # F
    "f_pdf",
    "f_cdf",
    "f_inverse_cdf",
    # Calculator
    "probability",
    "density",
    "cdf",
]
