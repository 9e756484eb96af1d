"""
PyStatDist: special functions, probability distributions and
significance-test arithmetic for Python.

Pure functions of scalar inputs, layered one way:

    hypothesis -> distributions -> special

Submodules:
    special: erf, log-gamma, incomplete gamma and beta
    distributions: normal, binomial, Poisson, t, chi-square, F
    hypothesis: p-values, critical values, power, sample size
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pystatdist import special
from pystatdist import distributions
from pystatdist import hypothesis

from pystatdist.special import (
    erf,
    log_gamma,
    log_beta,
    incomplete_gamma_lower,
    regularized_gamma_lower,
    incomplete_beta_regularized,
)
from pystatdist.distributions import (
    normal_pdf, normal_cdf, normal_inverse_cdf,
    binomial_coefficient, binomial_pmf, binomial_cdf,
    poisson_pmf, poisson_cdf,
    t_pdf, t_cdf, t_inverse_cdf,
    chi_square_pdf, chi_square_cdf, chi_square_inverse_cdf,
    f_pdf, f_cdf, f_inverse_cdf,
    probability,
)
from pystatdist.hypothesis import (
    p_value,
    critical_value,
    evaluate_test,
    power,
    required_sample_size,
    power_curve,
)

__all__ = [
    "__version__",
    "special",
    "distributions",
    "hypothesis",
    # Special functions
    "erf",
    "log_gamma",
    "log_beta",
    "incomplete_gamma_lower",
    "regularized_gamma_lower",
    "incomplete_beta_regularized",
    # Distributions
    "normal_pdf",
    "normal_cdf",
    "normal_inverse_cdf",
    "binomial_coefficient",
    "binomial_pmf",
    "binomial_cdf",
    "poisson_pmf",
    "poisson_cdf",
    "t_pdf",
    "t_cdf",
    "t_inverse_cdf",
    "chi_square_pdf",
    "chi_square_cdf",
    "chi_square_inverse_cdf",
    "f_pdf",
    "f_cdf",
    "f_inverse_cdf",
    "probability",
    # Hypothesis tests
    "p_value",
    "critical_value",
    "evaluate_test",
    "power",
    "required_sample_size",
    "power_curve",
]
