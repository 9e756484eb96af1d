"""
Coefficient tables for the special-function approximations.

All tables are read-only float64 arrays, built once at import. Polynomial
tables are stored highest power first so they can be fed to np.polyval.
"""

import numpy as np


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


# Abramowitz & Stegun 7.1.26: erf(x) ~ 1 - (a1 t + ... + a5 t^5) exp(-x^2),
# t = 1 / (1 + p x). Stored as [a5, a4, a3, a2, a1].
ERF_P = 0.3275911
ERF_COEFFICIENTS = _frozen([
    1.061405429,
    -1.453152027,
    1.421413741,
    -0.284496736,
    0.254829592,
])

# Lanczos approximation, g = 7, n = 9.
LANCZOS_G = 7.0
LANCZOS_COEFFICIENTS = _frozen([
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
])
LANCZOS_OFFSETS = _frozen(np.arange(1, len(LANCZOS_COEFFICIENTS)))

HALF_LOG_TWO_PI = 0.5 * np.log(2.0 * np.pi)
LOG_PI = np.log(np.pi)

# Acklam's rational approximation to the standard normal quantile.
# Central region numerator / denominator, tail numerator / denominator.
# Denominators carry their trailing constant 1.
ACKLAM_CENTRAL_NUM = _frozen([
    -3.969683028665376e+01,
    2.209460984245205e+02,
    -2.759285104469687e+02,
    1.383577518672690e+02,
    -3.066479806614716e+01,
    2.506628277459239e+00,
])
ACKLAM_CENTRAL_DEN = _frozen([
    -5.447609879822406e+01,
    1.615858368580409e+02,
    -1.556989798598866e+02,
    6.680131188771972e+01,
    -1.328068155288572e+01,
    1.0,
])
ACKLAM_TAIL_NUM = _frozen([
    -7.784894002430292e-03,
    -3.223964580411365e-01,
    -2.400758277161838e+00,
    -2.549732539343734e+00,
    4.374664141464968e+00,
    2.938163982698783e+00,
])
ACKLAM_TAIL_DEN = _frozen([
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e+00,
    3.754408661907416e+00,
    1.0,
])
ACKLAM_P_LOW = 0.02425
ACKLAM_P_HIGH = 1.0 - ACKLAM_P_LOW
