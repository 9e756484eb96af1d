"""
Iteration limits, numerical guards and accuracy tiers.

Every iterative routine in pystatdist is hard-capped; the caps and
stopping rules live here as process-wide immutable values so that the
special functions, the quantile searches and the test-suite agree on
them.

Accuracy tiers describe what each code path can promise against an
exact reference (scipy). They are used by the test-suite, not by the
algorithms.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IterationLimit:
    """Iteration cap and stopping tolerance for one iterative routine."""
    max_iter: int
    tol: float
    name: str
    description: str


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# --- Iteration limits ---

BETA_CONTINUED_FRACTION = IterationLimit(
    max_iter=100,
    tol=1e-7,
    name='beta_continued_fraction',
    description='Lentz continued fraction for I_x(a, b); |delta - 1| rule',
)

GAMMA_SERIES = IterationLimit(
    max_iter=100,
    tol=1e-10,
    name='gamma_series',
    description='Series for P(a, x) when x < a + 1; term relative to sum',
)

GAMMA_CONTINUED_FRACTION = IterationLimit(
    max_iter=100,
    tol=1e-10,
    name='gamma_continued_fraction',
    description='Lentz continued fraction for Q(a, x) when x >= a + 1',
)

T_QUANTILE_NEWTON = IterationLimit(
    max_iter=10,
    tol=1e-8,
    name='t_quantile_newton',
    description='Newton-Raphson on t CDF seeded from the normal quantile',
)

QUANTILE_SEARCH = IterationLimit(
    max_iter=100,
    tol=1e-12,
    name='quantile_search',
    description='Bracketed Newton for chi-square and F quantiles; relative step',
)

# --- Numerical guards ---

# Denominators in Lentz's algorithm are clamped to this magnitude.
FPMIN = 1e-30

# Newton steps are not taken when the density is flatter than this.
FLAT_DERIVATIVE = 1e-10

# The t distribution is replaced by the standard normal from this df on.
T_NORMAL_DF_CUTOFF = 100.0

# Binomial PMFs are computed directly up to this n; C(1000, 500) ~ 2.7e299
# still fits a double. Larger n goes through log_gamma.
BINOMIAL_DIRECT_MAX_N = 1000

# Largest k whose factorial is a finite double (170! ~ 7.3e306).
FACTORIAL_MAX_K = 170

# Poisson mass beyond lam + POISSON_TAIL_SDS * sqrt(lam) + POISSON_TAIL_SDS
# is below double resolution; CDF sums stop there.
POISSON_TAIL_SDS = 40.0

# --- Accuracy tiers (used by tests) ---

# Abramowitz-Stegun 7.1.26: |error| <= 1.5e-7
ERF_APPROXIMATION = ToleranceTier(
    rtol=0.0,
    atol=1.5e-7,
    name='erf_approximation',
    description='erf and every normal CDF built on it',
)

# Lanczos g=7, n=9
LANCZOS = ToleranceTier(
    rtol=1e-10,
    atol=1e-10,
    name='lanczos',
    description='log_gamma away from its poles',
)

# Lentz with a 1e-7 relative-change stop
CONTINUED_FRACTION = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='continued_fraction',
    description='incomplete beta and the t / F CDFs built on it',
)

GAMMA_REGULARIZED = ToleranceTier(
    rtol=1e-8,
    atol=1e-9,
    name='gamma_regularized',
    description='regularized incomplete gamma and the chi-square CDF',
)

# Acklam's approximation has relative error 1.15e-9; round trips inherit
# the erf error divided by the density.
QUANTILE = ToleranceTier(
    rtol=1e-4,
    atol=1e-4,
    name='quantile',
    description='inverse CDFs and round trips through them',
)
