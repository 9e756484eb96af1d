"""
Validation of pystatdist against scipy as the reference implementation.

Each comparison uses the accuracy tier of the code path under test
(pystatdist.core.compute.tolerances), not a single global tolerance.
"""

import numpy as np
import pytest

scipy_stats = pytest.importorskip("scipy.stats")
scipy_special = pytest.importorskip("scipy.special")

from pystatdist import (
    binomial_cdf, binomial_pmf,
    chi_square_cdf, chi_square_inverse_cdf, chi_square_pdf,
    erf, f_cdf, f_inverse_cdf, f_pdf,
    incomplete_beta_regularized, log_gamma,
    normal_cdf, normal_inverse_cdf, normal_pdf,
    p_value, poisson_cdf, poisson_pmf,
    regularized_gamma_lower,
    t_cdf, t_inverse_cdf, t_pdf,
)
from pystatdist.core.compute.tolerances import (
    CONTINUED_FRACTION, ERF_APPROXIMATION, GAMMA_REGULARIZED, LANCZOS, QUANTILE,
)


# ═══════════════════════════════════════════════════════════════════════
# Special functions
# ═══════════════════════════════════════════════════════════════════════


class TestSpecialFunctions:

    def test_erf(self):
        for x in np.linspace(-4.0, 4.0, 41):
            assert erf(x) == pytest.approx(
                scipy_special.erf(x), abs=ERF_APPROXIMATION.atol
            )

    def test_log_gamma(self):
        for x in [0.05, 0.5, 1.5, 3.7, 25.0, 170.5, 1000.0]:
            assert log_gamma(x) == pytest.approx(
                scipy_special.gammaln(x), rel=LANCZOS.rtol, abs=LANCZOS.atol
            )

    def test_regularized_gamma(self, rng):
        for a, x in zip(rng.uniform(0.2, 40.0, 25), rng.uniform(0.0, 60.0, 25)):
            assert regularized_gamma_lower(a, x) == pytest.approx(
                scipy_special.gammainc(a, x),
                rel=GAMMA_REGULARIZED.rtol, abs=GAMMA_REGULARIZED.atol,
            )

    def test_regularized_gamma_series_within_cap(self):
        """a = 150, x = a needs fewer than 100 series terms."""
        assert regularized_gamma_lower(150.0, 150.0) == pytest.approx(
            scipy_special.gammainc(150.0, 150.0),
            rel=GAMMA_REGULARIZED.rtol, abs=GAMMA_REGULARIZED.atol,
        )

    def test_regularized_gamma_large_shape_truncated(self):
        """Series truncation at a = 2000 is low, but by less than 1e-3."""
        reference = scipy_special.gammainc(2000.0, 1950.0)
        value = regularized_gamma_lower(2000.0, 1950.0)
        assert value <= reference
        assert reference - value < 1e-3

    def test_incomplete_beta(self, shape_pairs, unit_points):
        for (a, b), x in zip(shape_pairs, unit_points):
            assert incomplete_beta_regularized(a, b, x) == pytest.approx(
                scipy_special.betainc(a, b, x), abs=CONTINUED_FRACTION.atol
            )


# ═══════════════════════════════════════════════════════════════════════
# Continuous distributions
# ═══════════════════════════════════════════════════════════════════════


class TestNormal:

    def test_pdf_cdf(self):
        for x in np.linspace(-5.0, 7.0, 25):
            assert normal_pdf(x, 1.0, 1.5) == pytest.approx(
                scipy_stats.norm.pdf(x, 1.0, 1.5), rel=1e-12
            )
            assert normal_cdf(x, 1.0, 1.5) == pytest.approx(
                scipy_stats.norm.cdf(x, 1.0, 1.5), abs=ERF_APPROXIMATION.atol
            )

    def test_quantile(self, unit_points):
        for p in unit_points:
            assert normal_inverse_cdf(p) == pytest.approx(
                scipy_stats.norm.ppf(p), rel=1e-8, abs=1e-9
            )


class TestStudentT:

    @pytest.mark.parametrize("df", [1.0, 2.0, 2.5, 5.0, 12.0, 40.0])
    def test_pdf_cdf(self, df):
        for t in np.linspace(-6.0, 6.0, 25):
            assert t_pdf(t, df) == pytest.approx(scipy_stats.t.pdf(t, df), rel=1e-10)
            assert t_cdf(t, df) == pytest.approx(
                scipy_stats.t.cdf(t, df), abs=CONTINUED_FRACTION.atol
            )

    @pytest.mark.parametrize("df", [3.0, 7.0, 25.0])
    def test_quantile(self, df):
        for p in [0.01, 0.1, 0.5, 0.9, 0.975]:
            assert t_inverse_cdf(p, df) == pytest.approx(
                scipy_stats.t.ppf(p, df), abs=QUANTILE.atol
            )

    def test_normal_fallback(self):
        """df >= 100 uses the normal; error against exact t stays small."""
        assert t_cdf(2.0, 120.0) == pytest.approx(scipy_stats.t.cdf(2.0, 120.0), abs=3e-3)


class TestChiSquare:

    @pytest.mark.parametrize("df", [1.0, 3.0, 8.5, 30.0])
    def test_pdf_cdf(self, df):
        for x in np.linspace(0.1, 60.0, 30):
            assert chi_square_pdf(x, df) == pytest.approx(
                scipy_stats.chi2.pdf(x, df), rel=1e-10, abs=1e-300
            )
            assert chi_square_cdf(x, df) == pytest.approx(
                scipy_stats.chi2.cdf(x, df),
                rel=GAMMA_REGULARIZED.rtol, abs=GAMMA_REGULARIZED.atol,
            )

    @pytest.mark.parametrize("df", [1.0, 4.0, 15.0])
    def test_quantile(self, df):
        for p in [0.01, 0.25, 0.5, 0.95, 0.999]:
            assert chi_square_inverse_cdf(p, df) == pytest.approx(
                scipy_stats.chi2.ppf(p, df), rel=1e-7
            )


class TestF:

    @pytest.mark.parametrize("d1, d2", [(1.0, 5.0), (3.0, 12.0), (10.0, 4.0), (20.0, 30.0)])
    def test_pdf_cdf(self, d1, d2):
        for x in np.linspace(0.05, 8.0, 25):
            assert f_pdf(x, d1, d2) == pytest.approx(
                scipy_stats.f.pdf(x, d1, d2), rel=1e-10
            )
            assert f_cdf(x, d1, d2) == pytest.approx(
                scipy_stats.f.cdf(x, d1, d2), abs=CONTINUED_FRACTION.atol
            )

    @pytest.mark.parametrize("d1, d2", [(2.0, 9.0), (6.0, 20.0)])
    def test_quantile(self, d1, d2):
        for p in [0.05, 0.5, 0.95, 0.99]:
            assert f_inverse_cdf(p, d1, d2) == pytest.approx(
                scipy_stats.f.ppf(p, d1, d2), rel=1e-5
            )


# ═══════════════════════════════════════════════════════════════════════
# Discrete distributions
# ═══════════════════════════════════════════════════════════════════════


class TestDiscrete:

    @pytest.mark.parametrize("n, p", [(10, 0.5), (37, 0.12), (1500, 0.4)])
    def test_binomial(self, n, p):
        mean = n * p
        sd = np.sqrt(n * p * (1 - p))
        for k in np.unique(np.linspace(max(0, mean - 4 * sd), min(n, mean + 4 * sd), 9).astype(int)):
            assert binomial_pmf(k, n, p) == pytest.approx(
                scipy_stats.binom.pmf(k, n, p), rel=1e-9
            )
            assert binomial_cdf(k, n, p) == pytest.approx(
                scipy_stats.binom.cdf(k, n, p), rel=1e-9, abs=1e-12
            )

    @pytest.mark.parametrize("lam", [0.5, 4.0, 250.0])
    def test_poisson(self, lam):
        for k in np.unique(np.linspace(0, lam + 5 * np.sqrt(lam), 9).astype(int)):
            assert poisson_pmf(k, lam) == pytest.approx(
                scipy_stats.poisson.pmf(k, lam), rel=1e-9
            )
            assert poisson_cdf(k, lam) == pytest.approx(
                scipy_stats.poisson.cdf(k, lam), rel=1e-9, abs=1e-12
            )


# ═══════════════════════════════════════════════════════════════════════
# Hypothesis facade
# ═══════════════════════════════════════════════════════════════════════


class TestPValues:

    def test_t_two_tailed(self):
        for stat in [0.3, 1.2, 2.5, 4.0]:
            expected = 2 * scipy_stats.t.sf(stat, 9)
            assert p_value("t", stat, 9) == pytest.approx(
                expected, abs=CONTINUED_FRACTION.atol
            )

    def test_chi_square_right(self):
        for stat in [0.5, 3.0, 11.0]:
            expected = scipy_stats.chi2.sf(stat, 4)
            assert p_value("chi-square", stat, 4, "right-tailed") == pytest.approx(
                expected, abs=GAMMA_REGULARIZED.atol
            )

    def test_f_right(self):
        for stat in [0.7, 2.1, 5.0]:
            expected = scipy_stats.f.sf(stat, 3, 15)
            assert p_value("f", stat, (3, 15), "right-tailed") == pytest.approx(
                expected, abs=CONTINUED_FRACTION.atol
            )
