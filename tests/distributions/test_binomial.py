"""
Tests for the binomial distribution.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pystatdist.core.exceptions import ValidationError
from pystatdist.distributions import (
    binomial_cdf,
    binomial_cdf_table,
    binomial_coefficient,
    binomial_pmf,
    binomial_pmf_table,
)


class TestBinomialCoefficient:

    @pytest.mark.parametrize("n, k", [(10, 3), (52, 5), (30, 15), (7, 0), (7, 7)])
    def test_matches_math_comb(self, n, k):
        assert binomial_coefficient(n, k) == pytest.approx(math.comb(n, k), rel=1e-12)

    def test_outside_support(self):
        assert binomial_coefficient(5, 7) == 0.0
        assert binomial_coefficient(5, -1) == 0.0
        assert binomial_coefficient(5, 2.5) == 0.0

    def test_large_n_finite(self):
        value = binomial_coefficient(1000, 500)
        assert np.isfinite(value)
        assert value == pytest.approx(math.comb(1000, 500), rel=1e-10)


class TestBinomialPmf:

    def test_fair_coin(self):
        """C(10, 5) / 2^10 = 252 / 1024."""
        assert binomial_pmf(5, 10, 0.5) == pytest.approx(0.24609375, rel=1e-12)

    def test_zero_successes(self):
        assert binomial_pmf(0, 10, 0.3) == pytest.approx(0.7 ** 10, rel=1e-12)

    def test_outside_support_is_zero(self):
        assert binomial_pmf(-1, 10, 0.5) == 0.0
        assert binomial_pmf(11, 10, 0.5) == 0.0
        assert binomial_pmf(3.5, 10, 0.5) == 0.0

    def test_degenerate_p(self):
        assert binomial_pmf(0, 8, 0.0) == 1.0
        assert binomial_pmf(1, 8, 0.0) == 0.0
        assert binomial_pmf(8, 8, 1.0) == 1.0

    def test_large_n_log_path(self):
        """n > 1000 goes through log_gamma."""
        n, k, p = 2000, 1000, 0.5
        log_exact = (
            math.lgamma(n + 1) - math.lgamma(k + 1) - math.lgamma(n - k + 1)
            + n * math.log(0.5)
        )
        assert binomial_pmf(k, n, p) == pytest.approx(math.exp(log_exact), rel=1e-9)

    def test_large_n_symmetric(self):
        assert binomial_pmf(900, 2000, 0.5) == pytest.approx(
            binomial_pmf(1100, 2000, 0.5), rel=1e-9
        )


class TestBinomialCdf:

    def test_fair_coin(self):
        """sum_{k<=5} C(10, k) / 1024 = 638 / 1024."""
        assert binomial_cdf(5, 10, 0.5) == pytest.approx(0.623046875, rel=1e-12)

    def test_fractional_k_floors(self):
        assert binomial_cdf(5.7, 10, 0.5) == binomial_cdf(5, 10, 0.5)

    def test_bounds(self):
        assert binomial_cdf(-0.5, 10, 0.5) == 0.0
        assert binomial_cdf(10, 10, 0.5) == 1.0
        assert binomial_cdf(25, 10, 0.5) == 1.0

    def test_monotone(self):
        values = [binomial_cdf(k, 20, 0.37) for k in range(21)]
        assert all(b >= a for a, b in zip(values, values[1:]))


class TestBinomialTables:

    def test_pmf_table_sums_to_one(self):
        table = binomial_pmf_table(40, 0.2)
        assert table.shape == (41,)
        assert table.sum() == pytest.approx(1.0, abs=1e-12)

    def test_pmf_table_matches_pointwise(self):
        table = binomial_pmf_table(12, 0.35)
        assert_allclose(table, [binomial_pmf(k, 12, 0.35) for k in range(13)],
                        rtol=1e-12)

    def test_cdf_table(self):
        table = binomial_cdf_table(10, 0.5)
        assert table[5] == pytest.approx(0.623046875, rel=1e-12)
        assert table[-1] == 1.0

    def test_large_n_table(self):
        table = binomial_pmf_table(5000, 0.01)
        assert table.sum() == pytest.approx(1.0, abs=1e-9)

    def test_degenerate_table(self):
        assert_allclose(binomial_pmf_table(3, 1.0), [0.0, 0.0, 0.0, 1.0])


class TestBinomialValidation:

    def test_fractional_n(self):
        with pytest.raises(ValidationError, match="n"):
            binomial_pmf(1, 10.5, 0.5)

    def test_negative_n(self):
        with pytest.raises(ValidationError, match="n"):
            binomial_cdf(1, -3, 0.5)

    @pytest.mark.parametrize("p", [-0.1, 1.1])
    def test_bad_p(self, p):
        with pytest.raises(ValidationError, match="p"):
            binomial_pmf(1, 10, p)
