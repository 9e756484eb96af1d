"""
Tests for the probability calculator.
"""

import pytest

from pystatdist.core.exceptions import ValidationError
from pystatdist.distributions import (
    BinomialParams, ChiSquareParams, FParams, NormalParams,
    PoissonParams, TParams, probability,
)


class TestDiscreteQueries:
    """Discrete families include both endpoints."""

    def test_between(self):
        """P(3 <= X <= 7) for Binomial(10, 0.5) = 912 / 1024."""
        assert probability(BinomialParams(10, 0.5), "between", 3, 7) == pytest.approx(
            0.890625, rel=1e-12
        )

    def test_upper_includes_point(self):
        """P(X >= 8) = (45 + 10 + 1) / 1024."""
        assert probability(BinomialParams(10, 0.5), "upper", 8) == pytest.approx(
            0.0546875, rel=1e-12
        )

    def test_lower(self):
        assert probability(BinomialParams(10, 0.5), "lower", 5) == pytest.approx(
            0.623046875, rel=1e-12
        )

    def test_density(self):
        assert probability(PoissonParams(3.0), "density", 2) == pytest.approx(
            0.22404180765538775, rel=1e-12
        )

    def test_upper_at_zero_is_one(self):
        assert probability(PoissonParams(2.0), "upper", 0) == 1.0

    def test_single_point_between(self):
        """between(k, k) is the mass at k."""
        assert probability(BinomialParams(10, 0.5), "between", 5, 5) == pytest.approx(
            0.24609375, rel=1e-10
        )

    def test_upper_fractional_point(self):
        """P(X >= 2.5) = P(X >= 3) = 968 / 1024."""
        assert probability(BinomialParams(10, 0.5), "upper", 2.5) == pytest.approx(
            0.9453125, rel=1e-12
        )

    def test_between_fractional_ends(self):
        """P(1.5 <= X <= 4.5) for Poisson(3) = e^-3 (9/2 + 9/2 + 27/8)."""
        assert probability(PoissonParams(3.0), "between", 1.5, 4.5) == pytest.approx(
            0.6161149710523163, rel=1e-10
        )


class TestContinuousQueries:

    def test_normal_lower(self):
        assert probability(NormalParams(), "lower", 1.96) == pytest.approx(0.975, abs=1e-4)

    def test_normal_upper(self):
        assert probability(NormalParams(), "upper", 1.96) == pytest.approx(0.025, abs=1e-4)

    def test_normal_between(self):
        assert probability(NormalParams(), "between", -1.96, 1.96) == pytest.approx(
            0.95, abs=1e-4
        )

    def test_t_upper(self):
        assert probability(TParams(10), "upper", 2.2281388519649385) == pytest.approx(
            0.025, abs=1e-6
        )

    def test_chi_square_upper(self):
        assert probability(ChiSquareParams(1), "upper", 3.841458820694124) == pytest.approx(
            0.05, abs=1e-8
        )

    def test_f_density(self):
        assert probability(FParams(2, 2), "density", 1.0) == pytest.approx(0.25, rel=1e-10)


class TestCalculatorValidation:

    def test_between_needs_upper(self):
        with pytest.raises(ValidationError, match="upper"):
            probability(NormalParams(), "between", 0.0)

    def test_between_reversed(self):
        with pytest.raises(ValidationError, match="upper"):
            probability(NormalParams(), "between", 1.0, -1.0)

    def test_unknown_kind(self):
        with pytest.raises(ValidationError, match="kind"):
            probability(NormalParams(), "survival", 1.0)

    def test_not_a_parameter_set(self):
        with pytest.raises(ValidationError, match="params"):
            probability({"mean": 0, "sd": 1}, "lower", 0.0)

    def test_invalid_parameters(self):
        with pytest.raises(ValidationError, match="sd"):
            probability(NormalParams(0.0, -1.0), "lower", 0.0)
