"""
Tests for log_beta() and incomplete_beta_regularized().
"""

import math

import numpy as np
import pytest

from pystatdist.core.compute.tolerances import CONTINUED_FRACTION
from pystatdist.core.exceptions import ValidationError
from pystatdist.special import incomplete_beta_regularized, log_beta

ATOL = CONTINUED_FRACTION.atol


class TestLogBeta:

    def test_integer_arguments(self):
        """B(2, 3) = 1! 2! / 4! = 1/12."""
        assert log_beta(2.0, 3.0) == pytest.approx(math.log(1.0 / 12.0), abs=1e-10)

    def test_symmetric(self):
        assert log_beta(1.5, 4.2) == pytest.approx(log_beta(4.2, 1.5), abs=1e-12)

    def test_invalid(self):
        with pytest.raises(ValidationError):
            log_beta(-1.0, 2.0)


class TestIncompleteBetaValues:

    @pytest.mark.parametrize("x", [0.1, 0.35, 0.5, 0.9])
    def test_uniform(self, x):
        """I_x(1, 1) = x."""
        assert incomplete_beta_regularized(1.0, 1.0, x) == pytest.approx(x, abs=ATOL)

    @pytest.mark.parametrize("a, x", [(2.0, 0.3), (3.5, 0.8), (0.5, 0.6)])
    def test_power_case(self, a, x):
        """I_x(a, 1) = x^a."""
        assert incomplete_beta_regularized(a, 1.0, x) == pytest.approx(x ** a, abs=ATOL)

    def test_binomial_identity(self):
        """
        I_0.4(2, 3) = P(Binomial(4, 0.4) >= 2)
                    = 6(.16)(.36) + 4(.064)(.6) + .0256 = 0.5248
        """
        assert incomplete_beta_regularized(2.0, 3.0, 0.4) == pytest.approx(
            0.5248, abs=ATOL
        )

    @pytest.mark.parametrize("a", [0.5, 2.0, 7.0, 40.0])
    def test_symmetric_midpoint(self, a):
        """I_0.5(a, a) = 1/2."""
        assert incomplete_beta_regularized(a, a, 0.5) == pytest.approx(0.5, abs=ATOL)


class TestIncompleteBetaProperties:

    @pytest.mark.parametrize("a, b, x", [
        (2.0, 5.0, 0.2), (0.7, 1.3, 0.9), (10.0, 3.0, 0.75),
    ])
    def test_reflection(self, a, b, x):
        """I_x(a, b) = 1 - I_{1-x}(b, a)."""
        lhs = incomplete_beta_regularized(a, b, x)
        rhs = 1.0 - incomplete_beta_regularized(b, a, 1.0 - x)
        assert lhs == pytest.approx(rhs, abs=ATOL)

    def test_boundaries_clamp(self):
        assert incomplete_beta_regularized(2.0, 3.0, 0.0) == 0.0
        assert incomplete_beta_regularized(2.0, 3.0, -0.5) == 0.0
        assert incomplete_beta_regularized(2.0, 3.0, 1.0) == 1.0
        assert incomplete_beta_regularized(2.0, 3.0, 1.5) == 1.0

    def test_monotone_and_bounded(self):
        values = [
            incomplete_beta_regularized(2.5, 4.0, x)
            for x in np.linspace(0.0, 1.0, 51)
        ]
        assert all(0.0 <= v <= 1.0 for v in values)
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_invalid_shape(self):
        with pytest.raises(ValidationError, match="b"):
            incomplete_beta_regularized(1.0, 0.0, 0.5)
