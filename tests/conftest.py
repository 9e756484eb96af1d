"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def shape_pairs(rng):
    """Random (a, b) shape pairs spanning small and moderate values."""
    return rng.uniform(0.5, 30.0, size=(20, 2))


@pytest.fixture
def unit_points(rng):
    """Random points strictly inside (0, 1)."""
    return rng.uniform(0.01, 0.99, size=20)
