"""
Core infrastructure for pystatdist.

This module provides shared abstractions used by the special-function,
distribution and hypothesis-test layers.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Scalar input validators
    compute: Timing, iteration limits and accuracy tiers
"""

from pystatdist.core.result import Result
from pystatdist.core.exceptions import (
    PyStatDistError,
    ValidationError,
    DimensionError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyStatDistError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "ConvergenceError",
]
