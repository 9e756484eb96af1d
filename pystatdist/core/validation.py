"""
Input validation utilities for pystatdist.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently clamping or
returning NaN.

Design principles:
    - Scalars only: arrays are rejected with DimensionError
    - No silent type coercion beyond float()/int() of numeric scalars
    - Infinity is a legal argument (boundary of support); NaN never is
    - Parameter names included in all error messages
    - Each function validates ONE thing and returns the cleaned value
"""

from typing import Any, Sequence

import numpy as np

from pystatdist.core.exceptions import ValidationError, DimensionError


def check_scalar(value: Any, name: str) -> float:
    """
    Validate and convert a real scalar.

    Accepts Python and numpy numbers (including 0-d arrays). Rejects
    strings, booleans, arrays with more than one element and NaN.
    Infinite values pass through.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        DimensionError: If value is not a scalar
        ValidationError: If value is non-numeric or NaN
    """
    try:
        arr = np.asarray(value)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to number: {e}") from e

    if arr.ndim != 0:
        raise DimensionError(
            f"{name}: expected a scalar, got array with shape {arr.shape}"
        )

    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric value {value!r} (dtype {arr.dtype})"
        )

    if np.issubdtype(arr.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex value {value!r} is not real")

    result = float(arr)
    if np.isnan(result):
        raise ValidationError(f"{name}: is NaN")
    return result


def check_finite(value: Any, name: str) -> float:
    """
    Validate a finite real scalar.

    Raises:
        ValidationError: If value is infinite (or fails check_scalar)
    """
    result = check_scalar(value, name)
    if not np.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_positive(value: Any, name: str) -> float:
    """
    Validate a finite, strictly positive scalar (sd, df, lambda, ...).

    Raises:
        ValidationError: If value <= 0 or is not finite
    """
    result = check_finite(value, name)
    if result <= 0.0:
        raise ValidationError(f"{name}: must be > 0, got {result}")
    return result


def check_probability(value: Any, name: str) -> float:
    """
    Validate a probability in the closed interval [0, 1].

    Raises:
        ValidationError: If value is outside [0, 1]
    """
    result = check_scalar(value, name)
    if not (0.0 <= result <= 1.0):
        raise ValidationError(f"{name}: must be in [0, 1], got {result}")
    return result


def check_open_probability(value: Any, name: str) -> float:
    """
    Validate a probability in the open interval (0, 1).

    Used for significance levels and target power, where the endpoints
    make the computation meaningless.

    Raises:
        ValidationError: If value is outside (0, 1)
    """
    result = check_scalar(value, name)
    if not (0.0 < result < 1.0):
        raise ValidationError(f"{name}: must be in (0, 1), got {result}")
    return result


def check_nonnegative_integer(value: Any, name: str) -> int:
    """
    Validate a non-negative integer count (trial count n, k_max, ...).

    Integral floats such as 10.0 are accepted; 10.5 is not.

    Raises:
        ValidationError: If value is negative or not integral
    """
    result = check_finite(value, name)
    if result != np.floor(result):
        raise ValidationError(f"{name}: must be an integer, got {result}")
    if result < 0:
        raise ValidationError(f"{name}: must be >= 0, got {int(result)}")
    return int(result)


def check_choice(value: Any, choices: Sequence[str], name: str) -> str:
    """
    Validate that value is one of a fixed set of option strings.

    Raises:
        ValidationError: If value is not in choices
    """
    if not isinstance(value, str) or value not in choices:
        raise ValidationError(
            f"{name} must be one of {tuple(choices)}, got {value!r}"
        )
    return value
