"""
Exception hierarchy for pystatdist.

All exceptions inherit from PyStatDistError to allow catching any
library-specific error. Domain violations (bad parameters) are
ValidationErrors; numerical trouble is a NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Reaching an iteration cap is NOT an error; the best estimate is
      returned. ConvergenceError is reserved for searches that cannot
      even start (e.g. a quantile root that cannot be bracketed).
"""


class PyStatDistError(Exception):
    """Base exception for all pystatdist errors."""
    pass


class ValidationError(PyStatDistError):
    """
    Input validation failed.

    Raised when caller-supplied parameters fall outside their domain
    (sd <= 0, df <= 0, p outside [0, 1], unknown test family, ...).
    """
    pass


class DimensionError(ValidationError):
    """
    Input has the wrong shape.

    Raised when an array is passed where a scalar is required, or when a
    degrees-of-freedom tuple has the wrong length for its test family.
    """
    pass


class NumericalError(PyStatDistError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class ConvergenceError(NumericalError):
    """
    Iterative search could not produce an estimate.

    Attributes:
        iterations: Number of iterations completed
        final_change: Last step size or residual, if available
        reason: Why the search failed (e.g. 'no_bracket')
        threshold: The tolerance that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
