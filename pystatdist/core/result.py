"""
Generic result container for pystatdist evaluations.

The Result class is the envelope richer facade calls (evaluate_test)
return. Plain distribution functions return bare floats; the envelope is
for callers that need to tell "invalid input" apart from "computed a
possibly imprecise result".

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (family, iterations, convergence)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical evaluations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (p-value, critical value, ...)
        info: Structured metadata (family, convergence flags)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=TestParams(...),
        ...     info={'family': 't', 'quantile_converged': True},
        ...     timing={'total_seconds': 0.0002},
        ...     backend_name='cpu_reference'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
