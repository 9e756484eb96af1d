"""
Shared compute infrastructure for pystatdist.

Submodules:
    timing: Execution timing utilities
    tolerances: Iteration caps, numerical guards and accuracy tiers
"""

from pystatdist.core.compute.timing import Timer
from pystatdist.core.compute.tolerances import IterationLimit, ToleranceTier

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "IterationLimit",
    "ToleranceTier",
]
