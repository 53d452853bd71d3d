"""
Tolerance options for vector comparisons.

This module defines the default tolerances used by equality and
direction tests (parallel / perpendicular).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class VectorOptions:
    """
    Configuration options for vector comparisons.

    Attributes:
        equality_tolerance: Per-axis tolerance for equal() (default: 0.0).
            Keep 0 for integer lattice points; values between 0.001 and
            0.00001 are recommended for float coordinates.
        direction_tolerance: Tolerance on the normalized dot product used by
            is_parallel(), is_perpendicular() and are_parallel() (default: 1e-4)
    """

    equality_tolerance: float = 0.0
    direction_tolerance: float = 1e-4


DEFAULT_OPTIONS = VectorOptions()
