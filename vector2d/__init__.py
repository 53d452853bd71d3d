"""
vector2d - Immutable 2D vectors and lattice geometry

A small library of 2D vector operations for points, directions and
integer grid cells.

Conventions:
- Coordinates: x to the right, y up (up() is (0, 1))
- Angles: Degrees; signed angles from +x, clockwise angles from up
- Immutability: operations always return new Vector2 instances
- Degenerate inputs return sentinels (NaN vector, zero vector, None)
  and never raise
- Diagnostics: logged through the standard logging module under "vector2d"
"""

__version__ = "1.0.0"

from .core.models import Vector2, VectorOptions, DEFAULT_OPTIONS
from .core.geometry import (
    adjacent_dirs,
    diagonal_dirs,
    all_eight_dirs,
    sum_vectors,
    min_vectors,
    max_vectors,
    range_dimensionally,
    are_parallel,
    point_between,
    points_between,
    get_adjacent,
    get_diagonal,
    get_surrounding,
    is_adjacent_to,
    is_diagonal_to,
    is_surrounding_of,
)

__all__ = [
    # Version
    "__version__",

    # Models
    "Vector2",
    "VectorOptions",
    "DEFAULT_OPTIONS",

    # Directions
    "adjacent_dirs",
    "diagonal_dirs",
    "all_eight_dirs",

    # Aggregates
    "sum_vectors",
    "min_vectors",
    "max_vectors",
    "range_dimensionally",
    "are_parallel",

    # Interpolation
    "point_between",
    "points_between",

    # Lattice
    "get_adjacent",
    "get_diagonal",
    "get_surrounding",
    "is_adjacent_to",
    "is_diagonal_to",
    "is_surrounding_of",
]
