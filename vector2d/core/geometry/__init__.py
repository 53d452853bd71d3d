"""Geometry utilities over Vector2 values."""

from .directions import adjacent_dirs, diagonal_dirs, all_eight_dirs
from .aggregate import (
    sum_vectors,
    min_vectors,
    max_vectors,
    range_dimensionally,
    are_parallel,
)
from .interpolation import point_between, points_between
from .lattice import (
    get_adjacent,
    get_diagonal,
    get_surrounding,
    is_adjacent_to,
    is_diagonal_to,
    is_surrounding_of,
)

__all__ = [
    "adjacent_dirs",
    "diagonal_dirs",
    "all_eight_dirs",
    "sum_vectors",
    "min_vectors",
    "max_vectors",
    "range_dimensionally",
    "are_parallel",
    "point_between",
    "points_between",
    "get_adjacent",
    "get_diagonal",
    "get_surrounding",
    "is_adjacent_to",
    "is_diagonal_to",
    "is_surrounding_of",
]
