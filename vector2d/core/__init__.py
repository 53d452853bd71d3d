"""
Core module for 2D vector geometry.

This module contains pure Python implementations with numpy as the only
third-party dependency.
"""

from .models import Vector2, VectorOptions, DEFAULT_OPTIONS

from .geometry import (
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
