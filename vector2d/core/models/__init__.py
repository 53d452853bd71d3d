"""
Data models for 2D vector geometry.

This module provides the core data structures:
- Vector2: Immutable 2D point / direction value type
- VectorOptions: Default tolerances for comparisons
"""

from .vector import Vector2
from .options import VectorOptions, DEFAULT_OPTIONS

__all__ = [
    # Vector
    "Vector2",

    # Options
    "VectorOptions",
    "DEFAULT_OPTIONS",
]
