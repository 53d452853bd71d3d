"""Linear interpolation between points."""

from __future__ import annotations

import math
from typing import List

import numpy as np

from ..models.vector import Vector2


def point_between(a: Vector2, b: Vector2, frac: float = 0.5) -> Vector2:
    """
    Return the point frac of the way from a to b.

    A fraction of 0.5 gives the halfway point. Fractions outside [0, 1]
    extrapolate along the line through a and b.
    """
    direction = b.sub(a)
    return a.add(direction.mult(frac))


def points_between(a: Vector2, b: Vector2, n: float, include_ends: bool = False) -> List[Vector2]:
    """
    Generate n points spaced equally between a and b.

    For n = 3 the points are 1/4, 1/2 and 3/4 of the way from a to b.

    Args:
        a: Start point
        b: End point
        n: Number of interior points (no points if n <= 0). A fractional
            count is rounded up, with spacing still 1 / (1 + |n|)
        include_ends: If True, a copy of a is placed first and a copy of b
            last, giving n + 2 points

    Returns:
        List of points ordered from a towards b
    """
    points = []
    if include_ends:
        points.append(Vector2.clone_from(a))

    count = max(math.ceil(n), 0)
    frac_base = 1 / (1 + abs(n))
    for frac in frac_base * np.arange(1, count + 1):
        points.append(point_between(a, b, float(frac)))

    if include_ends:
        points.append(Vector2.clone_from(b))
    return points
