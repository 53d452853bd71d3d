"""Operations over sequences of vectors.

The componentwise reductions stack the inputs into an (n, 2) numpy array
and reduce along the first axis.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from ..models.options import DEFAULT_OPTIONS
from ..models.vector import Vector2


def _as_array(vectors: Sequence[Vector2]) -> np.ndarray:
    return np.array([[v.x, v.y] for v in vectors], dtype=float).reshape(-1, 2)


def sum_vectors(vectors: Sequence[Vector2]) -> Vector2:
    """
    Componentwise sum of all vectors.

    Args:
        vectors: Vectors to add up, possibly empty

    Returns:
        The total, or the zero vector for an empty sequence
    """
    if len(vectors) == 0:
        return Vector2.zero()
    total = _as_array(vectors).sum(axis=0)
    return Vector2(float(total[0]), float(total[1]))


def min_vectors(vectors: Sequence[Vector2]) -> Optional[Vector2]:
    """
    Smallest x and smallest y found within vectors.

    Both axes are reduced independently, so the result is usually not one
    of the inputs. Returns None if no vectors are passed.
    """
    if len(vectors) == 0:
        return None
    lowest = np.min(_as_array(vectors), axis=0, initial=np.inf)
    return Vector2(float(lowest[0]), float(lowest[1]))


def max_vectors(vectors: Sequence[Vector2]) -> Optional[Vector2]:
    """
    Biggest x and biggest y found within vectors.

    Returns None if no vectors are passed.
    """
    if len(vectors) == 0:
        return None
    highest = np.max(_as_array(vectors), axis=0, initial=-np.inf)
    return Vector2(float(highest[0]), float(highest[1]))


def range_dimensionally(vectors: Sequence[Vector2]) -> Optional[Vector2]:
    """
    Span of x values and of y values within vectors.

    Returns:
        Vector2(max_x - min_x, max_y - min_y), or None if no vectors are passed
    """
    if len(vectors) == 0:
        return None
    return max_vectors(vectors).sub(min_vectors(vectors))


def are_parallel(
    vectors: Sequence[Vector2],
    tolerance: float = DEFAULT_OPTIONS.direction_tolerance,
) -> bool:
    """
    Check whether a chain of vectors is parallel.

    Each vector is compared with the one before it only; vectors pointing in
    opposite directions count as parallel.

    Args:
        vectors: Vectors to test, in order
        tolerance: See Vector2.is_parallel

    Returns:
        True if every consecutive pair is parallel, or fewer than two
        vectors are given
    """
    if len(vectors) < 2:
        return True
    for previous, current in zip(vectors, vectors[1:]):
        if not previous.is_parallel(current, tolerance):
            return False
    return True
