"""Direction tables for lattice walks.

Every table is built fresh on each call and is ordered clockwise starting
at up. Callers iterating neighbors rely on this order.
"""

from __future__ import annotations

from typing import List

from ..models.vector import Vector2


def adjacent_dirs() -> List[Vector2]:
    """Cardinal directions: up, right, down, left."""
    return [Vector2.up(), Vector2.right(), Vector2.down(), Vector2.left()]


def diagonal_dirs() -> List[Vector2]:
    """Diagonal directions: up-right, down-right, down-left, up-left."""
    return [Vector2(1, 1), Vector2(1, -1), Vector2(-1, -1), Vector2(-1, 1)]


def all_eight_dirs() -> List[Vector2]:
    """Cardinal and diagonal directions interleaved, clockwise from up."""
    return [
        Vector2.up(),
        Vector2(1, 1),
        Vector2.right(),
        Vector2(1, -1),
        Vector2.down(),
        Vector2(-1, -1),
        Vector2.left(),
        Vector2(-1, 1),
    ]
