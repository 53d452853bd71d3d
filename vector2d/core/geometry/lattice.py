"""Neighbor helpers for integer lattice points.

The enumerations round the origin point first, then step once along each
direction of the matching table in directions.py. Membership tests compare
with zero tolerance, so they are meant for integer-valued points.
"""

from __future__ import annotations

from typing import List

from ..models.vector import Vector2
from .directions import adjacent_dirs, all_eight_dirs, diagonal_dirs


def _step_all(point: Vector2, directions: List[Vector2]) -> List[Vector2]:
    rounded = point.round()
    return [rounded.add(direction) for direction in directions]


def get_adjacent(point: Vector2) -> List[Vector2]:
    """The 4 points north, east, south and west of point (clockwise from up)."""
    return _step_all(point, adjacent_dirs())


def get_diagonal(point: Vector2) -> List[Vector2]:
    """The 4 points diagonal to point (clockwise from up-right)."""
    return _step_all(point, diagonal_dirs())


def get_surrounding(point: Vector2) -> List[Vector2]:
    """The 8 points adjacent or diagonal to point (clockwise from up)."""
    return _step_all(point, all_eight_dirs())


def is_adjacent_to(point: Vector2, target: Vector2) -> bool:
    return any(neighbor.equal(target) for neighbor in get_adjacent(point))


def is_diagonal_to(point: Vector2, target: Vector2) -> bool:
    return any(neighbor.equal(target) for neighbor in get_diagonal(point))


def is_surrounding_of(point: Vector2, target: Vector2) -> bool:
    return any(neighbor.equal(target) for neighbor in get_surrounding(point))
