"""
Vector2 value type for 2D points and directions.

Conventions:
- Components: x grows to the right, y grows up
- Angles: Degrees at the public boundary, 0 along +x for signed angles
- Immutability: every operation returns a new Vector2, nothing is modified in place
- Degenerate inputs (division by zero, zero-length normalization, negative
  target magnitude) return a sentinel vector instead of raising
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np

from .options import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> float:
    """Nearest integer value, halves towards +inf. NaN and infinity pass through."""
    if not np.isfinite(value):
        return float(value)
    # Adding 0.5 before flooring is inexact just below halves and above 2**52
    floored = np.floor(value)
    return float(floored + (value - floored >= 0.5))


@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2 dimensional vector, used both for points and for vectors
    representing translation, movement or direction.

    Attributes:
        x: Horizontal component
        y: Vertical component

    Components are stored as given. Integer values are fine for lattice
    points; NaN and infinity are accepted without validation.
    """

    x: float
    y: float

    # Shorthands. Each call builds a fresh instance.

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0, 0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1, 1)

    @classmethod
    def up(cls) -> Vector2:
        return cls(0, 1)

    @classmethod
    def down(cls) -> Vector2:
        return cls(0, -1)

    @classmethod
    def left(cls) -> Vector2:
        return cls(-1, 0)

    @classmethod
    def right(cls) -> Vector2:
        return cls(1, 0)

    @classmethod
    def clone_from(cls, other: Vector2) -> Vector2:
        """Return a new Vector2 with the components of other."""
        return cls(other.x, other.y)

    def clone(self) -> Vector2:
        """Return a new Vector2 equal to this one."""
        return Vector2(self.x, self.y)

    @property
    def dims(self) -> Tuple[float, float]:
        """Components as an (x, y) tuple."""
        return (self.x, self.y)

    # Arithmetic

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    @staticmethod
    def diff(a: Vector2, b: Vector2) -> Vector2:
        """Return a - b."""
        return a.sub(b)

    def mult(self, multiplier: float) -> Vector2:
        return Vector2(self.x * multiplier, self.y * multiplier)

    def divide(self, divider: float) -> Vector2:
        """
        Divide both components by a number.

        Division by zero is not an error: the result is a vector whose
        components are both NaN.
        """
        if divider == 0:
            return Vector2(math.nan, math.nan)
        return Vector2(self.x / divider, self.y / divider)

    def scale(self, other: Vector2) -> Vector2:
        """Component-wise product of this vector and other."""
        return Vector2(self.x * other.x, self.y * other.y)

    def abs(self) -> Vector2:
        return Vector2(abs(self.x), abs(self.y))

    def equal(self, other: Vector2, tolerance: float = DEFAULT_OPTIONS.equality_tolerance) -> bool:
        """
        Check whether this vector equals other within a per-axis tolerance.

        Args:
            other: Vector to compare against
            tolerance: Maximum allowed absolute difference on each axis
                (inclusive). Keep 0 for integer points.

        Returns:
            True if both axis differences are within tolerance
        """
        abs_diff = self.sub(other).abs()
        return abs_diff.x <= tolerance and abs_diff.y <= tolerance

    # Length and direction

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2:
        """
        Return a vector with the same direction and magnitude 1.

        A zero-length vector has no direction; a warning is logged and the
        zero vector is returned.
        """
        mag = self.magnitude()
        if mag == 0:
            logger.warning("Tried normalizing vector with 0 magnitude.")
            return Vector2.zero()
        return Vector2(self.x / mag, self.y / mag)

    def set_magnitude(self, target: float) -> Vector2:
        """
        Scale this vector to the target magnitude, preserving direction.

        Args:
            target: Desired magnitude, must not be negative

        Returns:
            Rescaled vector, or the zero vector (with an error logged) when
            target is negative
        """
        if target < 0:
            logger.error(
                "Trying to set magnitude to a negative value (%s), this is not possible.",
                target,
            )
            return Vector2.zero()
        return self.normalize().mult(target)

    def clamp_magnitude(self, min_magnitude: float, max_magnitude: float) -> Vector2:
        """Force the magnitude into [min_magnitude, max_magnitude]."""
        if min_magnitude < 0:
            min_magnitude = 0
        mag = self.magnitude()
        if mag < min_magnitude:
            return self.set_magnitude(min_magnitude)
        if mag > max_magnitude:
            return self.set_magnitude(max_magnitude)
        return self

    @staticmethod
    def dot(a: Vector2, b: Vector2) -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def normalized_dot(a: Vector2, b: Vector2) -> float:
        """
        Dot product of a and b after normalizing both.

        This is the cosine of the angle between the two directions. If
        either vector has zero magnitude the result is 0.
        """
        return Vector2.dot(a.normalize(), b.normalize())

    # Angles

    def signed_angle_degrees(self) -> float:
        """Signed angle to the +x axis in degrees, in (-180, 180]."""
        return math.degrees(math.atan2(self.y, self.x))

    def clockwise_angle_from_up(self) -> float:
        """
        Unsigned angle in degrees, in [0, 360), measured clockwise from up.

        up() gives 0, right() 90, down() 180 and left() 270.
        """
        angle = (90.0 - self.signed_angle_degrees()) % 360.0
        # % can round a tiny negative up to exactly 360.0
        return 0.0 if angle == 360.0 else angle

    @staticmethod
    def angle_between(a: Vector2, b: Vector2) -> float:
        # NOTE: only the second atan2 term is converted to degrees.
        return abs(math.atan2(a.y, a.x) - math.atan2(b.y, b.x) * 180 / math.pi)

    # Distances

    @staticmethod
    def sq_distance(a: Vector2, b: Vector2) -> float:
        return (a.x - b.x) ** 2 + (a.y - b.y) ** 2

    @staticmethod
    def distance(a: Vector2, b: Vector2) -> float:
        return math.sqrt(Vector2.sq_distance(a, b))

    @staticmethod
    def manhattan_distance(a: Vector2, b: Vector2) -> float:
        v = b.sub(a)
        return abs(v.x) + abs(v.y)

    # Rounding

    def round(self) -> Vector2:
        """
        Round both components to the nearest integer value.

        Halves round towards +inf (2.5 -> 3, -2.5 -> -2) so that lattice
        lookups are stable on cell boundaries. NaN and infinity pass through.
        """
        return Vector2(_round_half_up(self.x), _round_half_up(self.y))

    def ceil(self) -> Vector2:
        return Vector2(float(np.ceil(self.x)), float(np.ceil(self.y)))

    def floor(self) -> Vector2:
        return Vector2(float(np.floor(self.x)), float(np.floor(self.y)))

    # Orientation

    def swap_dimensions(self) -> Vector2:
        return Vector2(self.y, self.x)

    def get_perpendicular(self) -> Vector2:
        """
        Return a vector perpendicular to this one with the same magnitude.

        The rotation direction is picked so that the result's y component
        is never negative for a finite input.
        """
        if self.x >= 0:
            return Vector2(-self.y, self.x)
        return Vector2(self.y, -self.x)

    def is_perpendicular(
        self, other: Vector2, tolerance: float = DEFAULT_OPTIONS.direction_tolerance
    ) -> bool:
        """
        Check whether this vector is at 90 degrees to other.

        Args:
            other: Vector to test against
            tolerance: Allowed deviation of the normalized dot product from 0.
                Values in the range of 0.001 to 0.00001 are recommended.
        """
        return abs(Vector2.normalized_dot(self, other)) <= tolerance

    def is_parallel(
        self, other: Vector2, tolerance: float = DEFAULT_OPTIONS.direction_tolerance
    ) -> bool:
        """
        Check whether this vector is parallel to other.

        Vectors pointing in opposite directions count as parallel.

        Args:
            other: Vector to test against
            tolerance: Allowed deviation of the normalized dot product from
                +1 or -1. Values in the range of 0.001 to 0.00001 are recommended.
        """
        norm_dot = Vector2.normalized_dot(self, other)
        return abs(norm_dot - 1) <= tolerance or abs(norm_dot + 1) <= tolerance

    # Python protocol

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> Vector2:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.mult(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Vector2:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __abs__(self) -> Vector2:
        return self.abs()

    def __round__(self, ndigits: Optional[int] = None) -> Vector2:
        if ndigits is None:
            return self.round()
        return Vector2(round(self.x, ndigits), round(self.y, ndigits))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        """Return a string that looks like [x; y]."""
        return f"[{self.x}; {self.y}]"
