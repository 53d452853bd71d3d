"""
Tests for operations over sequences of vectors.
"""

import pytest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vector2d.core.models.vector import Vector2
from vector2d.core.geometry.aggregate import (
    sum_vectors,
    min_vectors,
    max_vectors,
    range_dimensionally,
    are_parallel,
)


@pytest.fixture
def scattered():
    """Three points whose extremes come from different inputs."""
    return [Vector2(1, 5), Vector2(-2, 3), Vector2(4, 0)]


class TestSum:
    """Tests for sum_vectors."""

    def test_sum_accumulates_every_vector(self):
        """Test that every partial sum is carried forward."""
        vectors = [Vector2(1, 2), Vector2(3, 4), Vector2(-1, -1)]
        assert sum_vectors(vectors) == Vector2(3, 5)

    def test_sum_single_vector(self):
        """Test that summing one vector returns its components."""
        assert sum_vectors([Vector2(2.5, -1)]) == Vector2(2.5, -1)

    def test_sum_empty_is_zero(self):
        """Test that an empty sequence sums to the zero vector."""
        assert sum_vectors([]) == Vector2.zero()

    def test_sum_accepts_tuples(self):
        """Test that any sequence type is accepted."""
        assert sum_vectors((Vector2(1, 1), Vector2(1, 1))) == Vector2(2, 2)


class TestExtremes:
    """Tests for min_vectors, max_vectors and range_dimensionally."""

    def test_min_is_componentwise(self, scattered):
        """Test that each axis minimum is found independently."""
        assert min_vectors(scattered) == Vector2(-2, 0)

    def test_max_is_componentwise(self, scattered):
        """Test that each axis maximum is found independently."""
        assert max_vectors(scattered) == Vector2(4, 5)

    def test_range_dimensionally(self, scattered):
        """Test the per-axis span between max and min."""
        assert range_dimensionally(scattered) == Vector2(6, 5)

    def test_single_vector(self):
        """Test that a single vector is its own min and max."""
        v = Vector2(3, -7)

        assert min_vectors([v]) == v
        assert max_vectors([v]) == v
        assert range_dimensionally([v]) == Vector2.zero()

    def test_empty_returns_none(self):
        """Test that empty aggregates return None instead of raising."""
        assert min_vectors([]) is None
        assert max_vectors([]) is None
        assert range_dimensionally([]) is None

    def test_results_are_python_floats(self, scattered):
        """Test that numpy scalars are converted back to floats."""
        result = min_vectors(scattered)

        assert type(result.x) is float
        assert type(result.y) is float


class TestAreParallel:
    """Tests for are_parallel."""

    def test_fewer_than_two_vectors(self):
        """Test that short chains are trivially parallel."""
        assert are_parallel([])
        assert are_parallel([Vector2(1, 2)])

    def test_chain_with_anti_parallel(self):
        """Test that opposite directions keep the chain parallel."""
        assert are_parallel([Vector2.right(), Vector2.right(), Vector2.left()])

    def test_chain_broken_in_the_middle(self):
        """Test that one perpendicular link breaks the chain."""
        assert not are_parallel([Vector2.right(), Vector2.up(), Vector2.right()])

    def test_custom_tolerance(self):
        """Test that a looser tolerance accepts near-parallel links."""
        vectors = [Vector2(1, 0), Vector2(1, 0.1), Vector2(-2, -0.2)]

        assert not are_parallel(vectors)
        assert are_parallel(vectors, tolerance=0.01)
