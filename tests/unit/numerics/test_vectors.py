"""Unit tests for xtend.numerics.vectors."""

import numpy as np
import pytest

from xtend.drawing import PointF, Vector3
from xtend.errors import ArgumentNoneError, ArgumentOutOfRangeError
from xtend.numerics import vectors

# pylint: disable=magic-value-comparison


class TestRoundVector:
    """Tests for round_vector."""

    @staticmethod
    def test_named_tuples_keep_their_type():
        """A Vector3 comes back as a Vector3."""
        result = vectors.round_vector(Vector3(1.4, 2.6, -0.4))
        assert isinstance(result, Vector3)
        assert result == Vector3(1, 3, 0)

    @staticmethod
    def test_halves_round_to_even():
        """0.5 and 2.5 round down, 1.5 rounds up."""
        result = vectors.round_vector([0.5, 1.5, 2.5])
        np.testing.assert_array_equal(result, [0.0, 2.0, 2.0])

    @staticmethod
    def test_nearest_multiple():
        """Components snap to multiples of *nearest*."""
        result = vectors.round_vector(np.array([3.2, 7.9]), nearest=5)
        np.testing.assert_array_equal(result, [5.0, 10.0])

    @staticmethod
    def test_none_vector():
        """None is rejected."""
        with pytest.raises(ArgumentNoneError):
            vectors.round_vector(None)


class TestWithComponent:
    """Tests for with_component and the per-axis shortcuts."""

    @staticmethod
    def test_shortcuts():
        """Each shortcut replaces a single component."""
        vector = Vector3(1, 2, 3)
        assert vectors.with_x(vector, 9) == Vector3(9, 2, 3)
        assert vectors.with_y(vector, 9) == Vector3(1, 9, 3)
        assert vectors.with_z(vector, 9) == Vector3(1, 2, 9)
        assert vector == Vector3(1, 2, 3)

    @staticmethod
    def test_with_w_on_four_components():
        """Arrays come back as float64 arrays."""
        result = vectors.with_w(np.array([0, 0, 0, 1]), 0.5)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [0, 0, 0, 0.5])

    @staticmethod
    def test_missing_axis():
        """A 2D point has no Z component."""
        with pytest.raises(ArgumentOutOfRangeError):
            vectors.with_z(PointF(1, 2), 3)
        with pytest.raises(ArgumentOutOfRangeError):
            vectors.with_component([1, 2], -1, 0)

    @staticmethod
    def test_source_array_not_modified():
        """The input array is copied."""
        source = np.array([1.0, 2.0])
        vectors.with_x(source, 5)
        np.testing.assert_array_equal(source, [1.0, 2.0])
