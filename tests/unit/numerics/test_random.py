"""Unit tests for xtend.numerics.random."""

import math

import numpy as np
import pytest

from xtend.errors import ArgumentNoneError
from xtend.numerics import random

# pylint: disable=magic-value-comparison


def test_identity_quaternion():
    """Zero angles give the identity rotation."""
    np.testing.assert_allclose(
        random.quaternion_from_yaw_pitch_roll(0, 0, 0), [0, 0, 0, 1]
    )


@pytest.mark.parametrize(
    ("angles", "expected"),
    [
        ((math.pi / 2, 0, 0), [0, math.sin(math.pi / 4), 0, math.cos(math.pi / 4)]),
        ((0, math.pi / 2, 0), [math.sin(math.pi / 4), 0, 0, math.cos(math.pi / 4)]),
        ((0, 0, math.pi / 2), [0, 0, math.sin(math.pi / 4), math.cos(math.pi / 4)]),
    ],
)
def test_single_axis_quaternions(angles, expected):
    """Yaw turns about Y, pitch about X and roll about Z."""
    np.testing.assert_allclose(
        random.quaternion_from_yaw_pitch_roll(*angles), expected, atol=1e-12
    )


def test_rotations_are_unit_quaternions(rng):
    """Both rotation generators return normalised quaternions."""
    for _ in range(50):
        rotations = (random.next_rotation(rng), random.next_rotation_uniform(rng))
        for quaternion in rotations:
            assert quaternion.shape == (4,)
            assert np.linalg.norm(quaternion) == pytest.approx(1.0)


def test_unit_vectors(rng):
    """Unit vectors have length 1 and the right dimension."""
    for _ in range(50):
        vector2 = random.next_unit_vector2(rng)
        vector3 = random.next_unit_vector3(rng)
        assert vector2.shape == (2,)
        assert vector3.shape == (3,)
        assert np.linalg.norm(vector2) == pytest.approx(1.0)
        assert np.linalg.norm(vector3) == pytest.approx(1.0)


def test_same_seed_same_rotation():
    """Draws are reproducible for a seeded generator."""
    first = random.next_rotation(np.random.default_rng(7))
    second = random.next_rotation(np.random.default_rng(7))
    np.testing.assert_array_equal(first, second)


@pytest.mark.parametrize(
    "func",
    [
        random.next_rotation,
        random.next_rotation_uniform,
        random.next_unit_vector2,
        random.next_unit_vector3,
    ],
)
def test_none_generator(func):
    """A generator is required."""
    with pytest.raises(ArgumentNoneError):
        func(None)
