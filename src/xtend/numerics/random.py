"""Random rotations and unit vectors drawn from a numpy ``Generator``.

Quaternions are returned as ``[x, y, z, w]`` arrays, with the scalar part
last.

Example:
    ```py
    >>> rng = np.random.default_rng(1234)
    >>> float(np.linalg.norm(next_unit_vector3(rng)))
    1.0
    ```
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from xtend.errors import require_not_none
from xtend.math.floats import degrees_to_radians

FloatArray = npt.NDArray[np.float64]


def quaternion_from_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> FloatArray:
    """Return the rotation quaternion for the given Euler angles in radians.

    Yaw turns around the Y axis, pitch around X and roll around Z, applied in
    roll, pitch, yaw order.
    """
    sr, cr = math.sin(roll / 2), math.cos(roll / 2)
    sp, cp = math.sin(pitch / 2), math.cos(pitch / 2)
    sy, cy = math.sin(yaw / 2), math.cos(yaw / 2)
    return np.array(
        [
            cy * sp * cr + sy * cp * sr,
            sy * cp * cr - cy * sp * sr,
            cy * cp * sr - sy * sp * cr,
            cy * cp * cr + sy * sp * sr,
        ],
        dtype=np.float64,
    )


def next_rotation(rng: np.random.Generator) -> FloatArray:
    """Return a rotation built from random yaw, pitch and roll in [0°, 360°)."""
    require_not_none(rng, "rng")
    pitch, yaw, roll = (degrees_to_radians(angle) for angle in rng.uniform(0, 360, 3))
    return quaternion_from_yaw_pitch_roll(yaw, pitch, roll)


def next_rotation_uniform(rng: np.random.Generator) -> FloatArray:
    """Return a unit quaternion uniformly distributed over all rotations.

    Candidates are drawn from the 4D cube and rejected until one falls
    inside the unit ball, then normalised.
    """
    require_not_none(rng, "rng")
    while True:
        candidate = rng.uniform(-1.0, 1.0, 4)
        norm_squared = float(np.dot(candidate, candidate))
        if 0.0 < norm_squared <= 1.0:
            return candidate / math.sqrt(norm_squared)


def next_unit_vector2(rng: np.random.Generator) -> FloatArray:
    """Return a random 2D vector of length 1."""
    require_not_none(rng, "rng")
    angle = rng.uniform(0.0, 2 * math.pi)
    return np.array([math.cos(angle), math.sin(angle)], dtype=np.float64)


def next_unit_vector3(rng: np.random.Generator) -> FloatArray:
    """Return a random 3D vector of length 1, uniform over the sphere."""
    require_not_none(rng, "rng")
    angle = rng.uniform(0.0, 2 * math.pi)
    z = rng.uniform(-1.0, 1.0)
    radius = math.sqrt(1 - z * z)
    return np.array(
        [radius * math.cos(angle), radius * math.sin(angle), z], dtype=np.float64
    )
