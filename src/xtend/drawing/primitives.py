"""Point, vector and size tuples shared by the geometry types."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
import numpy.typing as npt


class PointF(NamedTuple):
    """A 2D point with float coordinates."""

    x: float = 0.0
    y: float = 0.0


class Vector3(NamedTuple):
    """A 3D vector with float components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Size(NamedTuple):
    """A width and height pair."""

    width: float = 0.0
    height: float = 0.0

    def to_point(self) -> PointF:
        """Return the size as a point ``(width, height)``."""
        return PointF(self.width, self.height)

    def to_vector2(self) -> npt.NDArray[np.float64]:
        """Return the size as a two-component vector."""
        return np.array([self.width, self.height], dtype=np.float64)
