"""A sphere in 3D space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from xtend.drawing._ordering import KeyOrdered
from xtend.drawing.primitives import Vector3


@dataclass(frozen=True, slots=True)
class Sphere(KeyOrdered):
    """A sphere given by its center and radius.

    Two spheres are equal when both center and radius match, but they are
    ordered by radius alone.

    Example:
        ```py
        >>> Sphere(Vector3(5, 0, 0), 1) < Sphere(radius=2)
        True
        ```
    """

    EMPTY: ClassVar[Sphere]
    UNIT: ClassVar[Sphere]

    center: Vector3 = Vector3()
    radius: float = 0.0

    @classmethod
    def from_coordinates(
        cls, center_x: float, center_y: float, center_z: float, radius: float
    ) -> Sphere:
        return cls(Vector3(center_x, center_y, center_z), radius)

    @property
    def diameter(self) -> float:
        return self.radius * 2

    @property
    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    @property
    def volume(self) -> float:
        return (4 / 3) * math.pi * self.radius**3

    def _sort_key(self) -> float:
        return self.radius


Sphere.EMPTY = Sphere()
Sphere.UNIT = Sphere(radius=1.0)
