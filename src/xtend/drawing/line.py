"""Line segments in 2D and 3D space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from xtend.drawing._ordering import KeyOrdered
from xtend.drawing.primitives import PointF, Vector3
from xtend.errors import require_not_none


@dataclass(frozen=True, slots=True)
class Line3D:
    """A line segment between two points in 3D space."""

    start: Vector3 = Vector3()
    end: Vector3 = Vector3()

    @property
    def length_squared(self) -> float:
        return (
            (self.end.x - self.start.x) ** 2
            + (self.end.y - self.start.y) ** 2
            + (self.end.z - self.start.z) ** 2
        )

    @property
    def length(self) -> float:
        return math.sqrt(self.length_squared)


@dataclass(frozen=True, slots=True)
class LineF(KeyOrdered):
    """A line segment between two points in the plane.

    Lines are ordered by their squared length, which orders them by length
    without taking a square root.
    """

    EMPTY: ClassVar[LineF]
    ONE: ClassVar[LineF]
    UNIT_X: ClassVar[LineF]
    UNIT_Y: ClassVar[LineF]

    start: PointF = PointF()
    end: PointF = PointF()

    @classmethod
    def from_line3d(cls, line: Line3D) -> LineF:
        """Project *line* onto the XY plane, dropping the Z components."""
        require_not_none(line, "line")
        return cls(
            PointF(line.start.x, line.start.y), PointF(line.end.x, line.end.y)
        )

    @property
    def length_squared(self) -> float:
        return (self.end.x - self.start.x) ** 2 + (self.end.y - self.start.y) ** 2

    @property
    def length(self) -> float:
        return math.sqrt(self.length_squared)

    def _sort_key(self) -> float:
        return self.length_squared


LineF.EMPTY = LineF()
LineF.ONE = LineF(PointF(0, 0), PointF(1, 1))
LineF.UNIT_X = LineF(PointF(0, 0), PointF(1, 0))
LineF.UNIT_Y = LineF(PointF(0, 0), PointF(0, 1))
