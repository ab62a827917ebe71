"""A mutable polyhedron described by its vertices."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from xtend.collections.arrays import ReadOnlyView, as_read_only
from xtend.drawing.primitives import PointF, Vector3
from xtend.errors import require_not_none


class Polyhedron:
    """An ordered, growable list of :class:`Vector3` vertices.

    Two polyhedra are equal when their vertex sequences are equal. Instances
    are mutable and therefore unhashable.

    Args:
        vertices: Initial vertices, or another polyhedron to copy.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, vertices: Iterable[Vector3] | Polyhedron = ()) -> None:
        require_not_none(vertices, "vertices")
        if isinstance(vertices, Polyhedron):
            vertices = vertices._vertices
        self._vertices: list[Vector3] = [Vector3(*vertex) for vertex in vertices]

    @classmethod
    def empty(cls) -> Polyhedron:
        return cls()

    @classmethod
    def from_polygon(cls, points: Iterable[PointF]) -> Polyhedron:
        """Lift the vertices of a polygon into 3D space at ``z = 0``."""
        require_not_none(points, "points")
        return cls(Vector3(point[0], point[1], 0.0) for point in points)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def vertices(self) -> ReadOnlyView[Vector3]:
        """A live read-only view of the vertices."""
        return as_read_only(self._vertices)

    def add_vertex(self, vertex: Vector3) -> None:
        require_not_none(vertex, "vertex")
        self._vertices.append(Vector3(*vertex))

    def add_vertices(self, vertices: Iterable[Vector3]) -> None:
        require_not_none(vertices, "vertices")
        for vertex in vertices:
            self.add_vertex(vertex)

    def clear_vertices(self) -> None:
        self._vertices.clear()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Polyhedron):
            return NotImplemented
        return self._vertices == other._vertices

    def __repr__(self) -> str:
        return f"Polyhedron({self._vertices!r})"
