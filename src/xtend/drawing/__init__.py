"""Geometric value types."""

from xtend.drawing.line import Line3D, LineF
from xtend.drawing.polyhedron import Polyhedron
from xtend.drawing.primitives import PointF, Size, Vector3
from xtend.drawing.sphere import Sphere

__all__ = ["Line3D", "LineF", "PointF", "Polyhedron", "Size", "Sphere", "Vector3"]
