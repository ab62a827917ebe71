"""Component-wise helpers for vectors.

Vectors may be numpy arrays, plain sequences or named tuples such as
:class:`xtend.drawing.Vector3`. Named tuples come back as the same type;
everything else comes back as a float64 array.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from xtend.errors import ArgumentOutOfRangeError, require_not_none

AXES = "xyzw"


def _rebuild(template: Any, values: np.ndarray) -> Any:
    if isinstance(template, tuple) and hasattr(template, "_fields"):
        return type(template)(*(float(value) for value in values))
    return values


def round_vector(vector: Sequence[float] | np.ndarray, nearest: float = 1.0) -> Any:
    """Round every component to the nearest multiple of *nearest*.

    Halfway values round to even, as :func:`round` does.
    """
    require_not_none(vector, "vector")
    values = np.asarray(vector, dtype=np.float64)
    return _rebuild(vector, np.round(values / nearest) * nearest)


def with_component(
    vector: Sequence[float] | np.ndarray, axis: int, value: float
) -> Any:
    """Return a copy of *vector* with component *axis* replaced by *value*.

    Raises:
        ArgumentOutOfRangeError: If *axis* is not a component of *vector*.
    """
    require_not_none(vector, "vector")
    values = np.array(vector, dtype=np.float64)
    if not 0 <= axis < values.shape[0]:
        raise ArgumentOutOfRangeError(
            "axis", axis, f"A {values.shape[0]}-component vector has no axis {axis}."
        )
    values[axis] = value
    return _rebuild(vector, values)


def with_x(vector: Sequence[float] | np.ndarray, x: float) -> Any:
    """Return a copy of *vector* with its x component set to *x*."""
    return with_component(vector, AXES.index("x"), x)


def with_y(vector: Sequence[float] | np.ndarray, y: float) -> Any:
    """Return a copy of *vector* with its y component set to *y*."""
    return with_component(vector, AXES.index("y"), y)


def with_z(vector: Sequence[float] | np.ndarray, z: float) -> Any:
    """Return a copy of *vector* with its z component set to *z*."""
    return with_component(vector, AXES.index("z"), z)


def with_w(vector: Sequence[float] | np.ndarray, w: float) -> Any:
    """Return a copy of *vector* with its w component set to *w*."""
    return with_component(vector, AXES.index("w"), w)
