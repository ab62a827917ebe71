"""Floating-point helpers."""

from __future__ import annotations

import cmath
import math

from xtend.errors import ArgumentOutOfRangeError
from xtend.math.numeric import clamp, wrap

__all__ = [
    "complex_sqrt",
    "degrees_to_radians",
    "radians_to_degrees",
    "round_to_nearest",
    "saturate",
    "sqrt",
    "wrap",
]


def degrees_to_radians(value: float) -> float:
    """Convert an angle from degrees to radians."""
    return value * (math.pi / 180.0)


def radians_to_degrees(value: float) -> float:
    """Convert an angle from radians to degrees."""
    return value * (180.0 / math.pi)


def round_to_nearest(value: float, nearest: float = 1.0) -> float:
    """Round *value* to the nearest multiple of *nearest*.

    Halfway cases round to even, e.g. ``round_to_nearest(2.5) == 2.0`` and
    ``round_to_nearest(7.5, 5) == 10.0``.

    Raises:
        ArgumentOutOfRangeError: If *nearest* is 0.
    """
    if nearest == 0:
        raise ArgumentOutOfRangeError(
            "nearest", nearest, "Cannot round to a multiple of 0."
        )
    return round(value / nearest) * nearest


def saturate(value: float) -> float:
    """Clamp *value* to the closed range ``[0, 1]``."""
    return clamp(value, 0.0, 1.0)


def sqrt(value: float) -> float:
    """Return the square root of *value*, or NaN for negative and NaN input."""
    if math.isnan(value) or value < 0:
        return math.nan
    return math.sqrt(value)


def complex_sqrt(value: float) -> complex:
    """Return the complex square root of a real *value*.

    Infinite input yields ``complex(inf, inf)`` and NaN yields
    ``complex(nan, nan)``; negative input yields a purely imaginary root.
    """
    if math.isinf(value):
        return complex(math.inf, math.inf)
    if math.isnan(value):
        return complex(math.nan, math.nan)
    if value < 0:
        return complex(0.0, math.sqrt(-value))
    return cmath.sqrt(value)
