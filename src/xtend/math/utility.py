"""Interpolation and easing functions."""

from __future__ import annotations

import math

from xtend.errors import ArgumentOutOfRangeError
from xtend.math.numeric import clamp


def lerp(value: float, target: float, alpha: float) -> float:
    """Linearly interpolate from *value* to *target* by *alpha*."""
    return value + (target - value) * alpha


def inverse_lerp(alpha: float, start: float, end: float) -> float:
    """Return where *alpha* lies between *start* and *end* (0 when they are equal)."""
    if start == end:
        return 0.0
    return (alpha - start) / (end - start)


def smooth_step(value: float, target: float, alpha: float) -> float:
    """Interpolate from *value* to *target* with Hermite smoothing of *alpha*."""
    alpha = clamp(alpha, 0.0, 1.0)
    alpha = alpha * alpha * (3.0 - 2.0 * alpha)
    return lerp(value, target, alpha)


def scale_range(
    value: float, old_min: float, old_max: float, new_min: float, new_max: float
) -> float:
    """Map *value* from ``[old_min, old_max]`` onto ``[new_min, new_max]``.

    Raises:
        ArgumentOutOfRangeError: If the old range is empty (``old_min == old_max``).
    """
    old_range = old_max - old_min
    if old_range == 0:
        raise ArgumentOutOfRangeError(
            "old_max", old_max, "The source range cannot be empty (old_min == old_max)."
        )
    new_range = new_max - new_min
    return new_min + (value - old_min) * new_range / old_range


def bias(value: float, bias_amount: float) -> float:
    """Apply Schlick's bias curve; a bias of 0.5 leaves *value* unchanged.

    Raises:
        ArgumentOutOfRangeError: If *bias_amount* is 0.
    """
    if bias_amount == 0:
        raise ArgumentOutOfRangeError("bias_amount", bias_amount)
    return value / ((1.0 / bias_amount - 2.0) * (1.0 - value) + 1.0)


def exponential_decay(value: float, alpha: float, decay: float) -> float:
    """Return ``value * e^(-decay * alpha)``."""
    return value * math.exp(-decay * alpha)


def gamma_to_linear(value: float, gamma: float = 2.2) -> float:
    """Convert a gamma-encoded value to linear space."""
    return value**gamma


def linear_to_gamma(value: float, gamma: float = 2.2) -> float:
    """Convert a linear value to gamma-encoded space."""
    return value ** (1.0 / gamma)


def pulse(value: float, lower: float, upper: float) -> float:
    """Return 1 when *value* lies in ``[lower, upper]``, otherwise 0."""
    return 1.0 if lower <= value <= upper else 0.0


def sawtooth(value: float) -> float:
    """Return the fractional part of *value*, always in ``[0, 1)``."""
    return value - math.floor(value)


def sigmoid(value: float) -> float:
    """Return the logistic function of *value*."""
    if value >= 0:
        return 1.0 / (1.0 + math.exp(-value))
    # exp(-value) overflows for large negative input
    exp_value = math.exp(value)
    return exp_value / (1.0 + exp_value)
