"""Treat integers as bit fields."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from xtend.errors import (
    ArgumentOutOfRangeError,
    DestinationTooShortError,
    require_not_none,
)

SUPPORTED_WIDTHS = (8, 16, 32, 64)
MAX_WIDTH = SUPPORTED_WIDTHS[-1]


def _check_width(width: int) -> None:
    if width not in SUPPORTED_WIDTHS:
        raise ArgumentOutOfRangeError(
            "width", width, f"width must be one of {SUPPORTED_WIDTHS}."
        )


def unpack_into(
    value: int, destination: MutableSequence[bool], width: int = 64
) -> None:
    """Write the low *width* bits of *value* into *destination*.

    ``destination[i]`` receives bit ``i``, least significant bit first.
    Negative values are read in two's complement.

    Raises:
        ArgumentOutOfRangeError: If *width* is not 8, 16, 32 or 64.
        DestinationTooShortError: If *destination* has fewer than *width* slots.
    """
    require_not_none(destination, "destination")
    _check_width(width)
    if len(destination) < width:
        raise DestinationTooShortError("destination", width, len(destination))
    for index in range(width):
        destination[index] = (value >> index) & 1 == 1


def unpack(value: int, width: int = 64) -> list[bool]:
    """Return the low *width* bits of *value* as booleans, LSB first."""
    _check_width(width)
    bits = [False] * width
    unpack_into(value, bits, width)
    return bits


def pack(bits: Sequence[bool]) -> int:
    """Pack booleans (LSB first) into an unsigned integer.

    This is the inverse of :func:`unpack` for the unsigned interpretation.

    Raises:
        ArgumentOutOfRangeError: If more than 64 bits are supplied.
    """
    require_not_none(bits, "bits")
    if len(bits) > MAX_WIDTH:
        raise ArgumentOutOfRangeError(
            "bits", len(bits), f"Cannot pack more than {MAX_WIDTH} bits."
        )
    result = 0
    for index, bit in enumerate(bits):
        if bit:
            result |= 1 << index
    return result
