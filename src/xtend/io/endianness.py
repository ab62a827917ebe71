"""Endianness-aware conversion between fixed-width numbers and bytes.

Every fixed-width type is described by a :class:`NumericType` member, which
maps onto a :mod:`struct` format character. Conversions default to the
platform's native byte order, matching how the numbers are laid out in memory.

Writers never grow the caller's buffer: ``try_write_bytes`` reports ``False``
when the destination is too short and leaves it untouched.

Examples:
    ```py
    >>> get_bytes(420, NumericType.INT16, Endianness.BIG)
    b'\\x01\\xa4'
    >>> from_bytes(b"\\xa4\\x01", NumericType.INT16, Endianness.LITTLE)
    420
    ```
"""

from __future__ import annotations

import struct
import sys
from enum import Enum

from xtend.errors import (
    ArgumentOutOfRangeError,
    DestinationTooShortError,
    require_not_none,
)


class Endianness(Enum):
    """Byte order used when converting numbers to and from bytes."""

    LITTLE = "little"
    BIG = "big"

    @property
    def struct_prefix(self) -> str:
        """The :mod:`struct` byte-order prefix for this endianness."""
        return "<" if self is Endianness.LITTLE else ">"


class NumericType(Enum):
    """Fixed-width numeric types, valued by their :mod:`struct` format character."""

    INT8 = "b"
    UINT8 = "B"
    INT16 = "h"
    UINT16 = "H"
    INT32 = "i"
    UINT32 = "I"
    INT64 = "q"
    UINT64 = "Q"
    FLOAT32 = "f"
    FLOAT64 = "d"

    @property
    def size(self) -> int:
        """Width of the type in bytes."""
        return struct.calcsize(f"<{self.value}")

    @property
    def is_float(self) -> bool:
        """True for the IEEE 754 floating-point types."""
        return self in (NumericType.FLOAT32, NumericType.FLOAT64)

    @property
    def signed(self) -> bool:
        """True for signed integer and floating-point types."""
        return self.is_float or self.value.islower()


def native_endianness() -> Endianness:
    """Return the byte order of the running platform."""
    return Endianness(sys.byteorder)


def struct_format(
    numeric_type: NumericType, endianness: Endianness | None = None
) -> str:
    """Return the :mod:`struct` format string for a type and byte order.

    Raises:
        ArgumentOutOfRangeError: If either argument is not a valid member.
    """
    if not isinstance(numeric_type, NumericType):
        raise ArgumentOutOfRangeError("numeric_type", numeric_type)
    if endianness is None:
        endianness = native_endianness()
    elif not isinstance(endianness, Endianness):
        raise ArgumentOutOfRangeError("endianness", endianness)
    return f"{endianness.struct_prefix}{numeric_type.value}"


def _pack(fmt: str, value: int | float) -> bytes:
    try:
        return struct.pack(fmt, value)
    except (struct.error, OverflowError) as e:
        raise ArgumentOutOfRangeError("value", value, str(e)) from e


def get_bytes(
    value: int | float,
    numeric_type: NumericType,
    endianness: Endianness | None = None,
) -> bytes:
    """Return *value* encoded as *numeric_type* in the given byte order.

    Args:
        value: The number to encode.
        numeric_type: The fixed-width type to encode as.
        endianness: Byte order; the platform's native order when omitted.

    Returns:
        bytes: Exactly ``numeric_type.size`` bytes.

    Raises:
        ArgumentNoneError: If *value* is None.
        ArgumentOutOfRangeError: If *value* does not fit the type, or the
            type or endianness is not a valid member.
    """
    require_not_none(value, "value")
    return _pack(struct_format(numeric_type, endianness), value)


def get_big_endian_bytes(value: int | float, numeric_type: NumericType) -> bytes:
    """Shortcut for :func:`get_bytes` with big-endian order."""
    return get_bytes(value, numeric_type, Endianness.BIG)


def get_little_endian_bytes(value: int | float, numeric_type: NumericType) -> bytes:
    """Shortcut for :func:`get_bytes` with little-endian order."""
    return get_bytes(value, numeric_type, Endianness.LITTLE)


def try_write_bytes(
    value: int | float,
    destination: bytearray | memoryview,
    numeric_type: NumericType,
    endianness: Endianness | None = None,
) -> bool:
    """Write *value* into the start of *destination*.

    Args:
        value: The number to encode.
        destination: A writable buffer; only the first ``numeric_type.size``
            bytes are written.
        numeric_type: The fixed-width type to encode as.
        endianness: Byte order; the platform's native order when omitted.

    Returns:
        bool: True on success; False if *destination* is too short, in which
        case it is left unchanged.

    Raises:
        ArgumentNoneError: If *value* or *destination* is None.
        ArgumentOutOfRangeError: If *value* does not fit the type.
    """
    require_not_none(value, "value")
    require_not_none(destination, "destination")
    fmt = struct_format(numeric_type, endianness)
    data = _pack(fmt, value)
    if len(destination) < len(data):
        return False
    destination[: len(data)] = data
    return True


def try_write_big_endian_bytes(
    value: int | float, destination: bytearray | memoryview, numeric_type: NumericType
) -> bool:
    """Shortcut for :func:`try_write_bytes` with big-endian order."""
    return try_write_bytes(value, destination, numeric_type, Endianness.BIG)


def try_write_little_endian_bytes(
    value: int | float, destination: bytearray | memoryview, numeric_type: NumericType
) -> bool:
    """Shortcut for :func:`try_write_bytes` with little-endian order."""
    return try_write_bytes(value, destination, numeric_type, Endianness.LITTLE)


def from_bytes(
    source: bytes | bytearray | memoryview,
    numeric_type: NumericType,
    endianness: Endianness | None = None,
) -> int | float:
    """Decode a *numeric_type* value from the start of *source*.

    Raises:
        ArgumentNoneError: If *source* is None.
        DestinationTooShortError: If *source* holds fewer bytes than the type.
    """
    require_not_none(source, "source")
    fmt = struct_format(numeric_type, endianness)
    size = numeric_type.size
    if len(source) < size:
        raise DestinationTooShortError("source", size, len(source))
    return struct.unpack_from(fmt, source)[0]


def try_read_bytes(
    source: bytes | bytearray | memoryview,
    numeric_type: NumericType,
    endianness: Endianness | None = None,
) -> tuple[bool, int | float | None]:
    """Like :func:`from_bytes`, but reports a short *source* instead of raising.

    Returns:
        ``(True, value)`` on success, ``(False, None)`` if *source* is too short.
    """
    try:
        return True, from_bytes(source, numeric_type, endianness)
    except DestinationTooShortError:
        return False, None
