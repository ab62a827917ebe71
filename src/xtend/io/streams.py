"""Read and write fixed-width numbers on binary streams."""

from __future__ import annotations

from typing import BinaryIO

from xtend.errors import (
    StreamNotReadableError,
    StreamNotWritableError,
    require_not_none,
)

from .endianness import Endianness, NumericType, from_bytes, get_bytes, struct_format


def read_value(
    stream: BinaryIO,
    numeric_type: NumericType,
    endianness: Endianness | None = None,
) -> int | float:
    """Read one *numeric_type* value from *stream*, advancing its position.

    Args:
        stream: A readable binary stream.
        numeric_type: The fixed-width type to decode.
        endianness: Byte order; the platform's native order when omitted.

    Returns:
        The decoded number.

    Raises:
        ArgumentNoneError: If *stream* is None.
        StreamNotReadableError: If the stream does not support reading.
        ArgumentOutOfRangeError: If *endianness* is not an Endianness member.
        EOFError: If the stream ends before a full value was read.
    """
    require_not_none(stream, "stream")
    if not stream.readable():
        raise StreamNotReadableError
    # validate before consuming any bytes
    struct_format(numeric_type, endianness)
    data = stream.read(numeric_type.size)
    if len(data) < numeric_type.size:
        raise EOFError(
            f"Expected {numeric_type.size} byte(s) for {numeric_type.name}, "
            f"got {len(data)}."
        )
    return from_bytes(data, numeric_type, endianness)


def write_value(
    stream: BinaryIO,
    value: int | float,
    numeric_type: NumericType,
    endianness: Endianness | None = None,
) -> int:
    """Write *value* to *stream* as *numeric_type*.

    Returns:
        int: The number of bytes written.

    Raises:
        ArgumentNoneError: If *stream* is None.
        StreamNotWritableError: If the stream does not support writing.
    """
    require_not_none(stream, "stream")
    if not stream.writable():
        raise StreamNotWritableError
    data = get_bytes(value, numeric_type, endianness)
    stream.write(data)
    return len(data)


def read_int16(stream: BinaryIO, endianness: Endianness | None = None) -> int:
    """Read a signed 16-bit integer."""
    return int(read_value(stream, NumericType.INT16, endianness))


def read_uint16(stream: BinaryIO, endianness: Endianness | None = None) -> int:
    """Read an unsigned 16-bit integer."""
    return int(read_value(stream, NumericType.UINT16, endianness))


def read_int32(stream: BinaryIO, endianness: Endianness | None = None) -> int:
    """Read a signed 32-bit integer."""
    return int(read_value(stream, NumericType.INT32, endianness))


def read_uint32(stream: BinaryIO, endianness: Endianness | None = None) -> int:
    """Read an unsigned 32-bit integer."""
    return int(read_value(stream, NumericType.UINT32, endianness))


def read_int64(stream: BinaryIO, endianness: Endianness | None = None) -> int:
    """Read a signed 64-bit integer."""
    return int(read_value(stream, NumericType.INT64, endianness))


def read_uint64(stream: BinaryIO, endianness: Endianness | None = None) -> int:
    """Read an unsigned 64-bit integer."""
    return int(read_value(stream, NumericType.UINT64, endianness))


def read_float32(stream: BinaryIO, endianness: Endianness | None = None) -> float:
    """Read a 32-bit IEEE 754 float."""
    return float(read_value(stream, NumericType.FLOAT32, endianness))


def read_float64(stream: BinaryIO, endianness: Endianness | None = None) -> float:
    """Read a 64-bit IEEE 754 float."""
    return float(read_value(stream, NumericType.FLOAT64, endianness))
