"""Byte-level helpers: endianness-aware conversion and binary stream I/O."""

from .endianness import Endianness, NumericType, native_endianness

__all__ = ["Endianness", "NumericType", "native_endianness"]
