"""Hypothesis property tests for endianness-aware conversion.

- **Round trip**: decoding ``get_bytes(value)`` with the same type and byte
  order gives back the value.
- **Mirror**: big- and little-endian encodings are byte-reversals of each other.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from xtend.io.endianness import Endianness, NumericType, from_bytes, get_bytes

pytestmark = [pytest.mark.property]

INTEGER_TYPES = [t for t in NumericType if not t.is_float]


@st.composite
def typed_integers(draw):
    """Draw an integer type together with a value that fits it."""
    numeric_type = draw(st.sampled_from(INTEGER_TYPES))
    bits = numeric_type.size * 8
    if numeric_type.signed:
        low, high = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
    else:
        low, high = 0, 2**bits - 1
    return numeric_type, draw(st.integers(min_value=low, max_value=high))


@given(typed=typed_integers(), endianness=st.sampled_from(list(Endianness)))
def test_integer_round_trip(typed, endianness):
    """from_bytes(get_bytes(v)) == v for every integer type and byte order."""
    numeric_type, value = typed
    data = get_bytes(value, numeric_type, endianness)
    assert len(data) == numeric_type.size
    assert from_bytes(data, numeric_type, endianness) == value


@given(value=st.floats(allow_nan=False), endianness=st.sampled_from(list(Endianness)))
def test_float64_round_trip(value, endianness):
    """Doubles survive the round trip exactly."""
    data = get_bytes(value, NumericType.FLOAT64, endianness)
    assert from_bytes(data, NumericType.FLOAT64, endianness) == value


@given(typed=typed_integers())
def test_big_endian_is_reversed_little_endian(typed):
    """The two byte orders mirror each other."""
    numeric_type, value = typed
    big = get_bytes(value, numeric_type, Endianness.BIG)
    little = get_bytes(value, numeric_type, Endianness.LITTLE)
    assert big == little[::-1]
