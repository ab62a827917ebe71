"""Unit tests for xtend.math.numeric."""

from decimal import Decimal

import pytest

from xtend.errors import ArgumentNoneError, ArgumentOutOfRangeError
from xtend.math import numeric

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("value", "expected"), [(0, True), (1, False), (2, True), (-3, False), (2.0, True)]
)
def test_is_even_and_is_odd(value, expected):
    """is_odd is the negation of is_even, for ints and floats alike."""
    assert numeric.is_even(value) is expected
    assert numeric.is_odd(value) is not expected


def test_is_even_decimal():
    """Decimals are supported."""
    assert numeric.is_even(Decimal("4"))
    assert numeric.is_odd(Decimal("5"))


def test_is_even_rejects_none():
    """None receivers raise ArgumentNoneError."""
    with pytest.raises(ArgumentNoneError):
        numeric.is_even(None)


def test_is_prime():
    """Primes below 50 are found and nothing below 2 is prime."""
    primes = [n for n in range(-5, 50) if numeric.is_prime(n)]
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
    assert numeric.is_prime(7919)
    assert not numeric.is_prime(7917)


def test_factorial():
    """0! is 1 and negatives are rejected."""
    assert numeric.factorial(0) == 1
    assert numeric.factorial(5) == 120
    with pytest.raises(ArgumentOutOfRangeError):
        numeric.factorial(-1)


@pytest.mark.parametrize(
    ("value", "expected"), [(0, 0), (9, 9), (10, 1), (38, 2), (239, 5), (-239, 5)]
)
def test_digital_root(value, expected):
    """digital_root reduces |value| to a single digit."""
    assert numeric.digital_root(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"), [(0, 1), (7, 1), (-10, 2), (12345, 5)]
)
def test_count_digits(value, expected):
    """count_digits ignores the sign and counts 0 as one digit."""
    assert numeric.count_digits(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"), [(7, 0), (39, 3), (999, 4), (277777788888899, 11)]
)
def test_multiplicative_persistence(value, expected):
    """Steps of digit multiplication until a single digit is left."""
    assert numeric.multiplicative_persistence(value) == expected


def test_gcf_lcm_and_sign():
    """Thin wrappers behave like their math counterparts."""
    assert numeric.greatest_common_factor(12, 18) == 6
    assert numeric.lowest_common_multiple(4, 6) == 12
    assert [numeric.sign(v) for v in (-3, 0, 2.5)] == [-1, 0, 1]
    assert numeric.bool_to_int(True) == 1
    assert numeric.bool_to_int(False) == 0


@pytest.mark.parametrize(
    ("dividend", "divisor", "expected"),
    [(5, 3, 2), (-1, 3, 2), (-3, 3, 0), (5, -3, 2), (-5, -3, -5)],
)
def test_mod(dividend, divisor, expected):
    """The truncated remainder is shifted by the divisor when negative."""
    assert numeric.mod(dividend, divisor) == expected


def test_mod_by_zero():
    """A zero divisor is rejected."""
    with pytest.raises(ArgumentOutOfRangeError):
        numeric.mod(1, 0)


class TestWrap:
    """Tests for wrap."""

    @staticmethod
    @pytest.mark.parametrize(
        ("value", "low", "high", "expected"),
        [(5, 10, 20, 15), (15, 10, 20, 15), (20, 10, 20, 10), (25, 10, 20, 15)],
    )
    def test_int_range(value, low, high, expected):
        """Values wrap into [low, high); high itself wraps to low."""
        assert numeric.wrap(value, low, high) == expected

    @staticmethod
    def test_length_form():
        """The two-argument form wraps into [0, length)."""
        assert numeric.wrap(15, 10) == 5
        assert numeric.wrap(-1, 10) == 9

    @staticmethod
    def test_float():
        """Floats wrap the same way."""
        assert numeric.wrap(5.0, 10.0, 20.0) == pytest.approx(15.0)
        assert numeric.wrap(-0.5, 1.0) == pytest.approx(0.5)

    @staticmethod
    def test_decimal():
        """Decimal results match int and float results."""
        assert numeric.wrap(Decimal(5), Decimal(10), Decimal(20)) == Decimal(15)
        assert numeric.wrap(Decimal(15), Decimal(10)) == Decimal(5)
        assert numeric.wrap(Decimal("-0.5"), Decimal(1)) == Decimal("0.5")

    @staticmethod
    @pytest.mark.parametrize(("value", "high"), [(-1e-20, 10.0), (-1e-17, 360.0)])
    def test_float_tiny_negative_wraps_to_low(value, high):
        """A remainder that rounds up to the length wraps to low, not high."""
        wrapped = numeric.wrap(value, 0.0, high)
        assert wrapped == 0.0
        assert numeric.wrap(wrapped, 0.0, high) == wrapped

    @staticmethod
    def test_reversed_range():
        """With high below low the range is (high, low] for every type."""
        assert numeric.wrap(15, 10, 0) == 5
        assert numeric.wrap(Decimal(15), Decimal(10), Decimal(0)) == Decimal(5)
        assert numeric.wrap(15.0, 10.0, 0.0) == pytest.approx(5.0)
        assert numeric.wrap(Decimal(10), Decimal(10), Decimal(0)) == Decimal(10)

    @staticmethod
    def test_empty_range():
        """high == low has no valid result."""
        with pytest.raises(ArgumentOutOfRangeError):
            numeric.wrap(5, 10, 10)
        with pytest.raises(ArgumentOutOfRangeError):
            numeric.wrap(5, 0)


def test_clamp():
    """clamp bounds the value and rejects inverted bounds."""
    assert numeric.clamp(5, 0, 3) == 3
    assert numeric.clamp(-1, 0, 3) == 0
    assert numeric.clamp(Decimal("1.5"), Decimal(0), Decimal(2)) == Decimal("1.5")
    with pytest.raises(ArgumentOutOfRangeError, match="lower cannot be greater"):
        numeric.clamp(1, 3, 0)
