"""Integer (and generic numeric) helpers.

Functions take the value they extend as their first argument. ``wrap`` and
``clamp`` are generic over ``int``, ``float`` and ``Decimal``; the remaining
helpers are integer-only.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TypeVar, overload

from xtend.errors import (
    LOWER_CANNOT_BE_GREATER_THAN_UPPER,
    ArgumentOutOfRangeError,
    require_not_none,
)

N = TypeVar("N", int, float, Decimal)

# pylint: disable=magic-value-comparison


def bool_to_int(value: bool) -> int:
    """Return 1 for ``True`` and 0 otherwise."""
    return 1 if value else 0


def is_even(value: int | float | Decimal) -> bool:
    """Return True if *value* is evenly divisible by 2."""
    require_not_none(value, "value")
    return value % 2 == 0


def is_odd(value: int | float | Decimal) -> bool:
    """Return True if *value* is not evenly divisible by 2."""
    return not is_even(value)


def is_prime(value: int) -> bool:
    """Return True if *value* is a prime number.

    Values below 2 are never prime. Candidates are checked by trial division
    against 2, 3 and numbers of the form ``6k ± 1`` up to ``sqrt(value)``.
    """
    require_not_none(value, "value")
    if value < 2:
        return False
    if value < 4:
        return True
    if value % 2 == 0 or value % 3 == 0:
        return False
    for candidate in range(5, math.isqrt(value) + 1, 6):
        if value % candidate == 0 or value % (candidate + 2) == 0:
            return False
    return True


def factorial(value: int) -> int:
    """Return ``value!``.

    Raises:
        ArgumentOutOfRangeError: If *value* is negative.
    """
    require_not_none(value, "value")
    if value < 0:
        raise ArgumentOutOfRangeError(
            "value", value, "Factorial is undefined for negative numbers."
        )
    return math.factorial(value)


def count_digits(value: int) -> int:
    """Return the number of decimal digits in ``|value|`` (0 has one digit)."""
    require_not_none(value, "value")
    return len(str(abs(value)))


def digital_root(value: int) -> int:
    """Return the digital root of ``|value|``.

    The digital root is the recursive sum of digits until a single digit is
    left, e.g. ``239 -> 2 + 3 + 9 = 14 -> 1 + 4 = 5``. It is computed in
    constant time as ``1 + (n - 1) mod 9`` for ``n > 0``.
    """
    require_not_none(value, "value")
    n = abs(value)
    if n == 0:
        return 0
    return 1 + (n - 1) % 9


def multiplicative_persistence(value: int) -> int:
    """Return how many digit products it takes to reach a single digit.

    For example ``39 -> 27 -> 14 -> 4`` has persistence 3.
    """
    require_not_none(value, "value")
    n = abs(value)
    steps = 0
    while n >= 10:
        product = 1
        for digit in str(n):
            product *= int(digit)
        n = product
        steps += 1
    return steps


def greatest_common_factor(value: int, other: int) -> int:
    """Return the greatest common factor of *value* and *other*."""
    return math.gcd(value, other)


def lowest_common_multiple(value: int, other: int) -> int:
    """Return the lowest common multiple of *value* and *other* (0 if either is 0)."""
    return math.lcm(value, other)


def sign(value: int | float | Decimal) -> int:
    """Return -1, 0 or 1 according to the sign of *value*."""
    require_not_none(value, "value")
    return (value > 0) - (value < 0)


def mod(dividend: int, divisor: int) -> int:
    """Return the truncated remainder, shifted up by *divisor* when negative.

    Unlike Python's ``%``, the intermediate remainder takes the sign of the
    dividend, so ``mod(-1, 3) == 2`` but ``mod(5, -3) == 2``.

    Raises:
        ArgumentOutOfRangeError: If *divisor* is zero.
    """
    if divisor == 0:
        raise ArgumentOutOfRangeError("divisor", divisor, "Divisor cannot be zero.")
    remainder = abs(dividend) % abs(divisor)
    if dividend < 0:
        remainder = -remainder
    return remainder + divisor if remainder < 0 else remainder


@overload
def wrap(value: N, low: N) -> N: ...
@overload
def wrap(value: N, low: N, high: N) -> N: ...
def wrap(value, low, high=None):
    """Wrap *value* into the half-open range ``[low, high)``.

    Called with two arguments, the second is the range length and the range
    is ``[0, length)``. The result is ``((value - low) mod (high - low)) + low``
    with the remainder taking the sign of the range length, so ``int``, ``float``
    and ``Decimal`` agree. When *high* is below *low* the range is
    ``(high, low]``.

    Args:
        value: The value to wrap.
        low: Inclusive lower bound, or the length when *high* is omitted.
        high: Exclusive upper bound.

    Returns:
        The wrapped value, of the same numeric type as the inputs.

    Raises:
        ArgumentOutOfRangeError: If the range is empty (``high == low``).
    """
    require_not_none(value, "value")
    if high is None:
        low, high = type(low)(0), low
    length = high - low
    if length == 0:
        raise ArgumentOutOfRangeError(
            "high", high, "The wrap range cannot be empty (high == low)."
        )
    remainder = (value - low) % length
    # Decimal's remainder takes the dividend's sign rather than the divisor's
    if remainder and (remainder < 0) != (length < 0):
        remainder += length
    wrapped = low + remainder
    # float rounding can land exactly on the excluded bound
    return low if wrapped == high else wrapped


def clamp(value: N, lower: N, upper: N) -> N:
    """Constrain *value* to the closed range ``[lower, upper]``.

    Raises:
        ArgumentOutOfRangeError: If *lower* is greater than *upper*.
    """
    if lower > upper:
        raise ArgumentOutOfRangeError(
            "lower",
            lower,
            LOWER_CANNOT_BE_GREATER_THAN_UPPER.format("lower", "upper"),
        )
    return min(max(value, lower), upper)
