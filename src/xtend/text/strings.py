"""Helpers for ``str`` receivers.

Every helper takes the string as its first argument and raises
:class:`~xtend.errors.ArgumentNoneError` when it is ``None``, except the
``as_none_if_*`` and ``with_*_alternative`` family, whose purpose is to
handle missing values.
"""

from __future__ import annotations

import base64
import random as _random
from collections.abc import Iterator
from enum import Enum
from typing import TypeVar

from xtend.errors import (
    COUNT_MUST_BE_NON_NEGATIVE,
    LENGTH_MUST_BE_NON_NEGATIVE,
    ArgumentOutOfRangeError,
    require_non_negative,
    require_not_none,
)

E = TypeVar("E", bound=Enum)


# ============================================================================
#                               Inspection
# ============================================================================


def is_lower(value: str) -> bool:
    """True if every cased character of *value* is lowercase.

    Uncased characters such as spaces and digits are ignored, but a string
    needs at least one cased character to count as lowercase.
    """
    require_not_none(value, "value")
    return value.islower()


def is_upper(value: str) -> bool:
    """True if every cased character of *value* is uppercase."""
    require_not_none(value, "value")
    return value.isupper()


def is_palindrome(value: str) -> bool:
    """True if *value* reads the same both ways, ignoring case and punctuation.

    Only letters and digits take part in the comparison. A string that has
    none of them (including the empty string) is not a palindrome.

    Example:
        ```py
        >>> is_palindrome("A man, a plan, a canal, panama")
        True
        ```
    """
    require_not_none(value, "value")
    letters = [char.casefold() for char in value if char.isalnum()]
    if not letters:
        return False
    return letters == letters[::-1]


# ============================================================================
#                              Randomisation
# ============================================================================


def shuffled(value: str, random: _random.Random | None = None) -> str:
    """Return a random permutation of the characters of *value*."""
    require_not_none(value, "value")
    random = random or _random.Random()
    characters = list(value)
    random.shuffle(characters)
    return "".join(characters)


def randomize(value: str, length: int, random: _random.Random | None = None) -> str:
    """Return *length* characters drawn with replacement from *value*.

    Raises:
        ArgumentOutOfRangeError: If *length* is negative.
    """
    require_not_none(value, "value")
    require_non_negative(length, "length", LENGTH_MUST_BE_NON_NEGATIVE)
    if length == 0:
        return ""
    random = random or _random.Random()
    return "".join(random.choices(value, k=length))


# ============================================================================
#                              Transformation
# ============================================================================


def chunk(value: str, chunk_size: int) -> Iterator[str]:
    """Split *value* into consecutive substrings of *chunk_size* characters.

    The last chunk may be shorter. A *chunk_size* of 0 yields a single empty
    string. Arguments are checked when this is called, not when iteration
    begins.

    Example:
        ```py
        >>> list(chunk("Hello World", 2))
        ['He', 'll', 'o ', 'Wo', 'rl', 'd']
        ```

    Raises:
        ArgumentNoneError: If *value* is None.
        ArgumentOutOfRangeError: If *chunk_size* is negative.
    """
    require_not_none(value, "value")
    require_non_negative(chunk_size, "chunk_size")

    def _generate() -> Iterator[str]:
        if chunk_size == 0:
            yield ""
            return
        for start in range(0, len(value), chunk_size):
            yield value[start : start + chunk_size]

    return _generate()


def repeat(value: str, count: int) -> str:
    """Return *value* concatenated *count* times."""
    require_not_none(value, "value")
    require_non_negative(count, "count", COUNT_MUST_BE_NON_NEGATIVE)
    return value * count


def reverse(value: str) -> str:
    """Return *value* with its characters in reverse order."""
    require_not_none(value, "value")
    return value[::-1]


# ============================================================================
#                            Missing values
# ============================================================================


def as_none_if_empty(value: str | None) -> str | None:
    """Return ``None`` for an empty string, otherwise *value*."""
    return value or None


def as_none_if_whitespace(value: str | None) -> str | None:
    """Return ``None`` for an empty or whitespace-only string."""
    if value is None or not value.strip():
        return None
    return value


def with_empty_alternative(value: str | None, alternative: str) -> str:
    """Return *alternative* when *value* is ``None`` or empty."""
    return value or alternative


def with_whitespace_alternative(value: str | None, alternative: str) -> str:
    """Return *alternative* when *value* is ``None``, empty or whitespace."""
    return as_none_if_whitespace(value) or alternative


# ============================================================================
#                               Encoding
# ============================================================================


def base64_encode(value: str) -> str:
    """Encode the UTF-8 bytes of *value* as Base64 text."""
    require_not_none(value, "value")
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def base64_decode(value: str) -> str:
    """Decode Base64 text into a UTF-8 string."""
    require_not_none(value, "value")
    return base64.b64decode(value).decode("utf-8")


def get_bytes(value: str, encoding: str = "utf-8") -> bytes:
    """Return *value* encoded with *encoding*."""
    require_not_none(value, "value")
    require_not_none(encoding, "encoding")
    return value.encode(encoding)


def change_encoding(
    value: str, source_encoding: str, destination_encoding: str
) -> str:
    """Round-trip *value* from one encoding to another.

    Characters the destination cannot represent are replaced, the way a lossy
    transcoding would.
    """
    require_not_none(value, "value")
    require_not_none(source_encoding, "source_encoding")
    require_not_none(destination_encoding, "destination_encoding")
    data = value.encode(source_encoding)
    transcoded = data.decode(source_encoding).encode(
        destination_encoding, errors="replace"
    )
    return transcoded.decode(destination_encoding)


# ============================================================================
#                               Parsing
# ============================================================================


def enum_parse(value: str, enum_type: type[E], ignore_case: bool = False) -> E:
    """Return the member of *enum_type* named by *value*.

    Surrounding whitespace is ignored.

    Raises:
        ArgumentNoneError: If *value* or *enum_type* is None.
        ArgumentOutOfRangeError: If *value* is empty or whitespace.
        ValueError: If no member has that name.
    """
    require_not_none(value, "value")
    require_not_none(enum_type, "enum_type")
    name = value.strip()
    if not name:
        raise ArgumentOutOfRangeError(
            "value", value, "Must specify valid information for parsing in the string."
        )

    if name in enum_type.__members__:
        return enum_type.__members__[name]
    if ignore_case:
        for member_name, member in enum_type.__members__.items():
            if member_name.casefold() == name.casefold():
                return member
    raise ValueError(f"'{name}' is not a member of {enum_type.__name__}.")
