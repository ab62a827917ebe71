"""Counting and splitting over contiguous sequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, TypeVar, overload

from xtend.errors import ArgumentOutOfRangeError, require_not_none

T = TypeVar("T")
S = TypeVar("S", bound=Sequence[Any])


def count(sequence: Sequence[T], item: T) -> int:
    """Return how many elements of *sequence* equal *item*."""
    require_not_none(sequence, "sequence")
    return sum(1 for element in sequence if element == item)


@overload
def split(sequence: str, delimiter: str) -> Iterator[str]: ...
@overload
def split(sequence: S, delimiter: Any) -> Iterator[S]: ...
def split(sequence, delimiter):
    """Lazily yield the segments of *sequence* between delimiters.

    For strings the delimiter may span several characters; for any other
    sequence it is a single element. Segments are slices of the input, so
    lists yield lists and tuples yield tuples.

    - An empty sequence yields nothing.
    - A trailing delimiter does not produce a final empty segment.
    - Consecutive delimiters produce empty segments between them.

    Example:
        ```py
        >>> list(split("Hello, the World ", " "))
        ['Hello,', 'the', 'World']
        ```

    Raises:
        ArgumentNoneError: If *sequence* is None.
        ArgumentOutOfRangeError: If a string delimiter is empty.
    """
    require_not_none(sequence, "sequence")
    if isinstance(sequence, str):
        if not delimiter:
            raise ArgumentOutOfRangeError(
                "delimiter", delimiter, "The delimiter cannot be empty."
            )
        return _split_str(sequence, delimiter)
    return _split_elements(sequence, delimiter)


def _split_str(text: str, delimiter: str) -> Iterator[str]:
    start = 0
    while start < len(text):
        index = text.find(delimiter, start)
        if index == -1:
            yield text[start:]
            return
        yield text[start:index]
        start = index + len(delimiter)


def _split_elements(sequence: S, delimiter: Any) -> Iterator[S]:
    start = 0
    for index, element in enumerate(sequence):
        if element == delimiter:
            yield sequence[start:index]
            start = index + 1
    if start < len(sequence):
        yield sequence[start:]
