"""In-place helpers for mutable sequences."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from typing import Generic, TypeVar, overload

from xtend.errors import ArgumentOutOfRangeError, require_not_none

T = TypeVar("T")


class ReadOnlyView(Sequence[T], Generic[T]):
    """A live, read-only view over a sequence.

    Changes made to the underlying list remain visible through the view, but
    the view itself exposes no mutating methods.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ReadOnlyView({list(self._items)!r})"


def as_read_only(array: Sequence[T]) -> ReadOnlyView[T]:
    """Return a read-only view of *array*."""
    return ReadOnlyView(require_not_none(array, "array"))


def _bounds(array: Sequence[object], start: int, length: int | None) -> range:
    if length is None:
        length = len(array) - start
    if start < 0 or length < 0 or start + length > len(array):
        raise ArgumentOutOfRangeError(
            "length",
            length,
            "Count must be positive and count must refer to a location "
            "within the string/array/collection.",
        )
    return range(start, start + length)


def clear(
    array: MutableSequence[T | None],
    start: int = 0,
    length: int | None = None,
    *,
    default: T | None = None,
) -> None:
    """Reset ``array[start:start + length]`` to *default*.

    Omitting *length* clears through to the end of the list.

    Raises:
        ArgumentNoneError: If *array* is None.
        ArgumentOutOfRangeError: If the slice falls outside the list.
    """
    require_not_none(array, "array")
    for index in _bounds(array, start, length):
        array[index] = default


def fill(
    array: MutableSequence[T], value: T, start: int = 0, count: int | None = None
) -> None:
    """Assign *value* to *count* slots of *array* starting at *start*.

    Raises:
        ArgumentNoneError: If *array* is None.
        ArgumentOutOfRangeError: If the slice falls outside the list.
    """
    require_not_none(array, "array")
    for index in _bounds(array, start, count):
        array[index] = value
