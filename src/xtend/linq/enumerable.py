"""Lazy filters and single-pass minimum/maximum traversal.

``min_max`` and ``min_max_by`` find both extremes in one pass, which matters
for iterators that can only be consumed once. Comparers follow the
``cmp``-style contract: ``comparer(a, b)`` returns a negative number when
``a`` sorts first, zero when equal and a positive number otherwise.

Examples:
    ```py
    >>> min_max([3, 1, 4, 1, 5])
    (1, 5)
    >>> min_max_by(["pear", "fig", "banana"], len)
    ('fig', 'banana')
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, TypeVar

from xtend.errors import EmptySourceError, require_not_none

T = TypeVar("T")
K = TypeVar("K")

Comparer = Callable[[Any, Any], int]


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def except_item(source: Iterable[T], item: T) -> Iterator[T]:
    """Lazily yield the elements of *source* that are not equal to *item*."""
    require_not_none(source, "source")
    return (element for element in source if element != item)


def concat_one(source: Iterable[T], value: T) -> Iterator[T]:
    """Lazily yield every element of *source*, then *value*."""
    require_not_none(source, "source")

    def _generate() -> Iterator[T]:
        yield from source
        yield value

    return _generate()


def min_max(
    source: Iterable[T],
    selector: Callable[[T], K] | None = None,
    comparer: Comparer | None = None,
) -> tuple[Any, Any]:
    """Return the minimum and maximum of *source* in a single pass.

    Args:
        source: The values to scan.
        selector: Optional projection applied to each element; the result then
            holds projected values.
        comparer: Optional ``cmp``-style function. Defaults to natural order.

    Returns:
        A ``(minimum, maximum)`` tuple. Ties keep the first element found.

    Raises:
        ArgumentNoneError: If *source* is None.
        EmptySourceError: If *source* has no elements.
    """
    require_not_none(source, "source")
    compare = comparer or _natural_order
    values: Iterable[Any] = source
    if selector is not None:
        values = (selector(element) for element in source)

    if isinstance(values, Sequence):
        return _min_max_sequence(values, compare)
    return _min_max_iterator(iter(values), compare)


def min_max_by(
    source: Iterable[T],
    key_selector: Callable[[T], Any],
    comparer: Comparer | None = None,
) -> tuple[T, T]:
    """Return the elements of *source* with the smallest and largest key.

    Unlike :func:`min_max` with a selector, the result holds the original
    elements rather than their keys. Each key is computed once.

    Raises:
        ArgumentNoneError: If *source* or *key_selector* is None.
        EmptySourceError: If *source* has no elements.
    """
    require_not_none(source, "source")
    require_not_none(key_selector, "key_selector")
    compare = comparer or _natural_order

    iterator = iter(source)
    try:
        first = next(iterator)
    except StopIteration:
        raise EmptySourceError() from None

    min_element = max_element = first
    min_key = max_key = key_selector(first)
    for element in iterator:
        key = key_selector(element)
        if compare(key, min_key) < 0:
            min_element, min_key = element, key
        if compare(key, max_key) > 0:
            max_element, max_key = element, key
    return min_element, max_element


def _min_max_sequence(values: Sequence[Any], compare: Comparer) -> tuple[Any, Any]:
    if not values:
        raise EmptySourceError()

    minimum = maximum = values[0]
    for index in range(1, len(values)):
        current = values[index]
        if compare(current, minimum) < 0:
            minimum = current
        if compare(current, maximum) > 0:
            maximum = current
    return minimum, maximum


def _min_max_iterator(values: Iterator[Any], compare: Comparer) -> tuple[Any, Any]:
    try:
        minimum = next(values)
    except StopIteration:
        raise EmptySourceError() from None

    maximum = minimum
    for current in values:
        if compare(current, minimum) < 0:
            minimum = current
        if compare(current, maximum) > 0:
            maximum = current
    return minimum, maximum
