"""Close every resource in a collection.

Items only need a ``close()`` method (files, sockets, generators, ...);
:func:`aclose_all` additionally awaits ``aclose()`` where an item provides it.
``None`` entries are skipped.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable, MutableSequence
from typing import Any

from xtend.errors import ReadOnlyCollectionError, require_not_none

logger = logging.getLogger(__name__)


def close_all(items: Iterable[Any]) -> None:
    """Call ``close()`` on every non-None item, in order.

    Raises:
        ArgumentNoneError: If *items* is None.
    """
    require_not_none(items, "items")
    for item in items:
        if item is not None:
            item.close()


async def aclose_all(items: Iterable[Any]) -> None:
    """Close every non-None item, awaiting ``aclose()`` when available.

    Items without ``aclose()`` are closed with ``close()``; if that returns an
    awaitable it is awaited too.
    """
    require_not_none(items, "items")
    for item in items:
        if item is None:
            continue
        closer = getattr(item, "aclose", None) or item.close
        result = closer()
        if inspect.isawaitable(result):
            await result


def _require_mutable(items: Any, alternative: str) -> MutableSequence[Any]:
    require_not_none(items, "items")
    if not isinstance(items, MutableSequence):
        raise ReadOnlyCollectionError(alternative)
    return items


def clear_and_close_all(items: MutableSequence[Any]) -> None:
    """Close every item and then empty the list.

    Raises:
        ReadOnlyCollectionError: If *items* is not a mutable sequence.
    """
    items = _require_mutable(items, "close_all")
    close_all(items)
    logger.debug("Closed and cleared %d item(s).", len(items))
    items.clear()


async def aclear_and_close_all(items: MutableSequence[Any]) -> None:
    """Asynchronous counterpart of :func:`clear_and_close_all`."""
    items = _require_mutable(items, "aclose_all")
    await aclose_all(items)
    logger.debug("Closed and cleared %d item(s).", len(items))
    items.clear()
