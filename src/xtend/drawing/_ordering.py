"""Rich comparisons driven by a single sort key."""

from __future__ import annotations

from typing import Any

from xtend.errors import InvalidTypeError


class KeyOrdered:
    """Mixin ordering instances by :meth:`_sort_key`.

    Ordering is independent of equality: two values may compare as neither
    less nor greater while still being unequal.
    """

    __slots__ = ()

    def _sort_key(self) -> float:
        raise NotImplementedError

    def compare_to(self, other: Any) -> int:
        """Return -1, 0 or 1 as this value sorts before, with or after *other*.

        ``None`` sorts before every value.

        Raises:
            InvalidTypeError: If *other* is neither None nor the same type.
        """
        if other is None:
            return 1
        if not isinstance(other, type(self)):
            raise InvalidTypeError(other)
        mine, theirs = self._sort_key(), other._sort_key()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: Any) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        return self.compare_to(other) >= 0
