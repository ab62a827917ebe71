"""Unit tests for xtend.collections.arrays."""

import pytest

from xtend.collections import arrays
from xtend.errors import ArgumentNoneError, ArgumentOutOfRangeError

# pylint: disable=magic-value-comparison


class TestReadOnlyView:
    """Tests for as_read_only."""

    @staticmethod
    def test_view_is_live():
        """Changes to the list show through the view."""
        items = [1, 2, 3]
        view = arrays.as_read_only(items)
        items.append(4)
        assert list(view) == [1, 2, 3, 4]
        assert len(view) == 4
        assert view[-1] == 4
        assert view[1:3] == [2, 3]

    @staticmethod
    def test_view_cannot_be_mutated():
        """The view exposes no item assignment or append."""
        view = arrays.as_read_only([1, 2, 3])
        with pytest.raises(TypeError):
            view[0] = 5  # type: ignore[index]
        assert not hasattr(view, "append")

    @staticmethod
    def test_none_array():
        """None is rejected."""
        with pytest.raises(ArgumentNoneError):
            arrays.as_read_only(None)


def test_clear_whole_list():
    """Without bounds every slot is reset to None."""
    items = [1, 2, 3]
    arrays.clear(items)
    assert items == [None, None, None]


def test_clear_slice_with_default():
    """A slice can be reset to a custom default."""
    items = [1, 2, 3, 4]
    arrays.clear(items, 1, 2, default=0)
    assert items == [1, 0, 0, 4]


@pytest.mark.parametrize(("start", "length"), [(-1, 1), (0, 5), (3, 2), (1, -1)])
def test_clear_out_of_range(start, length):
    """Slices that leave the list are rejected before anything changes."""
    items = [1, 2, 3, 4]
    with pytest.raises(ArgumentOutOfRangeError):
        arrays.clear(items, start, length)
    assert items == [1, 2, 3, 4]


def test_fill():
    """fill assigns the value to the requested slots."""
    items = [0] * 5
    arrays.fill(items, 7, 2)
    assert items == [0, 0, 7, 7, 7]
    arrays.fill(items, 9, 0, 1)
    assert items == [9, 0, 7, 7, 7]
