"""LINQ-style helpers over iterables."""

from xtend.linq.enumerable import concat_one, except_item, min_max, min_max_by

__all__ = ["concat_one", "except_item", "min_max", "min_max_by"]
