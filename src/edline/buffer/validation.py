"""Bounds checks shared by commands that read or remove lines."""

from __future__ import annotations

from edline.commands.models import ResolvedRange
from edline.errors import InvalidRangeError

from .document import LineStore


def ensure_range_in_bounds(store: LineStore, range_: ResolvedRange) -> ResolvedRange:
    if not len(store):
        raise InvalidRangeError(range_, f"{range_}: buffer is empty")
    if range_.is_reversed:
        raise InvalidRangeError(range_, f"{range_} is reversed")
    if store.is_range_out_of_bounds(range_):
        raise InvalidRangeError(range_, f"{range_} outside 1,{len(store)}")
    return range_


def ensure_index_in_bounds(store: LineStore, index: int) -> int:
    if store.is_index_out_of_bounds(index):
        raise InvalidRangeError(
            ResolvedRange(index, index), f"line {index} outside 1,{len(store)}"
        )
    return index
