from __future__ import annotations

import io

import pytest

from edline.buffer import LineStore, ensure_range_in_bounds
from edline.commands import ResolvedRange
from edline.errors import InvalidRangeError


def make_store(*lines: str) -> LineStore:
    return LineStore.from_lines(lines)


def test_from_text_drops_single_trailing_newline() -> None:
    assert LineStore.from_text("a\nb\n").snapshot() == ("a", "b")
    assert LineStore.from_text("a\n\n").snapshot() == ("a", "")
    assert len(LineStore.from_text("")) == 0


def test_insert_lines_before_anchor_and_append() -> None:
    store = make_store("a", "d")

    store.insert_lines(2, ["b", "c"])
    store.insert_lines(5, ["e"])

    assert store.snapshot() == ("a", "b", "c", "d", "e")
    assert store.dirty is True
    assert store.version == 2


def test_insert_lines_rejects_gap() -> None:
    store = make_store("a")

    with pytest.raises(IndexError):
        store.insert_lines(3, ["x"])


def test_delete_lines_inclusive() -> None:
    store = make_store("1", "2", "3", "4", "5")

    removed = store.delete_lines(2, 3)

    assert removed == 2
    assert store.snapshot() == ("1", "4", "5")


def test_bounds_checks() -> None:
    store = make_store("a", "b", "c")

    assert store.is_index_out_of_bounds(0)
    assert store.is_index_out_of_bounds(4)
    assert not store.is_index_out_of_bounds(3)
    assert store.is_range_out_of_bounds(ResolvedRange(3, 1))
    assert store.is_range_out_of_bounds(ResolvedRange(2, 4))
    assert not store.is_range_out_of_bounds(ResolvedRange(1, 3))


def test_ensure_range_in_bounds_reports_reversed_range() -> None:
    store = make_store("a", "b", "c")

    with pytest.raises(InvalidRangeError) as info:
        ensure_range_in_bounds(store, ResolvedRange(3, 1))

    assert info.value.range == ResolvedRange(3, 1)
    assert "reversed" in str(info.value)


def test_ensure_range_in_bounds_reports_empty_store() -> None:
    store = make_store()

    with pytest.raises(InvalidRangeError) as info:
        ensure_range_in_bounds(store, ResolvedRange(1, 0))

    assert "buffer is empty" in str(info.value)
    assert "reversed" not in str(info.value)


def test_line_range_slice() -> None:
    store = make_store("a", "b", "c")

    assert store.line_range(2, 3) == ("b", "c")


def test_stream_round_trip_clears_dirty_flag() -> None:
    store = LineStore.load_from(io.StringIO("one\ntwo\n"))
    store.insert_lines(3, ["three"])
    target = io.StringIO()

    store.write_to(target)

    assert target.getvalue() == "one\ntwo\nthree\n"
    assert store.dirty is False
