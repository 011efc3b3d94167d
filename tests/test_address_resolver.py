from __future__ import annotations

from edline.commands import (
    CURRENT,
    LAST,
    Line,
    Range,
    ResolvedRange,
    resolve_position,
    resolve_range,
)


def test_line_resolves_to_itself() -> None:
    store_len = 6
    for number in range(1, store_len + 1):
        assert resolve_position(Line(number), 3, store_len) == number


def test_line_beyond_store_is_not_rejected() -> None:
    assert resolve_position(Line(40), 1, 2) == 40


def test_current_and_last() -> None:
    for cursor, store_len in [(1, 0), (4, 9), (10, 10)]:
        assert resolve_position(CURRENT, cursor, store_len) == cursor
        assert resolve_position(LAST, cursor, store_len) == store_len


def test_range_resolution_keeps_order() -> None:
    resolved = resolve_range(Range(Line(3), Line(1)), 2, 5)

    assert resolved == ResolvedRange(3, 1)
    assert resolved.is_reversed
    assert len(resolved) == 0


def test_range_resolution_is_repeatable() -> None:
    range_ = Range(CURRENT, LAST)

    first = resolve_range(range_, 2, 7)
    second = resolve_range(range_, 2, 7)

    assert first == second == ResolvedRange(2, 7)
