from __future__ import annotations

import pytest

from edline.commands import Delete, Line, PrintStyle, Range, ResolvedRange
from edline.errors import ParseError
from edline.modes import (
    CommandInput,
    CommandMode,
    DisplayModel,
    InsertEnd,
    InsertLine,
    InsertMode,
    ModeBus,
    PendingInsertion,
    route_line,
)


def make_insert_mode() -> InsertMode:
    return InsertMode(PendingInsertion(anchor=1))


def test_command_mode_parses_lines() -> None:
    event = route_line("3d\n", CommandMode())

    assert event == CommandInput(Delete(Range.single(Line(3))))


def test_command_mode_propagates_parse_errors() -> None:
    with pytest.raises(ParseError):
        route_line("3dx", CommandMode())


def test_insert_mode_passes_text_verbatim() -> None:
    mode = make_insert_mode()

    assert route_line("  3d p\n", mode) == InsertLine("  3d p")
    assert route_line("\n", mode) == InsertLine("")


def test_insert_mode_terminator_ends_insertion() -> None:
    mode = make_insert_mode()

    assert route_line(".\n", mode) == InsertEnd()
    assert route_line(". ", mode) == InsertLine(". ")
    assert route_line("EOF", mode, terminator="EOF") == InsertEnd()


def test_mode_names() -> None:
    assert CommandMode().name == "command"
    assert make_insert_mode().name == "insert"


def test_display_model_rendering() -> None:
    lines = ("first", "second")
    range_ = ResolvedRange(4, 5)

    assert DisplayModel(range_, lines).render() == ["first", "second"]
    assert DisplayModel(range_, lines, PrintStyle.NUMBERED).render() == [
        "4\tfirst",
        "5\tsecond",
    ]
    assert DisplayModel(range_, lines, PrintStyle.SHOW_LINE_ENDINGS).render() == [
        "first$",
        "second$",
    ]


def test_mode_bus_delivers_to_subscribers() -> None:
    bus = ModeBus()
    seen: list[object] = []
    bus.subscribe("message", seen.append)

    bus.emit("message", "hello")
    bus.unsubscribe("message", seen.append)
    bus.emit("message", "ignored")

    assert seen == ["hello"]
