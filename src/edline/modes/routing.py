"""Turn raw input lines into events according to the active mode."""

from __future__ import annotations

from edline.commands import parse

from .events import CommandInput, InputEvent, InsertEnd, InsertLine
from .state import InsertMode, Mode


def route_line(raw: str, mode: Mode, *, terminator: str = ".") -> InputEvent:
    """Parse ``raw`` in command mode; pass it through verbatim in insert mode.

    In insert mode a line equal to ``terminator`` ends the insertion.
    """

    text = raw.rstrip("\r\n")
    if isinstance(mode, InsertMode):
        if text == terminator:
            return InsertEnd()
        return InsertLine(text)
    return CommandInput(parse(text))


__all__ = ["route_line"]
