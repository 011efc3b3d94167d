"""Command-line parsing: optional range, one-character code, optional argument."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from edline.errors import ParseError
from edline.runtime import telemetry

from .models import (
    CURRENT,
    LAST,
    Command,
    Debug,
    Delete,
    Edit,
    EnterInsert,
    Jump,
    JumpNext,
    Line,
    Position,
    Print,
    PrintLineNumber,
    PrintStyle,
    Quit,
    Range,
    Write,
)

COMMAND_RE = re.compile(
    r"^(?P<range>[%.,$\d]+)?(?P<code>[a-zA-Z?=])?(?: (?P<arg>.*))?$"
)


@dataclass(slots=True)
class CommandDraft:
    """Raw pieces matched from one input line, before validation."""

    code: Optional[str] = None
    range: Optional[Range] = None
    arg: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.code is None and self.range is None and self.arg is None


def parse_position(text: str) -> Position:
    if text == ".":
        return CURRENT
    if text == "$":
        return LAST
    if text.isdigit():
        number = int(text)
        if number < 1:
            raise ParseError(f"invalid address '{text}'")
        return Line(number)
    raise ParseError(f"invalid address '{text}'")


def parse_range(text: str) -> Range:
    """Parse an address expression such as ``3``, ``.,$``, ``,5`` or ``%``."""

    if text in {"%", ","}:
        return Range.whole_buffer()
    if "%" in text:
        raise ParseError(f"invalid range '{text}'")

    parts = text.split(",")
    if len(parts) > 2:
        raise ParseError(f"invalid range '{text}'")
    if len(parts) == 1:
        return Range.single(parse_position(parts[0]))

    first, second = parts
    if not first:
        return Range(Line(1), parse_position(second))
    start = parse_position(first)
    if not second:
        return Range.single(start)
    return Range(start, parse_position(second))


def tokenize(raw: str) -> CommandDraft:
    text = raw.rstrip("\r\n")
    if not text:
        return CommandDraft()

    match = COMMAND_RE.match(text)
    if match is None:
        raise ParseError(f"syntax error in '{text}'")

    range_text = match.group("range")
    arg = match.group("arg")
    if arg is not None:
        arg = arg.strip() or None
    return CommandDraft(
        code=match.group("code"),
        range=parse_range(range_text) if range_text else None,
        arg=arg,
    )


Builder = Callable[[Range, Optional[str]], Command]


def _no_arg(factory: Callable[[Range], Command]) -> Builder:
    def build(range_: Range, arg: Optional[str]) -> Command:
        if arg is not None:
            raise ParseError("no argument expected")
        return factory(range_)

    return build


def _build_edit(range_: Range, arg: Optional[str]) -> Command:
    del range_
    if arg is None:
        raise ParseError("argument expected")
    return Edit(arg)


def _build_write(range_: Range, arg: Optional[str]) -> Command:
    del range_
    return Write(arg)


_COMMAND_BUILDERS: Dict[str, Builder] = {
    "d": _no_arg(Delete),
    "i": _no_arg(EnterInsert),
    "q": _no_arg(lambda _range: Quit()),
    "p": _no_arg(lambda r: Print(r, PrintStyle.NORMAL)),
    "n": _no_arg(lambda r: Print(r, PrintStyle.NUMBERED)),
    "l": _no_arg(lambda r: Print(r, PrintStyle.SHOW_LINE_ENDINGS)),
    "=": _no_arg(PrintLineNumber),
    "?": _no_arg(Debug),
    "w": _build_write,
    "e": _build_edit,
}


def build_command(draft: CommandDraft) -> Command:
    if draft.is_empty:
        return JumpNext()

    range_ = draft.range or Range.current_line()
    if draft.code is None:
        return _no_arg(Jump)(range_, draft.arg)

    builder = _COMMAND_BUILDERS.get(draft.code)
    if builder is None:
        raise ParseError(f"unknown command '{draft.code}'")
    return builder(range_, draft.arg)


def parse(raw: str) -> Command:
    """Parse one line of command-mode input.

    The empty line is ``JumpNext``; an address with no code is ``Jump``.
    Raises ``ParseError`` for malformed syntax, unknown codes, or a missing
    or unexpected argument.
    """

    with telemetry.span(
        "commands::parse", component="commands", metadata={"length": len(raw)}
    ) as handle:
        command = build_command(tokenize(raw))
        handle.add_metadata("command", type(command).__name__)
        return command


__all__ = [
    "COMMAND_RE",
    "CommandDraft",
    "build_command",
    "parse",
    "parse_position",
    "parse_range",
    "tokenize",
]
