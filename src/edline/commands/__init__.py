"""Command grammar: address models, resolution, and parsing."""

from .address import resolve_position, resolve_range
from .models import (
    CURRENT,
    LAST,
    Command,
    Current,
    Debug,
    Delete,
    Edit,
    EnterInsert,
    Jump,
    JumpNext,
    Last,
    Line,
    Position,
    Print,
    PrintLineNumber,
    PrintStyle,
    Quit,
    Range,
    ResolvedRange,
    Write,
)
from .parser import parse, parse_range

__all__ = [
    "CURRENT",
    "LAST",
    "Command",
    "Current",
    "Debug",
    "Delete",
    "Edit",
    "EnterInsert",
    "Jump",
    "JumpNext",
    "Last",
    "Line",
    "Position",
    "Print",
    "PrintLineNumber",
    "PrintStyle",
    "Quit",
    "Range",
    "ResolvedRange",
    "Write",
    "parse",
    "parse_range",
    "resolve_position",
    "resolve_range",
]
