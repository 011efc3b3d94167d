"""Dataclasses describing addresses, ranges, and parsed commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class Line:
    """Absolute 1-based line number."""

    number: int

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError("line numbers start at 1")

    def __str__(self) -> str:
        return str(self.number)


@dataclass(frozen=True, slots=True)
class Current:
    def __str__(self) -> str:
        return "."


@dataclass(frozen=True, slots=True)
class Last:
    def __str__(self) -> str:
        return "$"


Position = Union[Line, Current, Last]

CURRENT = Current()
LAST = Last()


@dataclass(frozen=True, slots=True)
class Range:
    """Unresolved inclusive span of two positions."""

    start: Position
    end: Position

    @classmethod
    def single(cls, position: Position) -> "Range":
        return cls(position, position)

    @classmethod
    def current_line(cls) -> "Range":
        return cls(CURRENT, CURRENT)

    @classmethod
    def whole_buffer(cls) -> "Range":
        return cls(Line(1), LAST)

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start},{self.end}"


@dataclass(frozen=True, slots=True)
class ResolvedRange:
    """Concrete 1-based line indices; ``start > end`` is representable."""

    start: int
    end: int

    @property
    def is_reversed(self) -> bool:
        return self.start > self.end

    def __len__(self) -> int:
        return max(0, self.end - self.start + 1)

    def __str__(self) -> str:
        return f"{self.start},{self.end}"


class PrintStyle(str, Enum):
    NORMAL = "normal"
    NUMBERED = "numbered"
    SHOW_LINE_ENDINGS = "line_endings"


@dataclass(frozen=True, slots=True)
class EnterInsert:
    range: Range


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Debug:
    range: Range


@dataclass(frozen=True, slots=True)
class Jump:
    range: Range


@dataclass(frozen=True, slots=True)
class Delete:
    range: Range


@dataclass(frozen=True, slots=True)
class JumpNext:
    pass


@dataclass(frozen=True, slots=True)
class Print:
    range: Range
    style: PrintStyle = PrintStyle.NORMAL


@dataclass(frozen=True, slots=True)
class PrintLineNumber:
    range: Range


@dataclass(frozen=True, slots=True)
class Edit:
    filename: str

    def __post_init__(self) -> None:
        if not self.filename:
            raise ValueError("filename cannot be empty")


@dataclass(frozen=True, slots=True)
class Write:
    filename: Optional[str] = None


Command = Union[
    EnterInsert,
    Quit,
    Debug,
    Jump,
    Delete,
    JumpNext,
    Print,
    PrintLineNumber,
    Edit,
    Write,
]


__all__ = [
    "Line",
    "Current",
    "Last",
    "Position",
    "CURRENT",
    "LAST",
    "Range",
    "ResolvedRange",
    "PrintStyle",
    "EnterInsert",
    "Quit",
    "Debug",
    "Jump",
    "Delete",
    "JumpNext",
    "Print",
    "PrintLineNumber",
    "Edit",
    "Write",
    "Command",
]
