"""Editor state: cursor, line store, and the Command/Insert mode union."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Union

from edline.buffer import LineStore
from edline.commands import Range, ResolvedRange, resolve_range

from .bus import ModeBus


@dataclass(slots=True)
class PendingInsertion:
    """Lines collected in insert mode, waiting to land at ``anchor``."""

    anchor: int
    lines: List[str] = field(default_factory=list)

    def add_line(self, text: str) -> None:
        self.lines.append(text)


@dataclass(frozen=True, slots=True)
class CommandMode:
    name: ClassVar[str] = "command"


@dataclass(slots=True)
class InsertMode:
    pending: PendingInsertion
    name: ClassVar[str] = "insert"


Mode = Union[CommandMode, InsertMode]


@dataclass(slots=True)
class EditorState:
    """Everything one editing session owns.

    ``cursor`` is 1-based and never exceeds ``len(store) + 1``.
    """

    store: LineStore = field(default_factory=LineStore)
    cursor: int = 1
    mode: Mode = field(default_factory=CommandMode)
    running: bool = True
    file_name: Optional[str] = None

    def resolve(self, range_: Range) -> ResolvedRange:
        return resolve_range(range_, self.cursor, len(self.store))


@dataclass(slots=True)
class EditorContext:
    """State plus the bus handlers publish output on."""

    state: EditorState
    bus: ModeBus = field(default_factory=ModeBus)


__all__ = [
    "CommandMode",
    "EditorContext",
    "EditorState",
    "InsertMode",
    "Mode",
    "PendingInsertion",
]
