"""Editor modes, input events, routing, and render requests."""

from .bus import ModeBus
from .display import DisplayModel
from .events import CommandInput, InputEvent, InsertEnd, InsertLine
from .routing import route_line
from .state import (
    CommandMode,
    EditorContext,
    EditorState,
    InsertMode,
    Mode,
    PendingInsertion,
)

__all__ = [
    "ModeBus",
    "DisplayModel",
    "CommandInput",
    "InputEvent",
    "InsertEnd",
    "InsertLine",
    "route_line",
    "CommandMode",
    "EditorContext",
    "EditorState",
    "InsertMode",
    "Mode",
    "PendingInsertion",
]
