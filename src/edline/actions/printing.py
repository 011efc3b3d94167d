"""Actions that show lines, line numbers, and diagnostics."""

from __future__ import annotations

from edline.buffer import ensure_index_in_bounds, ensure_range_in_bounds
from edline.commands import (
    Debug,
    Jump,
    JumpNext,
    Print,
    PrintLineNumber,
    PrintStyle,
    Range,
    resolve_position,
)
from edline.modes.display import DisplayModel
from edline.modes.state import EditorContext


def print_range(context: EditorContext, command: Print) -> None:
    state = context.state
    resolved = ensure_range_in_bounds(state.store, state.resolve(command.range))
    context.bus.emit(
        "render", DisplayModel.from_store(state.store, resolved, command.style)
    )


def print_line_number(context: EditorContext, command: PrintLineNumber) -> None:
    # Only the end address is reported, and it is not bounds checked.
    resolved = context.state.resolve(command.range)
    context.bus.emit("message", str(resolved.end))


def jump_to(context: EditorContext, command: Jump) -> None:
    state = context.state
    target = resolve_position(command.range.end, state.cursor, len(state.store))
    state.cursor = ensure_index_in_bounds(state.store, target)
    _print_current_line(context)


def jump_next(context: EditorContext, command: JumpNext) -> None:
    del command
    state = context.state
    state.cursor = ensure_index_in_bounds(state.store, state.cursor + 1)
    _print_current_line(context)


def debug_state(context: EditorContext, command: Debug) -> None:
    state = context.state
    resolved = state.resolve(command.range)
    fields = {
        "range": str(resolved),
        "cursor": state.cursor,
        "mode": state.mode.name,
        "lines": len(state.store),
        "version": state.store.version,
        "dirty": state.store.dirty,
        "file": state.file_name or "-",
    }
    context.bus.emit("message", " ".join(f"{k}={v}" for k, v in fields.items()))


def _print_current_line(context: EditorContext) -> None:
    print_range(context, Print(Range.current_line(), PrintStyle.NORMAL))


__all__ = [
    "print_range",
    "print_line_number",
    "jump_to",
    "jump_next",
    "debug_state",
]
