"""Actions that change the line store: insertion and deletion."""

from __future__ import annotations

from edline.buffer import ensure_range_in_bounds
from edline.commands import Delete, EnterInsert, ResolvedRange, resolve_position
from edline.errors import InvalidRangeError, ModeRoutingError
from edline.modes.state import (
    CommandMode,
    EditorContext,
    InsertMode,
    PendingInsertion,
)

from .core import switch_mode


def enter_insert_mode(context: EditorContext, command: EnterInsert) -> None:
    """Fix the insertion anchor from the range end and switch to insert mode.

    The anchor is resolved here, against the cursor as it is now, and never
    re-resolved when the insertion ends.
    """

    state = context.state
    if isinstance(state.mode, InsertMode):
        raise ModeRoutingError("enter insert while already inserting", mode="insert")

    store_len = len(state.store)
    anchor = resolve_position(command.range.end, state.cursor, store_len)
    if anchor == 0:
        # only reachable through `$` on an empty store
        anchor = 1
    if anchor > store_len + 1:
        raise InvalidRangeError(
            ResolvedRange(anchor, anchor), f"cannot insert at line {anchor}"
        )

    switch_mode(context, InsertMode(PendingInsertion(anchor=anchor)))


def insert_line(context: EditorContext, text: str) -> None:
    mode = context.state.mode
    if not isinstance(mode, InsertMode):
        raise ModeRoutingError("text line outside insert mode", mode=mode.name)
    mode.pending.add_line(text)


def end_insert_mode(context: EditorContext) -> None:
    state = context.state
    mode = state.mode
    if not isinstance(mode, InsertMode):
        raise ModeRoutingError("insert end outside insert mode", mode=mode.name)

    pending = mode.pending
    count = state.store.insert_lines(pending.anchor, pending.lines)
    state.cursor = pending.anchor + count
    switch_mode(context, CommandMode())


def delete_lines(context: EditorContext, command: Delete) -> None:
    state = context.state
    resolved = ensure_range_in_bounds(state.store, state.resolve(command.range))
    state.store.delete_lines(resolved.start, resolved.end)

    remaining = len(state.store)
    if resolved.start <= remaining:
        state.cursor = resolved.start
    else:
        state.cursor = max(remaining, 1)


__all__ = [
    "enter_insert_mode",
    "insert_line",
    "end_insert_mode",
    "delete_lines",
]
