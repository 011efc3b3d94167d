"""Resolution of symbolic positions and ranges into line indices."""

from __future__ import annotations

from .models import Current, Last, Line, Position, Range, ResolvedRange


def resolve_position(position: Position, cursor: int, store_len: int) -> int:
    """Return the 1-based index ``position`` names.

    Never fails: out-of-bounds indices are left for the consuming command to
    reject.
    """

    if isinstance(position, Line):
        return position.number
    if isinstance(position, Current):
        return cursor
    if isinstance(position, Last):
        return store_len
    raise TypeError(f"Unsupported position {position!r}")


def resolve_range(range_: Range, cursor: int, store_len: int) -> ResolvedRange:
    # No reordering: a reversed result is for the caller to reject.
    return ResolvedRange(
        start=resolve_position(range_.start, cursor, store_len),
        end=resolve_position(range_.end, cursor, store_len),
    )


__all__ = ["resolve_position", "resolve_range"]
