"""Line-oriented document storage backing the editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Iterable, List, Sequence

from edline.commands.models import ResolvedRange
from edline.runtime import telemetry


@dataclass(slots=True)
class LineStore:
    """Ordered, mutable list of text lines addressed from 1.

    Lines are kept without their trailing newline. ``version`` increases on
    every mutation and ``dirty`` stays set until the store is written out or
    reloaded.
    """

    _lines: List[str] = field(default_factory=list)
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineStore":
        return cls(_lines=list(lines))

    @classmethod
    def from_text(cls, text: str) -> "LineStore":
        if not text:
            return cls()
        if text.endswith("\n"):
            text = text[:-1]
        return cls(_lines=text.split("\n"))

    @classmethod
    def load_from(cls, stream: IO[str]) -> "LineStore":
        """Read newline-delimited text; ``OSError`` propagates to the caller."""

        return cls.from_lines(line.rstrip("\n") for line in stream)

    def to_text(self) -> str:
        """Join the lines back into newline-terminated text."""

        return "".join(f"{line}\n" for line in self._lines)

    def write_to(self, stream: IO[str]) -> None:
        stream.write(self.to_text())
        self.mark_clean()

    def mark_clean(self) -> None:
        self.dirty = False

    def __len__(self) -> int:
        return len(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def is_index_out_of_bounds(self, index: int) -> bool:
        return index < 1 or index > len(self._lines)

    def is_range_out_of_bounds(self, range_: ResolvedRange) -> bool:
        return (
            range_.is_reversed
            or self.is_index_out_of_bounds(range_.start)
            or self.is_index_out_of_bounds(range_.end)
        )

    def line_range(self, start: int, end: int) -> Sequence[str]:
        """Return lines ``start`` through ``end`` inclusive."""

        return tuple(self._lines[start - 1 : end])

    def insert_lines(self, at: int, lines: Iterable[str]) -> int:
        """Insert ``lines`` before line ``at``; ``at == len + 1`` appends."""

        if at < 1 or at > len(self._lines) + 1:
            raise IndexError(f"insert position {at} out of range")
        new_lines = list(lines)
        with telemetry.span(
            "store::insert_lines",
            component="store",
            metadata={"at": at, "count": len(new_lines)},
        ):
            self._lines[at - 1 : at - 1] = new_lines
            self._touch()
        return len(new_lines)

    def delete_lines(self, start: int, end: int) -> int:
        """Remove lines ``start`` through ``end`` inclusive."""

        with telemetry.span(
            "store::delete_lines",
            component="store",
            metadata={"start": start, "end": end},
        ):
            removed = len(self._lines[start - 1 : end])
            del self._lines[start - 1 : end]
            self._touch()
        return removed

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True
