"""Render requests published for printed line ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from edline.buffer import LineStore
from edline.commands import PrintStyle, ResolvedRange

LINE_END_MARKER = "$"


@dataclass(frozen=True, slots=True)
class DisplayModel:
    range: ResolvedRange
    lines: Sequence[str]
    style: PrintStyle = PrintStyle.NORMAL

    @classmethod
    def from_store(
        cls, store: LineStore, range_: ResolvedRange, style: PrintStyle
    ) -> "DisplayModel":
        return cls(
            range=range_,
            lines=store.line_range(range_.start, range_.end),
            style=style,
        )

    def render(self) -> List[str]:
        if self.style is PrintStyle.NUMBERED:
            return [
                f"{number}\t{text}"
                for number, text in enumerate(self.lines, start=self.range.start)
            ]
        if self.style is PrintStyle.SHOW_LINE_ENDINGS:
            return [f"{text}{LINE_END_MARKER}" for text in self.lines]
        return list(self.lines)


__all__ = ["DisplayModel", "LINE_END_MARKER"]
