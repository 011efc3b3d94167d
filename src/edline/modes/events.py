"""Input events delivered to the interpreter by the routing layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from edline.commands import Command


@dataclass(frozen=True, slots=True)
class CommandInput:
    command: Command


@dataclass(frozen=True, slots=True)
class InsertLine:
    text: str


@dataclass(frozen=True, slots=True)
class InsertEnd:
    pass


InputEvent = Union[CommandInput, InsertLine, InsertEnd]


__all__ = ["CommandInput", "InsertLine", "InsertEnd", "InputEvent"]
