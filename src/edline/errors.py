"""Error hierarchy shared by the parser, resolver, and interpreter."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    PARSE = "parse error"
    IO = "io error"
    INVALID_RANGE = "invalid range"
    UNIMPLEMENTED_COMMAND = "unimplemented command"
    UNIMPLEMENTED_ACTION = "unimplemented action"
    UNSUPPORTED = "unsupported operation"
    UNKNOWN = "unknown"


class EditorError(Exception):
    """Recoverable editor failure; the input loop reports it and carries on."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.kind.value}: {self.detail}"
        return self.kind.value


class ParseError(EditorError):
    kind = ErrorKind.PARSE


class EditorIOError(EditorError):
    """Raised when a file cannot be opened, read, or written."""

    kind = ErrorKind.IO

    def __init__(self, detail: str, *, path: Optional[str] = None) -> None:
        super().__init__(detail)
        self.path = path

    @classmethod
    def from_os_error(
        cls, exc: OSError, *, path: Optional[str] = None
    ) -> "EditorIOError":
        reason = exc.strerror or str(exc)
        detail = f"{path}: {reason}" if path else reason
        return cls(detail, path=path)


class InvalidRangeError(EditorError):
    kind = ErrorKind.INVALID_RANGE

    def __init__(self, range_: object, detail: str = "") -> None:
        super().__init__(detail or str(range_))
        self.range = range_


class UnimplementedCommandError(EditorError):
    kind = ErrorKind.UNIMPLEMENTED_COMMAND

    def __init__(self, command: object) -> None:
        super().__init__(repr(command))
        self.command = command


class UnimplementedActionError(EditorError):
    kind = ErrorKind.UNIMPLEMENTED_ACTION

    def __init__(self, event: object) -> None:
        super().__init__(repr(event))
        self.event = event


class UnsupportedOperationError(EditorError):
    kind = ErrorKind.UNSUPPORTED


class UnknownError(EditorError):
    kind = ErrorKind.UNKNOWN


class ModeRoutingError(RuntimeError):
    """Raised when input reaches the interpreter in the wrong mode.

    Signals a broken contract in the input routing layer. It is not an
    ``EditorError`` and the input loop never catches it.
    """

    def __init__(self, message: str, *, mode: Optional[str] = None) -> None:
        super().__init__(message)
        self.mode = mode


__all__ = [
    "ErrorKind",
    "EditorError",
    "ParseError",
    "EditorIOError",
    "InvalidRangeError",
    "UnimplementedCommandError",
    "UnimplementedActionError",
    "UnsupportedOperationError",
    "UnknownError",
    "ModeRoutingError",
]
