"""Interpreter owning editor state and dispatching input events."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Mapping, Optional

from edline.actions import core as core_actions
from edline.actions import editing as editing_actions
from edline.actions import files as file_actions
from edline.actions import printing as printing_actions
from edline.commands import (
    Command,
    Debug,
    Delete,
    Edit,
    EnterInsert,
    Jump,
    JumpNext,
    Print,
    PrintLineNumber,
    Quit,
    Write,
)
from edline.errors import (
    EditorError,
    ModeRoutingError,
    UnimplementedActionError,
    UnimplementedCommandError,
    UnknownError,
)
from edline.modes import (
    CommandInput,
    EditorContext,
    EditorState,
    InputEvent,
    InsertEnd,
    InsertLine,
    InsertMode,
    ModeBus,
    route_line,
)
from edline.runtime import telemetry

CommandHandler = Callable[[EditorContext, Command], None]
ErrorHandler = Callable[[EditorError], None]


_COMMAND_HANDLERS: Dict[type, CommandHandler] = {
    Quit: core_actions.quit_editor,
    EnterInsert: editing_actions.enter_insert_mode,
    Delete: editing_actions.delete_lines,
    Print: printing_actions.print_range,
    PrintLineNumber: printing_actions.print_line_number,
    Jump: printing_actions.jump_to,
    JumpNext: printing_actions.jump_next,
    Debug: printing_actions.debug_state,
    Edit: file_actions.edit_file,
    Write: file_actions.write_file,
}


class Interpreter:
    """Owns one ``EditorState`` and applies events to it one at a time."""

    def __init__(
        self,
        state: Optional[EditorState] = None,
        *,
        bus: Optional[ModeBus] = None,
        handlers: Optional[Mapping[type, CommandHandler]] = None,
        insert_terminator: str = ".",
    ) -> None:
        self.context = EditorContext(
            state=state or EditorState(), bus=bus or ModeBus()
        )
        self.handlers: Dict[type, CommandHandler] = dict(
            _COMMAND_HANDLERS if handlers is None else handlers
        )
        self.insert_terminator = insert_terminator
        self.logger = telemetry.get_logger("edline.interpreter")

    @classmethod
    def from_path(cls, path: str, **kwargs: object) -> "Interpreter":
        """Start a session with ``path`` loaded, as ``e path`` would."""

        state = EditorState(store=file_actions.read_store(path), file_name=path)
        return cls(state, **kwargs)  # type: ignore[arg-type]

    @property
    def state(self) -> EditorState:
        return self.context.state

    @property
    def bus(self) -> ModeBus:
        return self.context.bus

    @property
    def running(self) -> bool:
        return self.context.state.running

    @property
    def mode_name(self) -> str:
        return self.context.state.mode.name

    def feed(self, raw: str) -> None:
        """Route one raw input line through the active mode and apply it."""

        event = route_line(raw, self.state.mode, terminator=self.insert_terminator)
        self.handle_event(event)

    def handle_event(self, event: InputEvent) -> None:
        in_insert = isinstance(self.state.mode, InsertMode)

        if isinstance(event, CommandInput):
            if in_insert:
                raise ModeRoutingError(
                    "command received in insert mode", mode="insert"
                )
            self.execute(event.command)
        elif isinstance(event, InsertLine):
            editing_actions.insert_line(self.context, event.text)
        elif isinstance(event, InsertEnd):
            with telemetry.span("interpreter::InsertEnd", component="interpreter"):
                editing_actions.end_insert_mode(self.context)
        else:
            raise UnimplementedActionError(event)

    def execute(self, command: Command) -> None:
        handler = self.handlers.get(type(command))
        if handler is None:
            raise UnimplementedCommandError(command)

        name = type(command).__name__
        with telemetry.span(
            f"interpreter::{name}",
            component="interpreter",
            metadata={"cursor": self.state.cursor, "mode": self.mode_name},
        ):
            handler(self.context, command)

    def run(self, lines: Iterable[str], *, on_error: ErrorHandler) -> None:
        """Feed ``lines`` until they run out or a ``Quit`` is executed.

        Every ``EditorError`` is passed to ``on_error`` and the loop carries on.
        Any other failure inside a command is reported as ``UnknownError``;
        ``ModeRoutingError`` always propagates. Running out of input while
        inserting ends the insertion.
        """

        for raw in lines:
            try:
                self.feed(raw)
            except ModeRoutingError:
                raise
            except EditorError as exc:
                self.logger.debug(f"command failed: {exc}")
                on_error(exc)
            except Exception as exc:
                self.logger.error(f"unexpected failure on {raw!r}: {exc!r}")
                error = UnknownError(f"{type(exc).__name__}: {exc}")
                error.__cause__ = exc
                on_error(error)
            if not self.running:
                return

        if isinstance(self.state.mode, InsertMode):
            try:
                self.handle_event(InsertEnd())
            except EditorError as exc:
                on_error(exc)


__all__ = ["Interpreter", "CommandHandler"]
