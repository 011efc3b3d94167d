"""Mode transitions and session control shared by the other actions."""

from __future__ import annotations

from edline.commands import Quit
from edline.modes.state import EditorContext, Mode
from edline.runtime import telemetry


def switch_mode(context: EditorContext, mode: Mode) -> None:
    context.state.mode = mode
    telemetry.record_event("mode.switch", data={"mode": mode.name})
    context.bus.emit("mode.switch", mode.name)


def quit_editor(context: EditorContext, command: Quit) -> None:
    del command
    context.state.running = False
    telemetry.record_event("editor.quit", data={"dirty": context.state.store.dirty})
    context.bus.emit("editor.quit", None)


__all__ = ["switch_mode", "quit_editor"]
