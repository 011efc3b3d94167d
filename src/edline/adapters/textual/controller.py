"""Adapter that wires the interpreter and its bus into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from edline.errors import EditorError
from edline.interpreter import Interpreter
from edline.modes import DisplayModel


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    write_lines: Callable[[List[str]], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEdAdapter:
    """Bridges submitted input lines and bus events to a Textual surface."""

    def __init__(self, interpreter: Interpreter, hooks: TextualUIHooks) -> None:
        self.interpreter = interpreter
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_status()

    def submit_line(self, raw: str) -> bool:
        """Apply one input line; returns ``False`` once the editor has quit."""

        self._log_state("input ->", text=raw)
        try:
            self.interpreter.feed(raw)
        except EditorError as exc:
            self.hooks.write_lines([f"? {exc}"])
            self._log_state("error <-", error=str(exc))
        self._refresh_status()
        return self.interpreter.running

    def _subscribe_events(self) -> None:
        bus = self.interpreter.bus
        bus.subscribe("render", self._on_render)
        bus.subscribe("message", self._on_message)
        for event in ("mode.switch", "file.read", "file.written", "editor.quit"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _on_render(self, payload: object) -> None:
        if isinstance(payload, DisplayModel):
            self.hooks.write_lines(payload.render())

    def _on_message(self, payload: object) -> None:
        self.hooks.write_lines([str(payload)])

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_status(self) -> None:
        state = self.interpreter.state
        name = state.file_name or "[no file]"
        marker = " [+]" if state.store.dirty else ""
        self.hooks.update_status(
            f"{state.mode.name.upper()} | {name}{marker} | "
            f"line {state.cursor}/{len(state.store)}"
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.interpreter.state
        return {
            "mode": state.mode.name,
            "cursor": state.cursor,
            "lines": len(state.store),
            "version": state.store.version,
        }


__all__ = ["TextualEdAdapter", "TextualUIHooks"]
