from __future__ import annotations

from typing import List

from edline.adapters.textual import TextualEdAdapter, TextualUIHooks
from edline.buffer import LineStore
from edline.interpreter import Interpreter
from edline.modes import EditorState


def make_interpreter(*lines: str) -> Interpreter:
    return Interpreter(EditorState(store=LineStore.from_lines(lines)))


def test_adapter_writes_rendered_lines_and_status() -> None:
    written: List[str] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        write_lines=written.extend,
        update_status=statuses.append,
    )
    adapter = TextualEdAdapter(make_interpreter("a", "b"), hooks)

    adapter.submit_line(",n")

    assert written == ["1\ta", "2\tb"]
    assert statuses[-1].startswith("COMMAND")


def test_adapter_reports_errors_inline() -> None:
    written: List[str] = []
    hooks = TextualUIHooks(write_lines=written.extend)
    adapter = TextualEdAdapter(make_interpreter(), hooks)

    still_running = adapter.submit_line("e")

    assert still_running is True
    assert written and written[0].startswith("? parse error")


def test_adapter_relays_mode_events() -> None:
    events: List[tuple[str, object | None]] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        write_lines=lambda lines: None,
        update_status=statuses.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualEdAdapter(make_interpreter(), hooks)

    adapter.submit_line("i")
    assert statuses[-1].startswith("INSERT")
    adapter.submit_line("text")
    adapter.submit_line(".")

    assert ("mode.switch", "insert") in events
    assert ("mode.switch", "command") in events
    assert "[+]" in statuses[-1]


def test_adapter_signals_quit() -> None:
    hooks = TextualUIHooks(write_lines=lambda lines: None)
    adapter = TextualEdAdapter(make_interpreter(), hooks)

    assert adapter.submit_line("q") is False


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(write_lines=lambda lines: None, log=logs.append)
    adapter = TextualEdAdapter(make_interpreter("a"), hooks)

    adapter.submit_line("1")

    assert any(line.startswith("input ->") for line in logs)
