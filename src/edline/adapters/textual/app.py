"""Executable Textual app that hosts the line editor."""

from __future__ import annotations

import argparse
from typing import Callable, List, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Input, RichLog, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use edline.adapters.textual.app"
    ) from exc

from edline.adapters.console import build_interpreter
from edline.config import EditorConfig
from edline.runtime import telemetry

from .controller import TextualEdAdapter, TextualUIHooks


class EdlineApp(App[None]):
    """Output log, status line, and a single input box."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#output {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, path: Optional[str] = None, config: EditorConfig) -> None:
        super().__init__()
        self._path = path
        self._config = config
        self.adapter: TextualEdAdapter | None = None
        self._output: RichLog | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._output = RichLog(id="output", wrap=False, markup=False)
        yield self._output
        self._status = Static("", id="status-line")
        yield self._status
        yield Input(placeholder="command", id="command-input")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            write_lines=self._write_lines,
            update_status=self._update_status,
        )
        interpreter = build_interpreter(
            self._path, self._config, stdout=_LogWriter(self._write_lines)
        )
        self.adapter = TextualEdAdapter(interpreter, hooks)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        value = event.value
        event.input.value = ""
        if not self.adapter.submit_line(value):
            self.exit()

    def _write_lines(self, lines: List[str]) -> None:
        if self._output:
            for line in lines:
                self._output.write(line)

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)


class _LogWriter:
    """File-like shim routing startup messages into the output log."""

    def __init__(self, write_lines: Callable[[List[str]], None]) -> None:
        self._write_lines = write_lines

    def write(self, text: str) -> int:
        self._write_lines([line for line in text.splitlines() if line])
        return len(text)

    def flush(self) -> None:
        return None


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="edline-tui", description="Run the line editor in a Textual UI."
    )
    parser.add_argument("file", nargs="?", help="File to load at startup")
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset (default: quiet, so logs stay off the screen)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    config = EditorConfig.from_env().override(log_preset=args.log_preset)
    telemetry.configure(preset=config.log_preset or "quiet")
    EdlineApp(path=args.file, config=config).run()


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
