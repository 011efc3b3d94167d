"""Line-at-a-time console front end and the ``edline`` entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, Sequence, TextIO

from edline.config import EditorConfig
from edline.errors import EditorError
from edline.interpreter import Interpreter
from edline.modes import CommandMode, DisplayModel
from edline.runtime import telemetry


class ConsoleFrontend:
    """Reads input lines from a stream and writes editor output to another."""

    def __init__(
        self,
        interpreter: Interpreter,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        prompt: str = "",
    ) -> None:
        self.interpreter = interpreter
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.prompt = prompt
        bus = interpreter.bus
        bus.subscribe("render", self._on_render)
        bus.subscribe("message", self._on_message)

    def run(self) -> None:
        self.interpreter.run(self._input_lines(), on_error=self.report_error)

    def report_error(self, error: EditorError) -> None:
        self._write(f"? {error}")

    def _input_lines(self) -> Iterator[str]:
        while True:
            if self.prompt and isinstance(self.interpreter.state.mode, CommandMode):
                self.stdout.write(self.prompt)
                self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                return
            yield line

    def _on_render(self, payload: object) -> None:
        if isinstance(payload, DisplayModel):
            for line in payload.render():
                self._write(line)

    def _on_message(self, payload: object) -> None:
        self._write(str(payload))

    def _write(self, line: str) -> None:
        self.stdout.write(f"{line}\n")
        self.stdout.flush()


def build_interpreter(
    path: Optional[str], config: EditorConfig, *, stdout: TextIO
) -> Interpreter:
    """Load ``path`` if given; a file that cannot be read leaves an empty store."""

    if path is None:
        return Interpreter(insert_terminator=config.insert_terminator)
    try:
        return Interpreter.from_path(path, insert_terminator=config.insert_terminator)
    except EditorError as exc:
        stdout.write(f"? {exc}\n")
        interpreter = Interpreter(insert_terminator=config.insert_terminator)
        interpreter.state.file_name = path
        return interpreter


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="edline", description="Line-oriented text editor."
    )
    parser.add_argument("file", nargs="?", help="File to load at startup")
    parser.add_argument(
        "-p",
        "--prompt",
        default=None,
        help="Prompt shown before each command (default: $EDLINE_PROMPT or none)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset (default: $EDLINE_LOG_PRESET or env-driven)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = EditorConfig.from_env().override(
        prompt=args.prompt, log_preset=args.log_preset
    )
    if config.log_preset:
        telemetry.configure(preset=config.log_preset)

    interpreter = build_interpreter(args.file, config, stdout=sys.stdout)
    ConsoleFrontend(interpreter, prompt=config.prompt).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
