"""Command handlers, one function per editor operation."""

from .core import quit_editor, switch_mode
from .editing import delete_lines, end_insert_mode, enter_insert_mode, insert_line
from .files import edit_file, read_store, write_file, write_store
from .printing import (
    debug_state,
    jump_next,
    jump_to,
    print_line_number,
    print_range,
)

__all__ = [
    "quit_editor",
    "switch_mode",
    "delete_lines",
    "end_insert_mode",
    "enter_insert_mode",
    "insert_line",
    "edit_file",
    "read_store",
    "write_file",
    "write_store",
    "debug_state",
    "jump_next",
    "jump_to",
    "print_line_number",
    "print_range",
]
