"""Actions that load the store from disk and write it back."""

from __future__ import annotations

import os
from typing import Union

from edline.buffer import LineStore
from edline.commands import Edit, Write
from edline.errors import EditorIOError, UnsupportedOperationError
from edline.modes.state import EditorContext
from edline.runtime import telemetry

PathLike = Union[str, "os.PathLike[str]"]


def read_store(path: PathLike) -> LineStore:
    name = os.fspath(path)
    try:
        with open(name, encoding="utf-8") as stream:
            store = LineStore.load_from(stream)
    except OSError as exc:
        raise EditorIOError.from_os_error(exc, path=name) from exc
    except UnicodeDecodeError as exc:
        raise EditorIOError(f"{name}: not valid UTF-8 text", path=name) from exc
    telemetry.record_event("file.read", data={"path": name, "lines": len(store)})
    return store


def write_store(store: LineStore, path: PathLike) -> None:
    """Write ``store`` to ``path``, leaving the target untouched on failure."""

    name = os.fspath(path)
    # Encode before opening: opening with "w" truncates the target.
    try:
        data = store.to_text().encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EditorIOError(
            f"{name}: line cannot be encoded as UTF-8", path=name
        ) from exc
    try:
        with open(name, "wb") as stream:
            stream.write(data)
    except OSError as exc:
        raise EditorIOError.from_os_error(exc, path=name) from exc
    store.mark_clean()
    telemetry.record_event("file.written", data={"path": name, "lines": len(store)})


def edit_file(context: EditorContext, command: Edit) -> None:
    store = read_store(command.filename)
    state = context.state
    state.store = store
    state.cursor = 1
    state.file_name = command.filename
    context.bus.emit("file.read", {"path": command.filename, "lines": len(store)})


def write_file(context: EditorContext, command: Write) -> None:
    state = context.state
    target = command.filename or state.file_name
    if target is None:
        raise UnsupportedOperationError("no current file name")

    write_store(state.store, target)
    state.file_name = target
    context.bus.emit("file.written", {"path": target, "lines": len(state.store)})


__all__ = ["read_store", "write_store", "edit_file", "write_file"]
