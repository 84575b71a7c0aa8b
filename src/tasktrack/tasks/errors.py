# src/tasktrack/tasks/errors.py

"""
Error kinds raised by the task store.

The store never decides whether a failure is fatal; callers (cli/commands.py) do.
"""

from __future__ import annotations

from pathlib import Path


class TaskStoreError(Exception):
    """Base class for every store failure."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class StoreNotFoundError(TaskStoreError):
    """The store file does not exist."""


class StoreIOError(TaskStoreError):
    """An OS-level failure reading or removing a file."""


class StoreWriteError(StoreIOError):
    """The store file could not be written."""


class StoreParseError(TaskStoreError):
    """The store file contents are not a well-formed task list."""


class TaskIndexError(TaskStoreError):
    """A positional index does not point at a stored task."""

    def __init__(self, index: int, length: int, *, path: str | Path | None = None) -> None:
        super().__init__(f"Task index {index} is out of bounds.", path=path)
        self.index = index
        self.length = length
