# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from .errors import (
    StoreIOError,
    StoreNotFoundError,
    StoreParseError,
    StoreWriteError,
    TaskIndexError,
)
from .task_models import DEFAULT_DEADLINE, DEFAULT_NAME, DEFAULT_PRIORITY, Task

logger = logging.getLogger(__name__)

DEFAULT_STORE_FILE = "tasks.json"


class TaskStore:
    """
    JSON-file task store.

    The whole collection lives in one pretty-printed JSON array. Every operation
    loads it fresh, mutates it in memory and rewrites the entire file.

    Not safe for concurrent writers: two processes racing on one file are last-writer-wins.
    """

    def __init__(self, path: str | Path = DEFAULT_STORE_FILE) -> None:
        self._path = Path(path)
        logger.debug("TaskStore path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def load(self) -> list[Task]:
        """
        Read and decode the store.

        Raises StoreNotFoundError when the file is absent, StoreIOError when it can't be read
        and StoreParseError when its contents are not a task list.
        """
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError as e:
            raise StoreNotFoundError(f"{self._path}: {e.strerror}", path=self._path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise StoreIOError(f"{self._path}: {e}", path=self._path) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreParseError(f"{self._path}: invalid JSON: {e}", path=self._path) from e

        if not isinstance(data, list):
            raise StoreParseError(
                f"{self._path}: expected a JSON array, got {type(data).__name__}",
                path=self._path,
            )

        tasks: list[Task] = []
        for i, item in enumerate(data):
            try:
                tasks.append(Task.from_dict(item))
            except ValueError as e:
                raise StoreParseError(f"{self._path}: task #{i}: {e}", path=self._path) from e

        logger.debug("Loaded %d task(s) from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Overwrite the store with the given collection."""
        json_str = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)

        # Write through a symlinked store so the link keeps pointing at the updated file.
        target = self._path.resolve()
        tmp = target.with_name(target.name + ".tmp")
        try:
            try:
                tmp.write_text(json_str, "utf-8")
            except PermissionError:
                # Read-only directory: the store file itself may still be writable.
                logger.debug("Cannot create %s, overwriting %s in place", tmp, target)
                target.write_text(json_str, "utf-8")
            else:
                os.replace(tmp, target)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StoreWriteError(f"{self._path}: failed to write: {e}", path=self._path) from e

        logger.debug("Saved %d task(s) to %s", len(tasks), self._path)

    # ---- public API ----

    def list_tasks(self) -> list[Task]:
        return self.load()

    def add_tasks(
        self,
        *,
        name: str | None = None,
        deadline: str = DEFAULT_DEADLINE,
        priority: str = DEFAULT_PRIORITY,
        count: int = 1,
    ) -> list[Task]:
        """
        Append `count` identical tasks to the end of the store.

        A missing store starts as an empty list. Any other load failure propagates,
        so an unreadable or malformed file is never overwritten.
        """
        if count < 1:
            raise ValueError("count must be a positive integer")

        try:
            tasks = self.load()
        except StoreNotFoundError:
            logger.warning("Store %s not found, starting a new one.", self._path)
            tasks = []

        new_tasks = [
            Task(name=DEFAULT_NAME if name is None else name, deadline=deadline, priority=priority)
            for _ in range(count)
        ]
        tasks.extend(new_tasks)
        self.save(tasks)

        logger.info("Added %d task(s) to %s (total=%d)", count, self._path, len(tasks))
        return new_tasks

    def remove_task(self, index: int) -> Task:
        """
        Remove the task at `index`, shifting later tasks one position earlier.

        Raises TaskIndexError (and writes nothing) when the index is out of range.
        """
        tasks = self.load()
        if index < 0 or index >= len(tasks):
            raise TaskIndexError(index, len(tasks), path=self._path)

        removed = tasks.pop(index)
        self.save(tasks)

        logger.info("Removed task index=%d from %s (total=%d)", index, self._path, len(tasks))
        return removed


def delete_store_file(path: str | Path) -> None:
    """
    Delete any file by path.

    Raises StoreNotFoundError if nothing is there and StoreIOError if removal fails.
    """
    # Messages echo the name as given; Path("") would silently mean the working directory.
    name = str(path)
    p = Path(name)
    if not name or not p.exists():
        raise StoreNotFoundError(f"File {name} does not exist.", path=p if name else None)

    try:
        p.unlink()
    except OSError as e:
        raise StoreIOError(f"Error deleting the file: {e}", path=p) from e

    logger.info("Deleted file %s", name)
