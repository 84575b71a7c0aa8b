# src/tasktrack/cli/commands.py

"""
Command handlers.

Each handler runs one store operation and maps store errors onto the exit policy:
- reported-and-continue (message on stderr, exit 0): missing/unreadable store on
  list and remove, out-of-bounds index, deleting a missing file, failed deletion;
- fatal (exit 1): malformed store contents, failure to write the store, unreadable
  store on create.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from rich.text import Text

from ..core.state import AppState
from ..tasks.errors import (
    StoreIOError,
    StoreNotFoundError,
    StoreParseError,
    StoreWriteError,
    TaskIndexError,
    TaskStoreError,
)
from ..tasks.task_models import Task
from ..tasks.task_store import delete_store_file

CommandHandler = Callable[[AppState, argparse.Namespace], int]

EXIT_OK = 0
EXIT_FATAL = 1

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Name -> handler table; one command runs per invocation."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, help_text: str) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text

    def handle(self, state: AppState, name: str, args: argparse.Namespace) -> int:
        handler = self._handlers.get(name.lower())
        if handler is None:
            raise KeyError(f"Unknown command: {name}")
        logger.debug("Dispatching command=%s", name)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Commands (first match wins):"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def select_command(args: argparse.Namespace) -> str:
    """Pick the single command to run: delete > list > remove > create."""
    if getattr(args, "delete", None) is not None:
        return "delete"
    if getattr(args, "all", False):
        return "list"
    if getattr(args, "remove", None) is not None:
        return "remove"
    return "create"


def _fatal(state: AppState, err: TaskStoreError) -> int:
    logger.debug("Fatal store error: %s", err, exc_info=err)
    state.err_console.print(f"Fatal: {err}", markup=False)
    return EXIT_FATAL


def render_task(task: Task, index: int) -> Text:
    """One listing block: label, then one coloured line per field."""
    text = Text()
    text.append(f"Task {index + 1} (index {index}):", style="yellow")
    text.append("\nName: ")
    text.append(task.name, style="green")
    text.append("\nDeadline: ")
    text.append(task.deadline, style="red")
    text.append("\nPriority: ")
    text.append(task.priority, style="blue")
    return text


def cmd_create(state: AppState, args: argparse.Namespace) -> int:
    store = state.task_store
    try:
        store.add_tasks(
            name=args.name,
            deadline=args.deadline,
            priority=args.priority,
            count=args.count,
        )
    except (StoreParseError, StoreIOError) as e:
        # Unlike list/remove, an unreadable store is fatal here: it must not be overwritten.
        return _fatal(state, e)

    state.console.print(f"Tasks saved to {store.path}.", markup=False)
    return EXIT_OK


def cmd_list(state: AppState, args: argparse.Namespace) -> int:
    try:
        tasks = state.task_store.list_tasks()
    except (StoreNotFoundError, StoreIOError) as e:
        state.err_console.print(f"Error reading the task file: {e}", markup=False)
        return EXIT_OK
    except StoreParseError as e:
        return _fatal(state, e)

    for i, task in enumerate(tasks):
        state.console.print(render_task(task, i))
        state.console.print()
    return EXIT_OK


def cmd_remove(state: AppState, args: argparse.Namespace) -> int:
    index = args.remove
    try:
        state.task_store.remove_task(index)
    except StoreWriteError as e:
        return _fatal(state, e)
    except (StoreNotFoundError, StoreIOError) as e:
        # Nothing to mutate: report and abort without writing.
        state.err_console.print(f"Error reading the task file: {e}", markup=False)
        return EXIT_OK
    except TaskIndexError as e:
        state.err_console.print(str(e), markup=False)
        return EXIT_OK
    except StoreParseError as e:
        return _fatal(state, e)

    state.console.print(f"Task at index {index} removed.", markup=False)
    return EXIT_OK


def cmd_delete(state: AppState, args: argparse.Namespace) -> int:
    target = args.delete
    try:
        delete_store_file(target)
    except TaskStoreError as e:
        state.err_console.print(str(e), markup=False)
        return EXIT_OK

    state.console.print(f"File {target} deleted.", markup=False)
    return EXIT_OK


registry.register("delete", cmd_delete, help_text="Delete the given file (-d/--delete FILE).")
registry.register("list", cmd_list, help_text="Print every stored task (--all).")
registry.register("remove", cmd_remove, help_text="Remove the task at a position (--remove INDEX).")
registry.register("create", cmd_create, help_text="Append new task(s) (default).")
