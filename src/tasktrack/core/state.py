# src/tasktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console

from .ports import TaskRepo


def _stdout_console() -> Console:
    return Console(highlight=False, emoji=False, soft_wrap=True)


def _stderr_console() -> Console:
    return Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskRepo

    # User-facing output: results on stdout, diagnostics on stderr.
    console: Console = field(default_factory=_stdout_console)
    err_console: Console = field(default_factory=_stderr_console)
