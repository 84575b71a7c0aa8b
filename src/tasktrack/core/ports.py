# src/tasktrack/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI commands.

Commands depend on this Protocol instead of the concrete JSON store, so positional
identity stays an implementation detail and tests can use an in-memory repo.
"""

from pathlib import Path
from typing import Any, Protocol


class TaskRepo(Protocol):
    @property
    def path(self) -> Path: ...

    def list_tasks(self) -> list[Any]: ...

    def add_tasks(
            self,
            *,
            name: str | None = None,
            deadline: str = "None",
            priority: str = "Medium",
            count: int = 1,
    ) -> list[Any]: ...

    def remove_task(self, index: int) -> Any: ...
