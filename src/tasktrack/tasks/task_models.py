# src/tasktrack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_NAME = ""
DEFAULT_DEADLINE = "None"
DEFAULT_PRIORITY = "Medium"

TASK_FIELDS = ("name", "deadline", "priority")


@dataclass(slots=True)
class Task:
    """
    One tracked task.

    There is no id field: a task is identified by its position in the stored list,
    so removing one shifts every later task down by one.
    """

    name: str = DEFAULT_NAME
    deadline: str = DEFAULT_DEADLINE
    priority: str = DEFAULT_PRIORITY

    def to_dict(self) -> dict[str, str]:
        # Key order is part of the file format.
        return {"name": self.name, "deadline": self.deadline, "priority": self.priority}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """Strict decode; raises ValueError on anything that is not a well-formed task."""
        if not isinstance(raw, dict):
            raise ValueError(f"expected an object, got {type(raw).__name__}")

        values: dict[str, str] = {}
        for key in TASK_FIELDS:
            if key not in raw:
                raise ValueError(f"missing field {key!r}")
            val = raw[key]
            if not isinstance(val, str):
                raise ValueError(f"field {key!r} must be a string, got {type(val).__name__}")
            values[key] = val

        return cls(**values)
