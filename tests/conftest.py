# tests/conftest.py

from __future__ import annotations

import io
import json
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

from tasktrack.core.state import AppState
from tasktrack.tasks.task_store import TaskStore


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Rich must not emit ANSI codes into captured output."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasktrack-test",
        log_level="WARNING",
        log_file=None,
        store_path=tmp_path / "tasks.json",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.store_path)


@pytest.fixture()
def write_store(settings: SimpleNamespace):
    """Write any JSON value (or raw text) straight into the store file."""

    def _write(data) -> Path:
        path: Path = settings.store_path
        text = data if isinstance(data, str) else json.dumps(data, indent=2)
        path.write_text(text, "utf-8")
        return path

    return _write


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired to the real JSON store and in-memory consoles.

    Read output back with state.console.file.getvalue() / state.err_console.file.getvalue().
    """
    return AppState(
        settings=settings,
        task_store=store,
        console=Console(file=io.StringIO(), width=200, highlight=False, emoji=False, soft_wrap=True),
        err_console=Console(file=io.StringIO(), width=200, highlight=False, emoji=False, soft_wrap=True),
    )
