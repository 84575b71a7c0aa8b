# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasktrack.cli.bootstrap import create_initial_state
from tasktrack.config import Settings, get_settings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("APP_NAME", "LOG_LEVEL", "LOG_FILE", "STORE_PATH"):
        monkeypatch.delenv(f"TASKTRACK_{name}", raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "tasktrack"
    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.store_path == Path("tasks.json")


def test_env_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKTRACK_APP_NAME", "todo")
    clean_env.setenv("TASKTRACK_LOG_LEVEL", "debug")
    clean_env.setenv("TASKTRACK_LOG_FILE", str(tmp_path / "logs" / "t.log"))
    clean_env.setenv("TASKTRACK_STORE_PATH", str(tmp_path / "mine.json"))

    s = Settings.from_env()

    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "logs" / "t.log"
    assert s.store_path == tmp_path / "mine.json"


def test_blank_values_fall_back(clean_env) -> None:
    clean_env.setenv("TASKTRACK_STORE_PATH", "  ")
    clean_env.setenv("TASKTRACK_LOG_FILE", "")
    clean_env.setenv("TASKTRACK_APP_NAME", "")

    s = Settings.from_env()

    assert s.store_path == Path("tasks.json")
    assert s.log_file is None
    assert s.app_name == "tasktrack"


def test_settings_are_frozen(clean_env) -> None:
    s = Settings.from_env()
    with pytest.raises(AttributeError):
        s.app_name = "x"  # type: ignore[misc]


def test_get_settings_is_shared() -> None:
    assert get_settings() is get_settings()


def test_bootstrap_prefers_explicit_store_path(settings, tmp_path: Path) -> None:
    state = create_initial_state(settings=settings)
    assert state.task_store.path == settings.store_path

    state = create_initial_state(settings=settings, store_path=tmp_path / "x.json")
    assert state.task_store.path == tmp_path / "x.json"
