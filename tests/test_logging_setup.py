# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasktrack.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield root
    # Only drop what setup_logging installed; pytest manages its own capture handlers.
    for h in list(root.handlers):
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def test_console_only_by_default(restore_root_logging) -> None:
    setup_logging(console_level=logging.INFO)

    root = restore_root_logging
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)
    assert root.handlers[0].level == logging.INFO


def test_file_handler_gets_debug(restore_root_logging, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "tasktrack.log"
    setup_logging(log_file=log_file)

    logging.getLogger("tasktrack.tasks.task_store").debug("hello %s", "file")
    for h in restore_root_logging.handlers:
        h.flush()

    assert "DEBUG tasktrack.tasks.task_store: hello file" in log_file.read_text("utf-8")


def test_console_filter_drops_third_party_noise(restore_root_logging, capsys) -> None:
    setup_logging(console_level=logging.INFO)

    logging.getLogger("tasktrack.cli.main").info("ours")
    logging.getLogger("urllib3").warning("theirs")
    logging.getLogger("urllib3").error("theirs-error")

    err = capsys.readouterr().err
    assert "ours" in err
    assert "theirs-error" in err
    assert "theirs\n" not in err


def test_repeated_setup_does_not_duplicate(restore_root_logging) -> None:
    setup_logging()
    setup_logging()
    assert len(restore_root_logging.handlers) == 1


def test_console_filter_drops_captured_warnings(restore_root_logging, capsys) -> None:
    setup_logging(console_level=logging.INFO)

    logging.getLogger("py.warnings").warning("deprecated thing")

    assert "deprecated thing" not in capsys.readouterr().err
