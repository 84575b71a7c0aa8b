# src/tasktrack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings loaded once in main
and wires the concrete JSON store into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, store_path: str | Path | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    store_path (from --file) overrides settings.store_path. If settings is None,
    falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    path = Path(store_path) if store_path is not None else Path(settings.store_path)
    logger.debug("Using task store %s", path)

    return AppState(
        settings=settings,
        task_store=TaskStore(path),
    )
