# src/task_board/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete storage into AppState,
- hydrates the task list (exactly once per session).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskPersistence
from ..core.state import AppState
from ..storage.local_storage import LocalStorage
from ..storage.task_persistence import TaskListPersistence
from ..tasks.task_store import TaskListStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, persistence: TaskPersistence | None = None) -> AppState:
    """
    Create a hydrated AppState from the provided settings.

    Keeping settings (and persistence) injectable makes the app easier to test
    and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if persistence is None:
        storage = LocalStorage(settings.storage_db_path)
        persistence = TaskListPersistence(storage, key=settings.storage_key)

    store = TaskListStore(
        persistence,
        allow_empty_titles=bool(getattr(settings, "allow_empty_titles", False)),
    )
    store.hydrate()

    return AppState(settings=settings, store=store)
