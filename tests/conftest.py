# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_board.cli.bootstrap import create_initial_state
from task_board.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    return SimpleNamespace(
        app_name="task-board-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        storage_db_path=tmp_path / "data" / "local_storage.sqlite3",
        storage_key="tasks",
        allow_empty_titles=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired exactly as the CLI wires it (real SQLite LocalStorage),
    already hydrated from an empty database.
    """
    return create_initial_state(settings=settings)
