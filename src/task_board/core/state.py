# src/task_board/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskListStore


@dataclass
class AppState:
    """
    Session-scoped application state.

    Built once by cli.bootstrap and handed to connectors explicitly;
    nothing here lives at module level.
    """

    # Settings (or a compatible namespace in tests).
    settings: Any
    store: TaskListStore
