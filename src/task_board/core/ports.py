# src/task_board/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..storage.task_persistence import LoadResult
    from ..tasks.task_models import Task


class KeyValueStorage(Protocol):
    """String slots keyed by name (localStorage-like)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class TaskPersistence(Protocol):
    """
    Durable storage for the task list.

    save() overwrites the previous value and returns once it is stored.
    load() tells "nothing stored" apart from "stored but unreadable";
    the caller decides what to do with each.
    """

    def save(self, tasks: Iterable[Task]) -> None: ...
    def load(self) -> LoadResult: ...
