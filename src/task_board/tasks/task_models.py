# src/task_board/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class EmptyTitleError(ValueError):
    """Raised when a blank title is submitted and blank titles are not allowed."""


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single task record.

    Records are never mutated after creation; delete + add is the only way
    the list changes.
    """

    id: int
    title: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        # Key order is part of the persisted format.
        return {"id": self.id, "title": self.title, "description": self.description}
