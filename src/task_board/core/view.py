# src/task_board/core/view.py

"""
Presentation helpers shared by connectors.

Connectors render the same rows; only the transport differs.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..tasks.task_models import Task

UNTITLED = "<untitled>"
EMPTY_LIST = "(no tasks)"


def task_link(task_id: int) -> str:
    """Route of the per-task detail view."""
    return f"/task/{task_id}"


@dataclass(frozen=True, slots=True)
class TaskRow:
    id: int
    title: str
    link: str

    @property
    def label(self) -> str:
        return self.title if self.title.strip() else UNTITLED


def build_rows(tasks: Iterable[Task]) -> list[TaskRow]:
    return [TaskRow(id=t.id, title=t.title, link=task_link(t.id)) for t in tasks]


def render_task_list(tasks: Iterable[Task]) -> str:
    rows = build_rows(tasks)
    if not rows:
        return EMPTY_LIST
    return "\n".join(f"{r.id}. {r.label}  [{r.link}]" for r in rows)


def render_task_detail(task: Task) -> str:
    description = task.description or "(no description)"
    return (
        f"Task {task.id}\n"
        f"  Title: {task.title or UNTITLED}\n"
        f"  Description: {description}\n"
        f"  Link: {task_link(task.id)}"
    )
