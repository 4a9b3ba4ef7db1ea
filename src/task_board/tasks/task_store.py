# src/task_board/tasks/task_store.py

from __future__ import annotations

import logging

from ..core.ports import TaskPersistence
from ..storage.task_persistence import LoadStatus
from .task_models import EmptyTitleError, Task

logger = logging.getLogger(__name__)


class TaskListStore:
    """
    In-memory task list synchronized to a TaskPersistence.

    Holds:
    - the ordered list of records (insertion order)
    - the next-id counter
    - the pending input value (what the user has typed but not submitted)

    Every mutation writes the full list back through the persistence port.
    """

    def __init__(self, persistence: TaskPersistence, *, allow_empty_titles: bool = False) -> None:
        self._persistence = persistence
        self._allow_empty_titles = allow_empty_titles
        self._tasks: list[Task] = []
        self._next_id = 1
        self._pending_input = ""
        self._hydrated = False

    # ---- queries ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def pending_input(self) -> str:
        return self._pending_input

    @property
    def hydrated(self) -> bool:
        return self._hydrated

    @property
    def allow_empty_titles(self) -> bool:
        return self._allow_empty_titles

    def get_task(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- lifecycle ----

    def hydrate(self) -> None:
        """
        Load the persisted list and seed the id counter.

        Both "absent" and "corrupt" start from an empty list; corrupt data is
        left in storage untouched until the next mutation overwrites it.
        """
        if self._hydrated:
            raise RuntimeError("TaskListStore is already hydrated")

        result = self._persistence.load()
        if result.status is LoadStatus.OK:
            tasks = list(result.tasks)
        elif result.status is LoadStatus.CORRUPT:
            logger.warning("Persisted task list is unreadable, starting empty: %s", result.error)
            tasks = []
        else:
            logger.debug("No persisted task list, starting empty.")
            tasks = []

        self._tasks = tasks
        self._next_id = max([0, *(t.id for t in tasks)]) + 1
        self._hydrated = True
        logger.info("Hydrated %d task(s), next_id=%d", len(tasks), self._next_id)

    # ---- pending input ----

    def set_pending_input(self, text: str) -> None:
        self._pending_input = text

    def submit(self) -> Task:
        """Add the pending input as a new task."""
        return self.add_task(self._pending_input)

    # ---- mutations ----

    def add_task(self, title: str) -> Task:
        if not self._allow_empty_titles and not title.strip():
            raise EmptyTitleError("title is required")

        logger.debug("Before add: %s", self._tasks)

        task = Task(id=self._next_id, title=title, description="")
        updated = [*self._tasks, task]

        # Persist first: a failed save leaves the in-memory state untouched.
        self._persistence.save(updated)
        self._tasks = updated
        self._next_id += 1
        self._pending_input = ""

        logger.debug("After add: %s", updated)
        logger.info("Task added id=%s", task.id)
        return task

    def delete_task(self, task_id: int) -> bool:
        """
        Remove the task with `task_id`.

        Unknown ids are not an error. The list is saved either way.
        Returns True if a record was removed.
        """
        remaining = [t for t in self._tasks if t.id != task_id]
        removed = len(remaining) != len(self._tasks)

        self._persistence.save(remaining)
        self._tasks = remaining

        if removed:
            logger.info("Task removed id=%s", task_id)
        else:
            logger.debug("Delete of unknown task id=%s (no-op)", task_id)
        return removed
