# src/task_board/storage/task_persistence.py

"""
JSON codec for the task list slot.

The slot holds a compact JSON array of {"id", "title", "description"}
objects. There is no schema version field.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from ..core.ports import KeyValueStorage
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"


class LoadStatus(StrEnum):
    OK = "ok"
    ABSENT = "absent"
    CORRUPT = "corrupt"


@dataclass(frozen=True, slots=True)
class LoadResult:
    status: LoadStatus
    tasks: list[Task] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.OK


class CorruptTaskData(ValueError):
    """Stored value does not have the expected task list structure."""


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps(
        [t.to_dict() for t in tasks],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def _task_from_raw(raw: Any, index: int) -> Task:
    if not isinstance(raw, dict):
        raise CorruptTaskData(f"item {index} is not an object")

    tid = raw.get("id")
    # bool is an int subclass; reject it explicitly.
    if not isinstance(tid, int) or isinstance(tid, bool):
        raise CorruptTaskData(f"item {index} has a non-integer id: {tid!r}")

    title = raw.get("title")
    if not isinstance(title, str):
        raise CorruptTaskData(f"item {index} has a non-string title")

    description = raw.get("description", "")
    if not isinstance(description, str):
        raise CorruptTaskData(f"item {index} has a non-string description")

    return Task(id=tid, title=title, description=description)


def decode_tasks(raw_text: str) -> list[Task]:
    """
    Parse the slot text into Task records.

    Raises CorruptTaskData for anything that is not a list of well-formed
    records with unique ids.
    """
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise CorruptTaskData(f"invalid JSON: {e.msg}") from e

    if not isinstance(data, list):
        raise CorruptTaskData(f"expected a JSON array, got {type(data).__name__}")

    tasks = [_task_from_raw(raw, i) for i, raw in enumerate(data)]

    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise CorruptTaskData(f"duplicate id {t.id}")
        seen.add(t.id)
    return tasks


class TaskListPersistence:
    """Persists the whole task list into one LocalStorage slot."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        if not key:
            raise ValueError("storage key is required")
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, tasks: Iterable[Task]) -> None:
        self._storage.set_item(self._key, encode_tasks(tasks))

    def load(self) -> LoadResult:
        raw_text = self._storage.get_item(self._key)
        if raw_text is None:
            return LoadResult(LoadStatus.ABSENT)

        # A stored JSON null reads back as "nothing saved".
        if raw_text.strip() == "null":
            return LoadResult(LoadStatus.ABSENT)

        try:
            tasks = decode_tasks(raw_text)
        except CorruptTaskData as e:
            logger.debug("Task slot key=%s is corrupt: %s", self._key, e)
            return LoadResult(LoadStatus.CORRUPT, error=str(e))

        return LoadResult(LoadStatus.OK, tasks=tasks)
