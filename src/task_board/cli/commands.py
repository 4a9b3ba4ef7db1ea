# src/task_board/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..core.view import render_task_detail, render_task_list, task_link
from ..tasks.task_models import EmptyTitleError

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler4 = Callable[[AppState, list[str], CommandEmitter | None, str], str]
CommandHandler = CommandHandler2 | CommandHandler3 | CommandHandler4

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, /rm, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Four-parameter handlers also get the raw text after the command word
        (one separating space dropped), for arguments where spacing matters.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        head = line[1:].lstrip()[len(parts[0]) :]
        raw_args = head[1:] if head[:1].isspace() else head

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, emit, raw_args)

        if nparams == 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Leave (aliases: /quit).")
        lines.append("Any other text is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int | None:
    try:
        return int(raw.rstrip("."))
    except ValueError:
        return None


def submit_text(state: AppState, text: str) -> str:
    """Plain input: becomes the pending value and is submitted as a task."""
    store = state.store
    store.set_pending_input(text)
    try:
        task = store.submit()
    except EmptyTitleError:
        return "Title required."
    return f"Added task {task.id}."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
    raw_args: str = "",
) -> str:
    """
    /add <title...>  -> add with inline title, spacing kept as typed
    """
    title = raw_args
    try:
        task = state.store.add_task(title)
    except EmptyTitleError:
        return "Title required. Usage: /add <title>"
    if emit:
        with contextlib.suppress(Exception):
            emit(f"Saved. Detail view: {task_link(task.id)}")
    return f"Added task {task.id}."


def cmd_rm(state: AppState, args: list[str]) -> str:
    """
    /rm <id>  -> delete by id (unknown ids are a no-op)
    """
    if len(args) != 1:
        return "Usage: /rm <id>"
    task_id = _parse_id(args[0])
    if task_id is None:
        return "Invalid id."
    if state.store.delete_task(task_id):
        return f"Task {task_id} removed."
    return f"Task id {task_id} not found."


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_list(state.store.tasks)


def cmd_task(state: AppState, args: list[str]) -> str:
    """
    /task <id>  -> show one record (target of the /task/{id} link)
    """
    if len(args) != 1:
        return "Usage: /task <id>"
    task_id = _parse_id(args[0])
    if task_id is None:
        return "Invalid id."
    task = state.store.get_task(task_id)
    if task is None:
        return f"Task id {task_id} not found."
    return render_task_detail(task)


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.store
    settings = state.settings
    policy = "allowed" if store.allow_empty_titles else "rejected"
    return (
        "Status:\n"
        f"  Tasks: {len(store)}\n"
        f"  Next id: {store.next_id}\n"
        f"  Storage: {getattr(settings, 'storage_db_path', '?')} "
        f"(key: {getattr(settings, 'storage_key', '?')})\n"
        f"  Empty titles: {policy}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <title>.")
registry.register("rm", cmd_rm, help_text="Delete a task by id: /rm <id>.", aliases=["delete", "del"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("task", cmd_task, help_text="Show one task: /task <id>.")
registry.register("status", cmd_status, help_text="Show task count, next id and storage.")
