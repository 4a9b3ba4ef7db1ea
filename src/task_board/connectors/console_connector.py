# src/task_board/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..cli.commands import submit_text
from ..core.state import AppState
from ..core.view import render_task_list

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _print_list(state: AppState) -> None:
    app_name = str(getattr(state.settings, "app_name", "task-board"))
    print(f"== {app_name} ==")
    print(render_task_list(state.store.tasks))


def run_console_loop(state: AppState, input_fn: Callable[[str], str] = input) -> None:
    """
    Interactive loop: one line per action.

    Plain text is added as a task exactly as typed; slash commands go
    through the registry.
    The list is printed again whenever it changed.
    """
    logger.info("Console connector started (tasks=%d).", len(state.store))
    _print_list(state)
    print("\nType a task and press Enter to add it. Use /help for commands. Use /exit to quit.\n")

    def emit(text: str) -> None:
        print(text, flush=True)

    while True:
        try:
            raw_input = input_fn("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        user_input = raw_input.strip()
        # Blank lines only reach the store when blank titles are allowed.
        if not user_input and not state.store.allow_empty_titles:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        before = state.store.tasks
        try:
            response = command_registry.handle(state, raw_input.lstrip(), emit=emit)
            if response is None:
                response = submit_text(state, raw_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling the command."

        print(response)
        if state.store.tasks != before:
            print()
            _print_list(state)
        print()

    logger.info("Console connector finished.")
