# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterator

import pytest

from task_board.cli.bootstrap import create_initial_state
from task_board.connectors.console_connector import run_console_loop
from task_board.tasks.task_models import Task


def _feed(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return fake_input


def test_plain_lines_add_and_rm_deletes(state, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(state, input_fn=_feed(["Buy milk", "", "Call mom", "/rm 1", "/exit", "ignored"]))

    assert state.store.tasks == (Task(2, "Call mom"),)
    out = capsys.readouterr().out
    assert "Added task 1." in out
    assert "Task 1 removed." in out
    assert "2. Call mom  [/task/2]" in out


def test_eof_ends_loop(state) -> None:
    run_console_loop(state, input_fn=_feed(["one"]))

    assert [t.title for t in state.store.tasks] == ["one"]


def test_state_persists_across_sessions(settings) -> None:
    first = create_initial_state(settings=settings)
    run_console_loop(first, input_fn=_feed(["a", "b", "/rm 2", "/quit"]))

    second = create_initial_state(settings=settings)

    assert second.store.tasks == (Task(1, "a"),)
    assert second.store.next_id == 2


def test_handler_crash_is_reported_and_loop_continues(
    state, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def boom(task_id: int) -> bool:
        raise RuntimeError("disk gone")

    monkeypatch.setattr(state.store, "delete_task", boom)

    run_console_loop(state, input_fn=_feed(["/rm 1", "after"]))

    out = capsys.readouterr().out
    assert "Internal error" in out
    assert [t.title for t in state.store.tasks] == ["after"]


def test_lines_submitted_verbatim_when_blank_titles_allowed(settings) -> None:
    settings.allow_empty_titles = True
    state = create_initial_state(settings=settings)

    run_console_loop(state, input_fn=_feed(["", "  padded  ", "   "]))

    assert state.store.tasks == (Task(1, ""), Task(2, "  padded  "), Task(3, "   "))


def test_blank_lines_skipped_by_default(state) -> None:
    run_console_loop(state, input_fn=_feed(["", "   ", "  padded  "]))

    assert state.store.tasks == (Task(1, "  padded  "),)


def test_non_ascii_digit_id_is_invalid(state, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(state, input_fn=_feed(["/rm ²"]))

    out = capsys.readouterr().out
    assert "Invalid id." in out
    assert "Internal error" not in out
