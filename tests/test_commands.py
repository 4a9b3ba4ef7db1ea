# tests/test_commands.py

from __future__ import annotations

from task_board.cli.commands import CommandRegistry, registry, submit_text
from task_board.tasks.task_models import Task


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    notes: list[str] = []
    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_and_list(state) -> None:
    assert registry.handle(state, "/add Buy milk") == "Added task 1."
    assert registry.handle(state, "/add Call mom") == "Added task 2."

    listing = registry.handle(state, "/list")

    assert listing == "1. Buy milk  [/task/1]\n2. Call mom  [/task/2]"
    assert registry.handle(state, "/ls") == listing


def test_add_emits_detail_link(state) -> None:
    notes: list[str] = []
    registry.handle(state, "/add x", emit=notes.append)

    assert notes == ["Saved. Detail view: /task/1"]


def test_add_without_title_is_rejected(state) -> None:
    assert "Title required" in (registry.handle(state, "/add") or "")
    assert state.store.tasks == ()


def test_rm(state) -> None:
    registry.handle(state, "/add A")
    registry.handle(state, "/add B")

    assert registry.handle(state, "/rm 1") == "Task 1 removed."
    assert registry.handle(state, "/rm 1.") == "Task id 1 not found."
    assert registry.handle(state, "/delete x") == "Invalid id."
    assert registry.handle(state, "/del") == "Usage: /rm <id>"
    assert registry.handle(state, "/rm ²") == "Invalid id."
    assert registry.handle(state, "/task ③") == "Invalid id."
    assert state.store.tasks == (Task(2, "B"),)


def test_task_detail(state) -> None:
    registry.handle(state, "/add Report")

    detail = registry.handle(state, "/task 1") or ""

    assert "Title: Report" in detail
    assert "Link: /task/1" in detail
    assert registry.handle(state, "/task 9") == "Task id 9 not found."


def test_status(state, settings) -> None:
    registry.handle(state, "/add A")

    status = registry.handle(state, "/status") or ""

    assert "Tasks: 1" in status
    assert "Next id: 2" in status
    assert "key: tasks" in status
    assert "Empty titles: rejected" in status


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/?") or ""

    for name in ("/add", "/rm", "/list", "/task", "/status", "/exit"):
        assert name in text


def test_submit_text(state) -> None:
    assert submit_text(state, "Plain line") == "Added task 1."
    assert state.store.pending_input == ""
    assert submit_text(state, "   ") == "Title required."


def test_add_keeps_title_spacing(state) -> None:
    registry.handle(state, "/add a  b ")
    registry.handle(state, "/add\tx")

    assert [t.title for t in state.store.tasks] == ["a  b ", "x"]


def test_four_param_handler_gets_raw_args(state) -> None:
    reg = CommandRegistry()
    seen: list[tuple[list[str], str]] = []

    def h4(state, args, emit, raw_args):
        seen.append((args, raw_args))
        return "ok"

    reg.register("echo", h4, "echo")

    assert reg.handle(state, "/echo  one   two") == "ok"
    assert seen == [(["one", "two"], " one   two")]
