# tests/test_commands.py

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from nathanbot.cli.commands import (
    DEADLINE_USAGE,
    EMPTY_TODO,
    EVENT_USAGE,
    INTERNAL_ERROR,
    INVALID_DATE,
    INVALID_TASK_NUMBER,
    TAG_USAGE,
    UNKNOWN_COMMAND,
    CommandRegistry,
    handle_command,
    handle_exit,
    handle_greet,
    is_exit_command,
)
from nathanbot.tasks.task_list import EMPTY_LIST_MESSAGE, TaskList
from nathanbot.tasks.task_models import Deadline, Event, ToDo

from .fakes import FakeTaskRepo


@pytest.fixture()
def three_tasks(repo: FakeTaskRepo) -> TaskList:
    return TaskList(repo, tasks=[ToDo("a"), ToDo("b"), ToDo("c")])


def test_greet_and_exit() -> None:
    assert handle_greet() == "Hello! I'm NathanBot\nWhat can I do for you?\n"
    assert handle_exit() == "Bye. Hope to see you again soon!\n"
    assert is_exit_command("bye")
    assert is_exit_command("  BYE ")
    assert not is_exit_command("bye now")


def test_bye_replies_with_farewell(task_list: TaskList, repo: FakeTaskRepo) -> None:
    assert handle_command(task_list, "bye") == handle_exit()
    assert repo.saves == []


def test_list_empty_and_filled(task_list: TaskList) -> None:
    assert handle_command(task_list, "list") == EMPTY_LIST_MESSAGE

    handle_command(task_list, "todo read")
    handle_command(task_list, "todo write")

    assert handle_command(task_list, "list") == "1. [T][ ] read\n2. [T][ ] write\n"


def test_todo_adds_and_saves(task_list: TaskList, repo: FakeTaskRepo) -> None:
    reply = handle_command(task_list, "todo borrow book")

    assert reply == (
        "Got it. I've added this task:\n[T][ ] borrow book\nNow you have 1 tasks in the list.\n"
    )
    assert task_list.list_length() == 1
    assert str(task_list.get_task(0)) == "[T][ ] borrow book"
    assert repo.last_saved == [ToDo("borrow book")]


@pytest.mark.parametrize("line", ["todo", "todo   ", "TODO "])
def test_todo_empty_description(task_list: TaskList, repo: FakeTaskRepo, line: str) -> None:
    assert handle_command(task_list, line) == EMPTY_TODO
    assert task_list.is_empty()
    assert repo.saves == []


def test_deadline_success(task_list: TaskList) -> None:
    reply = handle_command(task_list, "deadline Submit /by 15/03/2024 1800")

    assert "[D][ ] Submit (by: Mar 15 2024, 6:00 pm)" in reply
    assert task_list.get_task(0) == Deadline("Submit", datetime(2024, 3, 15, 18, 0))


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("deadline Submit", DEADLINE_USAGE),
        ("deadline Submit /by", DEADLINE_USAGE),
        ("deadline /by 15/03/2024 1800", DEADLINE_USAGE),
        ("deadline a /by 15/03/2024 1800 /by 16/03/2024 1800", DEADLINE_USAGE),
        ("deadline Submit /by tomorrow", INVALID_DATE),
        ("deadline Submit /by 2024-03-15 1800", INVALID_DATE),
    ],
)
def test_deadline_errors(task_list: TaskList, line: str, expected: str) -> None:
    assert handle_command(task_list, line) == expected
    assert task_list.is_empty()


def test_event_success(task_list: TaskList) -> None:
    reply = handle_command(task_list, "event project meeting /from 02/01/2024 0900 /to 02/01/2024 1130")

    assert "[E][ ] project meeting (from: Jan 2 2024, 9:00 am to: Jan 2 2024, 11:30 am)" in reply
    assert "Now you have 1 tasks in the list." in reply
    assert task_list.get_task(0) == Event(
        "project meeting", datetime(2024, 1, 2, 9, 0), datetime(2024, 1, 2, 11, 30)
    )


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("event party", EVENT_USAGE),
        ("event party /from 02/01/2024 0900", EVENT_USAGE),
        ("event party /to 02/01/2024 0900 /from 02/01/2024 1100", EVENT_USAGE),
        ("event party /from 02/01/2024 0900 /to 02/01/2024 1000 /to 02/01/2024 1100", EVENT_USAGE),
        ("event party /to 02/01/2024 0900 /to 02/01/2024 1100", EVENT_USAGE),
        ("event party /from 2/1/2024 0900 /to 02/01/2024 1100", INVALID_DATE),
        ("event party /from 02/01/2024 0900 /to soon", INVALID_DATE),
    ],
)
def test_event_errors(task_list: TaskList, line: str, expected: str) -> None:
    assert handle_command(task_list, line) == expected
    assert task_list.is_empty()


def test_mark_and_unmark(three_tasks: TaskList, repo: FakeTaskRepo) -> None:
    assert handle_command(three_tasks, "mark 2") == (
        "Nice! I've marked this task as done:\n  [T][X] b\n"
    )
    assert handle_command(three_tasks, "unmark 2") == (
        "OK, I've marked this task as not done yet:\n  [T][ ] b\n"
    )
    assert len(repo.saves) == 2
    assert str(three_tasks.get_task(1)) == "[T][ ] b"


@pytest.mark.parametrize("arg", ["0", "4", "999", "-1", "two", "", "1 2", "1.0"])
@pytest.mark.parametrize("command", ["mark", "unmark", "delete"])
def test_invalid_task_numbers_leave_list_unchanged(
    three_tasks: TaskList, repo: FakeTaskRepo, command: str, arg: str
) -> None:
    before = three_tasks.render()

    assert handle_command(three_tasks, f"{command} {arg}") == INVALID_TASK_NUMBER

    assert three_tasks.render() == before
    assert repo.saves == []


def test_delete(three_tasks: TaskList, repo: FakeTaskRepo) -> None:
    reply = handle_command(three_tasks, "delete 1")

    assert reply == "Noted. I've removed this task:\n[T][ ] a\nNow you have 2 tasks in the list.\n"
    assert [t.description for t in three_tasks] == ["b", "c"]
    assert repo.last_saved == [ToDo("b"), ToDo("c")]


def test_tag_uses_one_based_numbers(three_tasks: TaskList, repo: FakeTaskRepo) -> None:
    assert handle_command(three_tasks, "tag 3 weekend") == "Task 3 tagged with weekend\n"
    assert str(three_tasks.get_task(2)) == "[T][ ] c #weekend"
    assert len(repo.saves) == 1

    assert handle_command(three_tasks, "tag 0 weekend") == INVALID_TASK_NUMBER
    assert handle_command(three_tasks, "tag 4 weekend") == INVALID_TASK_NUMBER
    assert handle_command(three_tasks, "tag x weekend") == INVALID_TASK_NUMBER
    assert handle_command(three_tasks, "tag") == INVALID_TASK_NUMBER
    assert len(repo.saves) == 1


@pytest.mark.parametrize("line", ["tag 1", "tag 1 two words"])
def test_tag_needs_exactly_one_label(three_tasks: TaskList, line: str) -> None:
    assert handle_command(three_tasks, line) == TAG_USAGE
    assert three_tasks.get_task(0).tag is None


def test_find(repo: FakeTaskRepo) -> None:
    tl = TaskList(
        repo,
        tasks=[ToDo("read book"), ToDo("cook"), ToDo("return book"), ToDo("Book club"), ToDo("run")],
    )

    assert handle_command(tl, "find book") == (
        "Here are the matching tasks in your list:\n1. [T][ ] read book\n2. [T][ ] return book\n"
    )
    assert handle_command(tl, "find xyz") == "No tasks found containing: xyz\n"
    assert handle_command(tl, "find").count("[T]") == 5
    assert tl.list_length() == 5
    assert repo.saves == []


def test_unknown_command(task_list: TaskList) -> None:
    assert handle_command(task_list, "blah") == UNKNOWN_COMMAND
    assert handle_command(task_list, "todoo x") == UNKNOWN_COMMAND
    assert handle_command(task_list, "") == UNKNOWN_COMMAND


def test_command_word_is_case_insensitive(task_list: TaskList) -> None:
    handle_command(task_list, "TODO shout")
    assert str(task_list.get_task(0)) == "[T][ ] shout"


def test_help_lists_commands(task_list: TaskList) -> None:
    reply = handle_command(task_list, "help")
    assert reply.startswith("Available commands:")
    for name in ("list", "todo", "deadline", "event", "mark", "unmark", "tag", "delete", "find", "bye"):
        assert f"  {name} - " in reply


def test_registry_turns_crash_into_reply(task_list: TaskList, caplog) -> None:
    reg = CommandRegistry()

    def boom(task_list, args):
        raise RuntimeError("boom")

    reg.register("boom", boom, "explodes", aliases=["b"])

    with caplog.at_level(logging.ERROR, logger="nathanbot.cli.commands"):
        assert reg.handle(task_list, "b now") == INTERNAL_ERROR
    assert "Command handler crashed" in caplog.text
    assert reg.handle(task_list, "nope") == UNKNOWN_COMMAND


def test_save_failure_does_not_break_reply() -> None:
    repo = FakeTaskRepo(fail_saves=True)
    tl = TaskList(repo)

    reply = handle_command(tl, "todo still works")

    assert reply.startswith("Got it.")
    assert tl.list_length() == 1


def test_command_word_split_on_any_whitespace(task_list: TaskList) -> None:
    assert handle_command(task_list, "todo\tread a book").startswith("Got it.")
    assert handle_command(task_list, "  mark\t 1 ").startswith("Nice!")
    assert str(task_list.get_task(0)) == "[T][X] read a book"
    assert handle_command(task_list, " \t ") == UNKNOWN_COMMAND
