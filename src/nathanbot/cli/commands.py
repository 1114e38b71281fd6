# src/nathanbot/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..tasks.task_list import TaskList
from ..tasks.task_models import STORAGE_PATTERN, Deadline, Event, Task, ToDo, parse_timestamp

CommandHandler = Callable[[TaskList, str], str]

logger = logging.getLogger(__name__)

GREET = "Hello! I'm NathanBot\nWhat can I do for you?\n"
EXIT = "Bye. Hope to see you again soon!\n"

INVALID_TASK_NUMBER = "Invalid task number. To see the list of tasks, use: list\n"
INVALID_DATE = f"Invalid date format. Please use {STORAGE_PATTERN}.\n"
EMPTY_TODO = "The description of a todo cannot be empty. Use: todo <description>\n"
DEADLINE_USAGE = "Invalid deadline format. Use: deadline <description> /by <date>\n"
EVENT_USAGE = (
    "Invalid event format. Use: event <description> /from <start time> /to <end time>\n"
)
TAG_USAGE = "Invalid tag format. Use: tag <task number> <label>\n"
UNKNOWN_COMMAND = "Unknown Command, womp womp.\n"
INTERNAL_ERROR = "Something went wrong while handling that command.\n"

EXIT_COMMAND = "bye"

_TASK_NUMBER_RE = re.compile(r"[+-]?\d+")
_EVENT_SPLIT_RE = re.compile(r" /from | /to ")


class CommandRegistry:
    """Maps a command word to a stateless handler(task_list, args) -> reply."""

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

    def handle(self, task_list: TaskList, line: str) -> str:
        """
        Handle a raw input line like "mark 2".
        Always returns a reply; unknown words get the unknown-command message.
        """
        parts = line.split(maxsplit=1)
        if not parts:
            return UNKNOWN_COMMAND
        name = parts[0]
        args = parts[1] if len(parts) > 1 else ""
        handler = self._handlers.get(name.lower())
        if handler is None:
            return UNKNOWN_COMMAND

        try:
            return handler(task_list, args.strip())
        except Exception:
            logger.exception("Command handler crashed for %r.", line)
            return INTERNAL_ERROR

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines) + "\n"


registry = CommandRegistry()


# ---- helpers ----


def _parse_task_number(raw: str, task_list: TaskList) -> int:
    """Return the zero-based index for a one-based task number, or raise."""
    if not _TASK_NUMBER_RE.fullmatch(raw):
        raise ValueError(f"not a task number: {raw!r}")
    number = int(raw)
    if not 1 <= number <= task_list.list_length():
        raise IndexError(f"task number {number} out of range")
    return number - 1


def _added_reply(task: Task, task_list: TaskList) -> str:
    return (
        f"Got it. I've added this task:\n{task}\n"
        f"Now you have {task_list.list_length()} tasks in the list.\n"
    )


# ---- lifecycle ----


def handle_greet() -> str:
    return GREET


def handle_exit() -> str:
    return EXIT


def is_exit_command(line: str) -> bool:
    return line.strip().lower() == EXIT_COMMAND


def handle_command(task_list: TaskList, line: str) -> str:
    return registry.handle(task_list, line)


# ---- handlers ----


def cmd_help(task_list: TaskList, args: str) -> str:
    return registry.build_help()


def cmd_bye(task_list: TaskList, args: str) -> str:
    return handle_exit()


def cmd_list(task_list: TaskList, args: str) -> str:
    return task_list.render()


def cmd_mark(task_list: TaskList, args: str) -> str:
    try:
        index = _parse_task_number(args, task_list)
    except (ValueError, IndexError):
        return INVALID_TASK_NUMBER
    task = task_list.mark_as_done(index)
    return f"Nice! I've marked this task as done:\n  {task}\n"


def cmd_unmark(task_list: TaskList, args: str) -> str:
    try:
        index = _parse_task_number(args, task_list)
    except (ValueError, IndexError):
        return INVALID_TASK_NUMBER
    task = task_list.mark_as_undone(index)
    return f"OK, I've marked this task as not done yet:\n  {task}\n"


def cmd_tag(task_list: TaskList, args: str) -> str:
    """
    tag <n> <label>

    Same one-based numbering as mark/unmark/delete.
    """
    parts = args.split()
    if not parts:
        return INVALID_TASK_NUMBER
    try:
        index = _parse_task_number(parts[0], task_list)
    except (ValueError, IndexError):
        return INVALID_TASK_NUMBER
    if len(parts) != 2:
        return TAG_USAGE

    label = parts[1]
    task_list.tag_task(index, label)
    return f"Task {index + 1} tagged with {label}\n"


def cmd_delete(task_list: TaskList, args: str) -> str:
    try:
        index = _parse_task_number(args, task_list)
    except (ValueError, IndexError):
        return INVALID_TASK_NUMBER
    task = task_list.delete_task(index)
    return (
        f"Noted. I've removed this task:\n{task}\n"
        f"Now you have {task_list.list_length()} tasks in the list.\n"
    )


def cmd_todo(task_list: TaskList, args: str) -> str:
    if not args:
        return EMPTY_TODO
    task = ToDo(args)
    task_list.add_task(task)
    return _added_reply(task, task_list)


def cmd_deadline(task_list: TaskList, args: str) -> str:
    """deadline <description> /by <dd/MM/yyyy HHmm>"""
    parts = args.split(" /by ")
    if len(parts) != 2:
        return DEADLINE_USAGE
    description, by = (p.strip() for p in parts)
    if not description or not by:
        return DEADLINE_USAGE

    try:
        due = parse_timestamp(by)
    except ValueError:
        return INVALID_DATE

    task = Deadline(description, due)
    task_list.add_task(task)
    return _added_reply(task, task_list)


def cmd_event(task_list: TaskList, args: str) -> str:
    """event <description> /from <start> /to <end>"""
    if _EVENT_SPLIT_RE.findall(args) != [" /from ", " /to "]:
        return EVENT_USAGE
    parts = _EVENT_SPLIT_RE.split(args)
    description, start_raw, end_raw = (p.strip() for p in parts)
    if not description or not start_raw or not end_raw:
        return EVENT_USAGE

    try:
        start = parse_timestamp(start_raw)
        end = parse_timestamp(end_raw)
    except ValueError:
        return INVALID_DATE

    task = Event(description, start, end)
    task_list.add_task(task)
    return _added_reply(task, task_list)


def cmd_find(task_list: TaskList, args: str) -> str:
    found = task_list.find(args)
    if found.is_empty():
        return f"No tasks found containing: {args}\n"
    return "Here are the matching tasks in your list:\n" + found.render()


registry.register("help", cmd_help, help_text="Show available commands.")
registry.register("list", cmd_list, help_text="Show all tasks.")
registry.register("todo", cmd_todo, help_text="Add a todo: todo <description>.")
registry.register(
    "deadline", cmd_deadline, help_text=f"Add a deadline: deadline <description> /by <{STORAGE_PATTERN}>."
)
registry.register(
    "event",
    cmd_event,
    help_text=f"Add an event: event <description> /from <{STORAGE_PATTERN}> /to <{STORAGE_PATTERN}>.",
)
registry.register("mark", cmd_mark, help_text="Mark a task as done: mark <n>.")
registry.register("unmark", cmd_unmark, help_text="Mark a task as not done: unmark <n>.")
registry.register("tag", cmd_tag, help_text="Tag a task: tag <n> <label>.")
registry.register("delete", cmd_delete, help_text="Delete a task: delete <n>.")
registry.register("find", cmd_find, help_text="Find tasks by description: find <text>.")
registry.register(EXIT_COMMAND, cmd_bye, help_text="Exit.")
