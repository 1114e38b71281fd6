# src/nathanbot/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum
from typing import Any, assert_never

STORAGE_PATTERN = "dd/MM/yyyy HHmm"
_STORAGE_FORMAT = "%d/%m/%Y %H%M"
_STORAGE_RE = re.compile(r"\d{2}/\d{2}/\d{4} \d{4}")

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class TaskKind(StrEnum):
    """Variant name as written into snapshots."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def letter(self) -> str:
        return _LETTERS[self]


_LETTERS = {TaskKind.TODO: "T", TaskKind.DEADLINE: "D", TaskKind.EVENT: "E"}


@dataclass(frozen=True, slots=True)
class ToDo:
    description: str
    done: bool = False
    tag: str | None = None

    def __str__(self) -> str:
        return render_task(self)


@dataclass(frozen=True, slots=True)
class Deadline:
    description: str
    by: datetime
    done: bool = False
    tag: str | None = None

    def __str__(self) -> str:
        return render_task(self)


@dataclass(frozen=True, slots=True)
class Event:
    description: str
    start: datetime
    end: datetime
    done: bool = False
    tag: str | None = None

    def __str__(self) -> str:
        return render_task(self)


Task = ToDo | Deadline | Event


# ---- timestamps ----


def parse_timestamp(raw: str) -> datetime:
    """
    Parse a user/storage timestamp in dd/MM/yyyy HHmm form.

    strptime alone accepts single-digit fields, so the shape is checked first.
    Raises ValueError on anything else.
    """
    text = raw.strip()
    if not _STORAGE_RE.fullmatch(text):
        raise ValueError(f"timestamp {raw!r} does not match {STORAGE_PATTERN}")
    return datetime.strptime(text, _STORAGE_FORMAT)


def format_storage_timestamp(dt: datetime) -> str:
    # strftime("%Y") drops the zero padding for years below 1000 on glibc
    return f"{dt.day:02d}/{dt.month:02d}/{dt.year:04d} {dt.hour:02d}{dt.minute:02d}"


def format_display_timestamp(dt: datetime) -> str:
    """Render as e.g. 'Mar 15 2024, 6:00 pm' (locale independent)."""
    hour = dt.hour % 12 or 12
    suffix = "am" if dt.hour < 12 else "pm"
    return f"{_MONTHS[dt.month - 1]} {dt.day} {dt.year}, {hour}:{dt.minute:02d} {suffix}"


# ---- variant helpers ----


def task_kind(task: Task) -> TaskKind:
    match task:
        case ToDo():
            return TaskKind.TODO
        case Deadline():
            return TaskKind.DEADLINE
        case Event():
            return TaskKind.EVENT
        case _:
            assert_never(task)


def render_task(task: Task) -> str:
    """Canonical one-line rendering, shared by the console and the text log."""
    mark = "X" if task.done else " "
    head = f"[{task_kind(task).letter}][{mark}] {task.description}"

    match task:
        case ToDo():
            text = head
        case Deadline(by=by):
            text = f"{head} (by: {format_display_timestamp(by)})"
        case Event(start=start, end=end):
            text = (
                f"{head} (from: {format_display_timestamp(start)} "
                f"to: {format_display_timestamp(end)})"
            )
        case _:
            assert_never(task)

    if task.tag is not None:
        text += f" #{task.tag}"
    return text


def mark_done(task: Task) -> Task:
    return replace(task, done=True)


def unmark_done(task: Task) -> Task:
    return replace(task, done=False)


def tag_task(task: Task, label: str) -> Task:
    return replace(task, tag=label)


# ---- snapshot form ----


def task_to_dict(task: Task) -> dict[str, Any]:
    data: dict[str, Any] = {
        "type": task_kind(task).value,
        "description": task.description,
        "done": task.done,
        "tag": task.tag,
    }
    match task:
        case ToDo():
            pass
        case Deadline(by=by):
            data["by"] = format_storage_timestamp(by)
        case Event(start=start, end=end):
            data["start"] = format_storage_timestamp(start)
            data["end"] = format_storage_timestamp(end)
        case _:
            assert_never(task)
    return data


def task_from_dict(data: Any) -> Task:
    """Rebuild one task from its snapshot entry. Raises ValueError if malformed."""
    if not isinstance(data, dict):
        raise ValueError(f"task entry must be an object, got {type(data).__name__}")

    description = data.get("description")
    if not isinstance(description, str) or not description.strip():
        raise ValueError("task entry has no description")

    done = data.get("done", False)
    if not isinstance(done, bool):
        raise ValueError("task entry 'done' must be a boolean")

    tag = data.get("tag")
    if tag is not None and not isinstance(tag, str):
        raise ValueError("task entry 'tag' must be a string or null")

    try:
        kind = TaskKind(data.get("type"))
    except ValueError:
        raise ValueError(f"unknown task type {data.get('type')!r}") from None

    def ts(key: str) -> datetime:
        raw = data.get(key)
        if not isinstance(raw, str):
            raise ValueError(f"task entry is missing {key!r}")
        return parse_timestamp(raw)

    match kind:
        case TaskKind.TODO:
            return ToDo(description, done=done, tag=tag)
        case TaskKind.DEADLINE:
            return Deadline(description, ts("by"), done=done, tag=tag)
        case TaskKind.EVENT:
            return Event(description, ts("start"), ts("end"), done=done, tag=tag)
        case _:
            assert_never(kind)
