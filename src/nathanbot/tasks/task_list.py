# src/nathanbot/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.ports import TaskRepo
from .task_models import Task, mark_done, tag_task, unmark_done

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "You have no tasks in the list.\n"


class TaskList:
    """
    Ordered, write-through task collection.

    With a repo attached, the initial contents come from repo.load() and every
    mutation is followed by repo.save() of the whole list. A TaskList built
    from plain tasks (e.g. a find() result) has no repo and never persists.
    """

    def __init__(self, repo: TaskRepo | None = None, tasks: Iterable[Task] | None = None) -> None:
        self._repo = repo
        if tasks is not None:
            self._tasks: list[Task] = list(tasks)
        elif repo is not None:
            self._tasks = list(repo.load())
        else:
            self._tasks = []

    def _persist(self) -> None:
        if self._repo is not None:
            self._repo.save(list(self._tasks))

    def _check_index(self, index: int) -> None:
        # list indexing would silently accept negatives
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"task index {index} out of range (0..{len(self._tasks) - 1})")

    # ---- mutations ----

    def add_task(self, task: Task) -> None:
        self._tasks.append(task)
        self._persist()

    def mark_as_done(self, index: int) -> Task:
        self._check_index(index)
        self._tasks[index] = mark_done(self._tasks[index])
        self._persist()
        return self._tasks[index]

    def mark_as_undone(self, index: int) -> Task:
        self._check_index(index)
        self._tasks[index] = unmark_done(self._tasks[index])
        self._persist()
        return self._tasks[index]

    def tag_task(self, index: int, label: str) -> Task:
        self._check_index(index)
        self._tasks[index] = tag_task(self._tasks[index], label)
        self._persist()
        return self._tasks[index]

    def delete_task(self, index: int) -> Task:
        self._check_index(index)
        removed = self._tasks.pop(index)
        self._persist()
        logger.debug("Deleted task at index %d: %s", index, removed)
        return removed

    # ---- queries ----

    def get_task(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def list_length(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def contains_task(self, task: Task) -> bool:
        return any(t is task for t in self._tasks)

    def find(self, substring: str) -> TaskList:
        return TaskList(tasks=[t for t in self._tasks if substring in t.description])

    def render(self) -> str:
        if not self._tasks:
            return EMPTY_LIST_MESSAGE
        return "".join(f"{i}. {task}\n" for i, task in enumerate(self._tasks, start=1))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __contains__(self, task: object) -> bool:
        return any(t is task for t in self._tasks)

    def __str__(self) -> str:
        return self.render()
