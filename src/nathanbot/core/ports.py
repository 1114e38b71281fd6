# src/nathanbot/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskList depends on this Protocol instead of the concrete file store,
so tests can swap in an in-memory repo.
"""

from typing import Protocol, Sequence

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-collection persistence: load everything, save everything."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Sequence[Task]) -> bool: ...
