# src/nathanbot/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the file-backed TaskStore into a TaskList,
- returns the AppState used by connectors.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(settings: Settings) -> TaskStore:
    return TaskStore(settings.tasks_text_path, settings.tasks_snapshot_path)


def create_initial_state(*, settings: Settings | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings are injectable for tests; if None, falls back to get_settings().
    The task list is loaded here; a missing or corrupt snapshot yields an empty list.
    """
    if settings is None:
        settings = get_settings()

    task_list = TaskList(create_task_store(settings))
    logger.info(
        "Task list ready: %d tasks (snapshot=%s)",
        task_list.list_length(),
        settings.tasks_snapshot_path,
    )
    return AppState(settings=settings, task_list=task_list)
