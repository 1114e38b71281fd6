# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from nathanbot.tasks.task_list import TaskList
from nathanbot.tasks.task_models import Deadline, Event, ToDo
from nathanbot.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap/state.

    A SimpleNamespace instead of the real config keeps tests independent
    of the process environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="NathanBot",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_text_path=data_dir / "nathanbot.txt",
        tasks_snapshot_path=data_dir / "nathanbot.json",
        log_dir=data_dir / "logs",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_text_path, settings.tasks_snapshot_path)


@pytest.fixture()
def sample_tasks() -> list:
    return [
        ToDo("read book"),
        Deadline("return book", datetime(2024, 3, 15, 18, 0), done=True),
        Event("book club", datetime(2024, 3, 20, 9, 30), datetime(2024, 3, 20, 11, 0), tag="fun"),
    ]


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def task_list(repo: FakeTaskRepo) -> TaskList:
    return TaskList(repo)
