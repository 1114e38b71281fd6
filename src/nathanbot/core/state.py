# src/nathanbot/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings
from ..tasks.task_list import TaskList


@dataclass
class AppState:
    # Settings live on the state so connectors don't re-read config.
    settings: Settings
    task_list: TaskList
