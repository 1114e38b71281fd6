# src/nathanbot/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .task_models import Task, render_task, task_from_dict, task_to_dict

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class TaskStore:
    """
    File-backed task store.

    Two artifacts are written on every save:
    - a plain-text log, one rendered task per line (for humans, never read back)
    - a JSON snapshot, the only source used by load()

    Both are replaced wholesale via a temp file + os.replace, so a reader never
    sees a half-written file. Failures are logged, never raised: losing the
    on-disk copy is preferred over refusing to run.
    """

    def __init__(
        self,
        text_path: str | Path = "data/nathanbot.txt",
        snapshot_path: str | Path = "data/nathanbot.json",
    ) -> None:
        self._text_path = Path(text_path)
        self._snapshot_path = Path(snapshot_path)

    @property
    def text_path(self) -> Path:
        return self._text_path

    @property
    def snapshot_path(self) -> Path:
        return self._snapshot_path

    # ---- low-level helpers ----

    def _ensure_dirs(self) -> None:
        self._text_path.parent.mkdir(parents=True, exist_ok=True)
        self._snapshot_path.parent.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _replace_file(path: Path, content: str) -> None:
        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_text(content, "utf-8")
            os.replace(tmp, path)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise

    # ---- public API ----

    def save(self, tasks: Sequence[Task]) -> bool:
        """Overwrite both artifacts. Returns True only if both were written."""
        try:
            self._ensure_dirs()
        except OSError:
            logger.exception("Failed to create storage directory for %s", self._snapshot_path)
            return False

        ok = True

        try:
            self._replace_file(self._text_path, "".join(f"{render_task(t)}\n" for t in tasks))
        except OSError:
            logger.exception("Failed to save task log to %s", self._text_path)
            ok = False

        try:
            payload = {"version": SNAPSHOT_VERSION, "tasks": [task_to_dict(t) for t in tasks]}
            self._replace_file(
                self._snapshot_path, json.dumps(payload, ensure_ascii=False, indent=2)
            )
        except OSError:
            logger.exception("Failed to save task snapshot to %s", self._snapshot_path)
            ok = False

        if ok:
            logger.debug("Saved %d tasks to %s", len(tasks), self._snapshot_path)
        return ok

    def load(self) -> list[Task]:
        """Rebuild the task list from the snapshot; empty on missing/corrupt file."""
        path = self._snapshot_path
        if not path.exists():
            logger.info("No task snapshot at %s, starting with an empty list.", path)
            return []

        try:
            data = json.loads(path.read_text("utf-8"))
            if not isinstance(data, dict) or not isinstance(data.get("tasks"), list):
                raise ValueError("snapshot must be an object with a 'tasks' list")
            tasks = [task_from_dict(entry) for entry in data["tasks"]]
        except (OSError, ValueError, RecursionError):
            logger.exception("Failed to load tasks from %s, starting with an empty list.", path)
            return []

        logger.info("Loaded %d tasks from %s", len(tasks), path)
        return tasks
