# src/vibe_tasks/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path
from typing import Any

from .task_models import Category, Priority, Status, Task

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """The backing file could not be read, serialized or written."""


class StoreCorruptedError(StoreError):
    """The backing file exists but does not hold a valid task collection."""


class TaskStore:
    """
    JSON file task store.

    The whole collection lives in memory; every save rewrites the whole file:
    {"next_id": <int>, "tasks": [<task>, ...]}

    Ids come from next_id, which only ever grows, so a deleted task's id is
    never handed out again.

    No file locking: two processes saving at once means last writer wins.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []
        self._next_id = 1

    @property
    def path(self) -> Path:
        return self._path

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def tasks(self) -> list[Task]:
        return self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # ---- persistence ----

    def load(self) -> list[Task]:
        """
        Replace the in-memory collection with the file contents.

        Missing file -> empty collection. Anything that is not a valid
        collection raises StoreCorruptedError instead of being discarded.
        """
        if not self._path.exists():
            self._tasks = []
            self._next_id = 1
            logger.debug("No task file at %s; starting empty.", self._path)
            return self._tasks

        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Failed to read tasks file {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreCorruptedError(f"Tasks file {self._path} is not valid JSON: {e}") from e

        tasks, next_id = self._decode(data)
        self._tasks = tasks
        self._next_id = next_id
        logger.info("TaskStore loaded path=%s total=%s next_id=%s", self._path, len(tasks), next_id)
        return self._tasks

    def _decode(self, data: Any) -> tuple[list[Task], int]:
        if not isinstance(data, dict) or not isinstance(data.get("tasks"), list):
            raise StoreCorruptedError(
                f"Tasks file {self._path} must hold an object with a 'tasks' list"
            )

        tasks: list[Task] = []
        seen: set[int] = set()
        for i, item in enumerate(data["tasks"]):
            try:
                task = Task.from_json(item)
            except (ValueError, TypeError, OverflowError) as e:
                raise StoreCorruptedError(f"Tasks file {self._path}: bad task #{i + 1}: {e}") from e
            if task.id in seen:
                raise StoreCorruptedError(f"Tasks file {self._path}: duplicate task id {task.id}")
            seen.add(task.id)
            tasks.append(task)

        raw_next = data.get("next_id", 1)
        if not isinstance(raw_next, int) or isinstance(raw_next, bool) or raw_next < 1:
            raise StoreCorruptedError(f"Tasks file {self._path}: next_id must be a positive integer")

        # A hand-edited file may lag behind its own ids; never hand out a live one.
        next_id = max([raw_next, *(t.id + 1 for t in tasks)])
        return tasks, next_id

    def to_json(self) -> dict[str, Any]:
        return {"next_id": self._next_id, "tasks": [t.to_json() for t in self._tasks]}

    def save(self) -> None:
        """Serialize the whole collection and replace the backing file."""
        try:
            payload = json.dumps(self.to_json(), ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise StoreError(f"Failed to serialize tasks: {e}") from e

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove leftover %s", tmp)
            raise StoreError(f"Failed to save tasks to {self._path}: {e}") from e

        logger.debug("TaskStore saved path=%s total=%s", self._path, len(self._tasks))

    # ---- collection helpers ----

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(
        self,
        *,
        title: str,
        priority: Priority,
        created_at: datetime,
        description: str | None = None,
        due_date: datetime | None = None,
        categories: list[Category] | None = None,
    ) -> Task:
        if not title or not title.strip():
            raise ValueError("title is required")

        task = Task(
            id=self._next_id,
            title=title.strip(),
            description=description,
            priority=priority,
            status=Status.TODO,
            due_date=due_date,
            created_at=created_at,
            categories=list(categories or []),
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task added id=%s priority=%s due=%s", task.id, priority.value, due_date)
        return task

    def remove(self, task_id: int) -> Task | None:
        for pos, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[pos]
                logger.debug("Task removed id=%s", task_id)
                return task
        return None
