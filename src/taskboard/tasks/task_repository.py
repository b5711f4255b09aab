# src/taskboard/tasks/task_repository.py

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping
from typing import Any

from ..core.errors import StoreUnavailable, TaskNotFound, ValidationError
from ..core.ports import KeyValueBackend
from ..store.kv_store import TASKS_KEY
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

PATCHABLE_FIELDS = frozenset({"title", "description", "status", "board"})


class TaskRepository:
    """
    CRUD over the task collection.

    The collection is stored as one JSON array under a single key, so every
    mutation is a whole read-modify-write. This class is the only writer of
    that key; id uniqueness and field validation are enforced here.
    """

    def __init__(self, store: KeyValueBackend) -> None:
        self._store = store

    # ---- serialization ----

    @staticmethod
    def _task_from_raw(raw: Any) -> Task | None:
        if not isinstance(raw, dict):
            return None
        tid = raw.get("id")
        title = raw.get("title")
        if isinstance(tid, bool) or not isinstance(tid, int) or title is None:
            return None
        return Task(
            id=tid,
            title=str(title),
            description=str(raw.get("description") or ""),
            status=TaskStatus.from_raw(raw.get("status")),
            board=str(raw.get("board") or ""),
        )

    def _save_all(self, tasks: list[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)
        if not self._store.save(TASKS_KEY, payload):
            raise StoreUnavailable("task collection could not be written")

    def _load_for_update(self) -> list[Task]:
        """
        Strict read used before every write.

        Only an absent key counts as an empty collection. A store that cannot
        be read, or a blob that cannot be parsed back into tasks, raises
        StoreUnavailable so the subsequent save never overwrites it.
        """
        raw = self._store.fetch(TASKS_KEY)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise StoreUnavailable("stored task collection is not valid JSON") from e
        if not isinstance(data, list):
            raise StoreUnavailable("stored task collection is not a list")

        out: list[Task] = []
        for item in data:
            task = self._task_from_raw(item)
            if task is None:
                raise StoreUnavailable(f"stored task collection has a malformed entry: {item!r}")
            out.append(task)
        return out

    @staticmethod
    def _validate_title(title: Any) -> str:
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("title is required")
        return title

    @staticmethod
    def _validate_status(status: Any) -> TaskStatus:
        if not TaskStatus.is_known(status):
            raise ValidationError(f"unknown status: {status!r}")
        return TaskStatus(status)

    @staticmethod
    def _next_id(tasks: list[Task]) -> int:
        candidate = int(time.time() * 1000)
        highest = max((t.id for t in tasks), default=0)
        return max(candidate, highest + 1)

    # ---- public API ----

    def list_tasks(self) -> list[Task]:
        raw = self._store.load(TASKS_KEY)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored task collection is not valid JSON; treating as empty.")
            return []
        if not isinstance(data, list):
            logger.warning("Stored task collection is not a list; treating as empty.")
            return []

        out: list[Task] = []
        for item in data:
            task = self._task_from_raw(item)
            if task is None:
                logger.warning("Skipping malformed task entry: %r", item)
                continue
            out.append(task)
        return out

    def get_task(self, task_id: int) -> Task | None:
        for task in self.list_tasks():
            if task.id == task_id:
                return task
        return None

    def create_task(self, fields: Mapping[str, Any]) -> Task:
        title = self._validate_title(fields.get("title"))
        status = self._validate_status(fields.get("status"))

        tasks = self._load_for_update()
        task = Task(
            id=self._next_id(tasks),
            title=title,
            description=str(fields.get("description") or ""),
            status=status,
            board=str(fields.get("board") or ""),
        )
        tasks.append(task)
        self._save_all(tasks)
        logger.debug("Task created id=%s board=%s status=%s", task.id, task.board, task.status)
        return task

    def patch_task(self, task_id: int, fields: Mapping[str, Any]) -> Task:
        unknown = set(fields) - PATCHABLE_FIELDS
        if unknown:
            raise ValidationError(f"cannot patch fields: {', '.join(sorted(unknown))}")

        tasks = self._load_for_update()
        for task in tasks:
            if task.id == task_id:
                break
        else:
            raise TaskNotFound(task_id)

        # Validate everything before touching the record.
        title = self._validate_title(fields["title"]) if "title" in fields else task.title
        status = self._validate_status(fields["status"]) if "status" in fields else task.status

        task.title = title
        task.status = status
        if "description" in fields:
            task.description = str(fields["description"] or "")
        if "board" in fields:
            task.board = str(fields["board"] or "")

        self._save_all(tasks)
        logger.debug("Task patched id=%s fields=%s", task_id, sorted(fields))
        return task

    def delete_task(self, task_id: int) -> Task:
        tasks = self._load_for_update()
        for idx, task in enumerate(tasks):
            if task.id == task_id:
                del tasks[idx]
                self._save_all(tasks)
                logger.debug("Task deleted id=%s", task_id)
                return task
        raise TaskNotFound(task_id)
