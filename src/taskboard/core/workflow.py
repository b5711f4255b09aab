# src/taskboard/core/workflow.py

"""
Edit/Add modal workflow.

A small session-long state machine:

    CLOSED --open_add--> ADD_OPEN --submit(ok)--> CLOSED
                         ADD_OPEN --submit(invalid | store error)--> ADD_OPEN
                         ADD_OPEN --cancel--> CLOSED
    CLOSED --open_edit--> EDIT_OPEN --save | delete | cancel--> CLOSED

A store error keeps the open form (and its error) and mutates nothing.
Commands that do not apply to the current state are ignored.
Every successful mutation calls `on_change` so the view is rebuilt.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any

from ..tasks.task_models import Task, TaskStatus
from .errors import StoreUnavailable, TaskNotFound, ValidationError
from .ports import TaskRepo

logger = logging.getLogger(__name__)


class ModalState(StrEnum):
    CLOSED = "closed"
    ADD_OPEN = "add_open"
    EDIT_OPEN = "edit_open"


@dataclass(slots=True)
class TaskForm:
    """Transient form input; never persisted by itself."""

    title: str = ""
    description: str = ""
    status: str = TaskStatus.TODO.value
    board: str = ""

    @classmethod
    def from_task(cls, task: Task) -> TaskForm:
        return cls(
            title=task.title,
            description=task.description,
            status=task.status.value,
            board=task.board,
        )

    def merged(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        out = asdict(self)
        for key in out:
            if key in fields and fields[key] is not None:
                out[key] = fields[key]
        return out


class EditAddWorkflow:
    def __init__(self, repo: TaskRepo, on_change: Callable[[], None]) -> None:
        self._repo = repo
        self._on_change = on_change
        self.state = ModalState.CLOSED
        self.editing_id: int | None = None
        self.form = TaskForm()
        self.error: str | None = None

    def _close(self) -> None:
        self.state = ModalState.CLOSED
        self.editing_id = None
        self.form = TaskForm()
        self.error = None

    def _ignored(self, command: str) -> bool:
        logger.debug("Workflow ignored %s in state %s", command, self.state)
        return False

    # ---- add ----

    def open_add(self, board: str = "") -> bool:
        if self.state is not ModalState.CLOSED:
            return self._ignored("open_add")
        self.state = ModalState.ADD_OPEN
        self.form = TaskForm(board=board)
        self.error = None
        return True

    def submit_add(self, fields: Mapping[str, Any]) -> bool:
        if self.state is not ModalState.ADD_OPEN:
            return self._ignored("submit_add")

        data = self.form.merged(fields)
        try:
            if not str(data.get("board") or "").strip():
                raise ValidationError("board is required")
            task = self._repo.create_task(data)
        except ValidationError as e:
            self.error = str(e)
            logger.info("Add rejected: %s", e)
            return False
        except StoreUnavailable as e:
            self.error = f"could not save: {e}"
            logger.warning("Add failed, store unavailable: %s", e)
            return False

        logger.info("Task %s added to board %r", task.id, task.board)
        self._close()
        self._on_change()
        return True

    # ---- edit ----

    def open_edit(self, task: Task) -> bool:
        if self.state is not ModalState.CLOSED:
            return self._ignored("open_edit")
        self.state = ModalState.EDIT_OPEN
        self.editing_id = task.id
        self.form = TaskForm.from_task(task)
        self.error = None
        return True

    def save_edit(self, fields: Mapping[str, Any]) -> bool:
        if self.state is not ModalState.EDIT_OPEN or self.editing_id is None:
            return self._ignored("save_edit")

        data = self.form.merged(fields)
        patch = {k: data[k] for k in ("title", "description", "status")}
        if fields.get("board"):
            patch["board"] = fields["board"]

        try:
            self._repo.patch_task(self.editing_id, patch)
        except ValidationError as e:
            self.error = str(e)
            logger.info("Edit of task %s rejected: %s", self.editing_id, e)
            return False
        except StoreUnavailable as e:
            self.error = f"could not save: {e}"
            logger.warning("Edit of task %s failed, store unavailable: %s", self.editing_id, e)
            return False
        except TaskNotFound:
            # Already removed by an earlier command; nothing left to update.
            logger.info("Edit of task %s skipped: task no longer exists", self.editing_id)

        self._close()
        self._on_change()
        return True

    def delete(self) -> bool:
        if self.state is not ModalState.EDIT_OPEN or self.editing_id is None:
            return self._ignored("delete")

        try:
            self._repo.delete_task(self.editing_id)
        except TaskNotFound:
            logger.info("Delete of task %s skipped: task no longer exists", self.editing_id)
        except StoreUnavailable as e:
            self.error = f"could not delete: {e}"
            logger.warning("Delete of task %s failed, store unavailable: %s", self.editing_id, e)
            return False

        self._close()
        self._on_change()
        return True

    # ---- shared ----

    def cancel(self) -> bool:
        if self.state is ModalState.CLOSED:
            return self._ignored("cancel")
        self._close()
        return True
