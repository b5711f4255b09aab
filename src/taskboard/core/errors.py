# src/taskboard/core/errors.py

from __future__ import annotations


class TaskBoardError(Exception):
    """Base class for all taskboard errors."""


class StoreUnavailable(TaskBoardError):
    """The persistent key-value store could not be read or written."""


class ValidationError(TaskBoardError):
    """Task fields violate the shape rules (empty title, unknown status, ...)."""


class TaskNotFound(TaskBoardError):
    """No task with the given id exists in the collection."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"task {task_id} not found")
        self.task_id = task_id
