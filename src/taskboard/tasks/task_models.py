# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Board column keys, in display order.
    """

    TODO = "todo"
    DOING = "doing"
    DONE = "done"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.TODO
        try:
            return cls(raw)
        except ValueError:
            return cls.TODO

    @classmethod
    def is_known(cls, raw: Any) -> bool:
        return isinstance(raw, str) and raw in cls._value2member_map_


COLUMNS: tuple[TaskStatus, ...] = tuple(TaskStatus)


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    status: TaskStatus
    board: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "board": self.board,
        }
