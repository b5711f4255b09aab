# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the store and the rendering side swappable and makes testing easier.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..board.view_sync import BoardView
    from ..tasks.task_models import Task


class KeyValueBackend(Protocol):
    """
    Whole-value text storage (load/save by key).

    load() degrades to None on failure; fetch() raises StoreUnavailable.
    """

    def fetch(self, key: str) -> str | None: ...
    def load(self, key: str) -> str | None: ...
    def save(self, key: str, text: str) -> bool: ...


class TaskRepo(Protocol):
    def list_tasks(self) -> list[Task]: ...
    def get_task(self, task_id: int) -> Task | None: ...
    def create_task(self, fields: Mapping[str, Any]) -> Task: ...
    def patch_task(self, task_id: int, fields: Mapping[str, Any]) -> Task: ...
    def delete_task(self, task_id: int) -> Task: ...


class Renderer(Protocol):
    """
    Rendering collaborator: paints a complete BoardView.

    Always receives the full view; it never has to patch what is on screen.
    """

    def render(self, view: BoardView) -> None: ...
