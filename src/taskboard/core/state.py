# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..store.preferences import Preferences
from .ports import KeyValueBackend, Renderer, TaskRepo

if TYPE_CHECKING:
    from ..board.view_sync import BoardView
    from .workflow import EditAddWorkflow


@dataclass(frozen=True, slots=True)
class BoardSession:
    """
    Session-wide view context.

    active_board == "" means there is no board to show.
    Instances are immutable; projection helpers return a new one on change.
    """

    active_board: str = ""
    show_sidebar: bool = True
    light_theme: bool = False


@dataclass
class AppState:
    # Settings are kept on the state for easy access in other modules.
    settings: Any

    store: KeyValueBackend
    prefs: Preferences
    repo: TaskRepo
    renderer: Renderer
    workflow: EditAddWorkflow

    session: BoardSession = field(default_factory=BoardSession)
    last_view: BoardView | None = None
