# src/taskboard/core/controller.py

"""
Command surface exposed to the rendering side.

The renderer never mutates state itself: it emits typed Commands, which are
queued and applied one at a time. Each command that changes anything ends
with a full view refresh.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

from ..board.projection import boards_from, select_board
from ..board.view_sync import BoardView, ViewSynchronizer
from .state import AppState

logger = logging.getLogger(__name__)


class CommandKind(StrEnum):
    SELECT_BOARD = "select_board"
    OPEN_ADD_MODAL = "open_add_modal"
    SUBMIT_ADD_MODAL = "submit_add_modal"
    OPEN_EDIT_MODAL = "open_edit_modal"
    SAVE_EDIT_MODAL = "save_edit_modal"
    DELETE_FROM_EDIT_MODAL = "delete_from_edit_modal"
    CANCEL_MODAL = "cancel_modal"
    TOGGLE_SIDEBAR = "toggle_sidebar"
    TOGGLE_THEME = "toggle_theme"


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    payload: Mapping[str, Any] = field(default_factory=dict)


class BoardController:
    def __init__(self, state: AppState, sync: ViewSynchronizer | None = None) -> None:
        self.state = state
        self.sync = sync or ViewSynchronizer()

    def refresh(self) -> BoardView:
        return self.sync.refresh(self.state)

    # ---- board ----

    def select_board(self, name: str) -> None:
        boards = boards_from(self.state.repo.list_tasks())
        new_session = select_board(self.state.session, self.state.prefs, name, boards)
        if new_session is self.state.session:
            return
        self.state.session = new_session
        self.refresh()

    # ---- modal ----

    def open_add_modal(self) -> None:
        self.state.workflow.open_add(board=self.state.session.active_board)

    def submit_add_modal(self, fields: Mapping[str, Any]) -> None:
        self.state.workflow.submit_add(fields)

    def open_edit_modal(self, task_id: int) -> None:
        task = self.state.repo.get_task(task_id)
        if task is None:
            logger.info("open_edit_modal ignored: task %s does not exist", task_id)
            return
        self.state.workflow.open_edit(task)

    def save_edit_modal(self, fields: Mapping[str, Any]) -> None:
        self.state.workflow.save_edit(fields)

    def delete_from_edit_modal(self) -> None:
        self.state.workflow.delete()

    def cancel_modal(self) -> None:
        self.state.workflow.cancel()

    # ---- preferences ----

    def toggle_sidebar(self, show: bool) -> None:
        self.state.prefs.set_show_sidebar(show)
        self.state.session = replace(self.state.session, show_sidebar=show)
        self.refresh()

    def toggle_theme(self) -> None:
        enabled = not self.state.session.light_theme
        self.state.prefs.set_light_theme(enabled)
        self.state.session = replace(self.state.session, light_theme=enabled)
        self.refresh()

    # ---- typed dispatch ----

    def dispatch(self, command: Command) -> None:
        p = command.payload
        kind = command.kind
        logger.debug("Dispatch %s payload=%s", kind, dict(p))

        if kind is CommandKind.SELECT_BOARD:
            self.select_board(str(p.get("name", "")))
        elif kind is CommandKind.OPEN_ADD_MODAL:
            self.open_add_modal()
        elif kind is CommandKind.SUBMIT_ADD_MODAL:
            self.submit_add_modal(p.get("fields") or {})
        elif kind is CommandKind.OPEN_EDIT_MODAL:
            self.open_edit_modal(int(p["task_id"]))
        elif kind is CommandKind.SAVE_EDIT_MODAL:
            self.save_edit_modal(p.get("fields") or {})
        elif kind is CommandKind.DELETE_FROM_EDIT_MODAL:
            self.delete_from_edit_modal()
        elif kind is CommandKind.CANCEL_MODAL:
            self.cancel_modal()
        elif kind is CommandKind.TOGGLE_SIDEBAR:
            self.toggle_sidebar(bool(p.get("show", not self.state.session.show_sidebar)))
        elif kind is CommandKind.TOGGLE_THEME:
            self.toggle_theme()


class CommandQueue:
    """FIFO of commands; drain() applies them strictly one after another."""

    def __init__(self, controller: BoardController) -> None:
        self._controller = controller
        self._pending: deque[Command] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def submit(self, command: Command) -> None:
        self._pending.append(command)

    def drain(self) -> int:
        done = 0
        while self._pending:
            self._controller.dispatch(self._pending.popleft())
            done += 1
        return done
