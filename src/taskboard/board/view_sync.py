# src/taskboard/board/view_sync.py

"""
View synchronization.

Key invariants:
- the view is always rebuilt from the repository's current content
  (never patched incrementally),
- only tasks of the active board are visible,
- inside a column, tasks keep their collection order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from ..tasks.task_models import COLUMNS, Task, TaskStatus
from .projection import boards_from, resolve_active_board

if TYPE_CHECKING:
    from ..core.state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BoardView:
    """Snapshot of what should currently be on screen."""

    boards: list[str]
    active_board: str
    columns: dict[TaskStatus, list[Task]] = field(default_factory=dict)
    show_sidebar: bool = True
    light_theme: bool = False

    def task_count(self) -> int:
        return sum(len(v) for v in self.columns.values())


def visible_tasks_by_column(
    tasks: Iterable[Task],
    active_board: str,
) -> dict[TaskStatus, list[Task]]:
    if not active_board:
        return {}
    out: dict[TaskStatus, list[Task]] = {status: [] for status in COLUMNS}
    for task in tasks:
        if task.board == active_board:
            out[task.status].append(task)
    return out


class ViewSynchronizer:
    """Recomputes the BoardView and hands it to the renderer."""

    def refresh(self, state: AppState) -> BoardView:
        tasks = state.repo.list_tasks()
        boards = boards_from(tasks)

        session = state.session
        active = session.active_board
        if active not in boards:
            # The active board lost its last task (or never existed).
            active = resolve_active_board(boards, None)
        if active != session.active_board:
            logger.info("Active board %r is gone; switching to %r.", session.active_board, active)
            session = replace(session, active_board=active)
            if active:
                state.prefs.set_active_board(active)
            state.session = session

        view = BoardView(
            boards=boards,
            active_board=session.active_board,
            columns=visible_tasks_by_column(tasks, session.active_board),
            show_sidebar=session.show_sidebar,
            light_theme=session.light_theme,
        )
        state.last_view = view
        logger.debug(
            "View refreshed board=%r boards=%d visible=%d",
            view.active_board,
            len(boards),
            view.task_count(),
        )
        state.renderer.render(view)
        return view
