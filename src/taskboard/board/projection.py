# src/taskboard/board/projection.py

"""
Board projection.

Boards are not stored: they are the distinct, non-empty `board` values
found on tasks, in first-seen order. A board disappears as soon as its last
task is gone.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from ..core.state import BoardSession
from ..store.preferences import Preferences
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

NO_BOARD = ""


def boards_from(tasks: Iterable[Task]) -> list[str]:
    # dict preserves insertion order
    return list(dict.fromkeys(t.board for t in tasks if t.board))


def resolve_active_board(boards: Sequence[str], persisted: str | None) -> str:
    if persisted and persisted in boards:
        return persisted
    if boards:
        return boards[0]
    return NO_BOARD


def load_session(prefs: Preferences, tasks: Iterable[Task]) -> BoardSession:
    """Build the start-up session from persisted preferences and current tasks."""
    boards = boards_from(tasks)
    persisted = prefs.active_board()
    active = resolve_active_board(boards, persisted)
    if persisted and active != persisted:
        logger.info("Persisted board %r no longer exists; using %r.", persisted, active)
    return BoardSession(
        active_board=active,
        show_sidebar=prefs.show_sidebar(),
        light_theme=prefs.light_theme(),
    )


def select_board(
    session: BoardSession,
    prefs: Preferences,
    name: str,
    boards: Sequence[str],
) -> BoardSession:
    if name not in boards:
        logger.warning("select_board ignored: unknown board %r", name)
        return session
    if name != session.active_board:
        logger.info("Active board -> %r", name)
    prefs.set_active_board(name)
    return replace(session, active_board=name)
