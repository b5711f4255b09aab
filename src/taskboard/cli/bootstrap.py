# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- seeds the store on first run,
- wires store/repository/workflow/renderer into AppState,
- restores the session (active board, sidebar, theme) from preferences.
"""

from __future__ import annotations

import logging

from ..board.projection import load_session
from ..board.view_sync import ViewSynchronizer
from ..config import get_settings
from ..core.ports import Renderer
from ..core.state import AppState
from ..core.workflow import EditAddWorkflow
from ..store.kv_store import KeyValueStore, initialize_data
from ..store.preferences import Preferences
from ..tasks.task_repository import TaskRepository

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, renderer: Renderer, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings are injectable to keep tests free of hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = KeyValueStore(settings.store_path)
    if getattr(settings, "seed_on_first_run", True):
        cold = initialize_data(store)
        logger.debug("Store start: %s", "cold" if cold else "warm")

    prefs = Preferences(store)
    repo = TaskRepository(store)
    sync = ViewSynchronizer()

    state: AppState
    workflow = EditAddWorkflow(repo, on_change=lambda: sync.refresh(state))

    state = AppState(
        settings=settings,
        store=store,
        prefs=prefs,
        repo=repo,
        renderer=renderer,
        workflow=workflow,
        session=load_session(prefs, repo.list_tasks()),
    )
    logger.info(
        "Session restored board=%r sidebar=%s light=%s",
        state.session.active_board,
        state.session.show_sidebar,
        state.session.light_theme,
    )
    return state
