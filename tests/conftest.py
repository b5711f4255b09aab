# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.cli.bootstrap import create_initial_state
from taskboard.core.controller import BoardController
from taskboard.core.state import AppState
from taskboard.store.kv_store import KeyValueStore
from taskboard.tasks.task_repository import TaskRepository

from .fakes import RecordingRenderer


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and core modules.

    A SimpleNamespace rather than the real config keeps unit tests isolated
    from the environment and any local .env file.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        store_path=tmp_path / "board.sqlite3",
        seed_on_first_run=False,
        console_enabled=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> KeyValueStore:
    return KeyValueStore(settings.store_path)


@pytest.fixture()
def repo(store: KeyValueStore) -> TaskRepository:
    return TaskRepository(store)


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def state(settings: SimpleNamespace, renderer: RecordingRenderer) -> AppState:
    """
    AppState wired through the real bootstrap on an empty, unseeded store.

    Real SQLite is used: the store's behaviour is part of what is tested.
    """
    return create_initial_state(renderer=renderer, settings=settings)


@pytest.fixture()
def controller(state: AppState) -> BoardController:
    return BoardController(state)
