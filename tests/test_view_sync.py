# tests/test_view_sync.py

from __future__ import annotations

from dataclasses import replace

from taskboard.board.view_sync import ViewSynchronizer, visible_tasks_by_column
from taskboard.core.state import AppState
from taskboard.tasks.task_models import COLUMNS, Task, TaskStatus

from .fakes import RecordingRenderer


def _task(tid: int, board: str, status: TaskStatus) -> Task:
    return Task(id=tid, title=f"t{tid}", description="", status=status, board=board)


def test_only_active_board_is_visible_and_order_is_kept() -> None:
    tasks = [
        _task(1, "A", TaskStatus.TODO),
        _task(2, "B", TaskStatus.TODO),
        _task(3, "A", TaskStatus.DONE),
        _task(4, "A", TaskStatus.TODO),
        _task(5, "B", TaskStatus.DOING),
    ]
    cols = visible_tasks_by_column(tasks, "A")

    assert list(cols) == list(COLUMNS)
    assert [t.id for t in cols[TaskStatus.TODO]] == [1, 4]
    assert cols[TaskStatus.DOING] == []
    assert [t.id for t in cols[TaskStatus.DONE]] == [3]
    assert all(t.board == "A" for col in cols.values() for t in col)


def test_no_active_board_renders_no_columns() -> None:
    assert visible_tasks_by_column([_task(1, "", TaskStatus.TODO)], "") == {}


def test_refresh_renders_full_view(state: AppState, renderer: RecordingRenderer) -> None:
    state.repo.create_task({"title": "one", "status": "todo", "board": "Work"})
    state.repo.create_task({"title": "two", "status": "doing", "board": "Home"})
    state.session = replace(state.session, active_board="Work")

    view = ViewSynchronizer().refresh(state)

    assert renderer.last is view
    assert state.last_view is view
    assert view.boards == ["Work", "Home"]
    assert renderer.visible_titles() == {"todo": ["one"], "doing": [], "done": []}


def test_refresh_moves_off_a_board_that_lost_its_last_task(
    state: AppState, renderer: RecordingRenderer
) -> None:
    gone = state.repo.create_task({"title": "only", "status": "todo", "board": "Temp"})
    state.repo.create_task({"title": "stay", "status": "todo", "board": "Main"})
    state.session = replace(state.session, active_board="Temp")

    state.repo.delete_task(gone.id)
    view = ViewSynchronizer().refresh(state)

    assert view.active_board == "Main"
    assert state.session.active_board == "Main"
    assert state.prefs.active_board() == "Main"


def test_refresh_with_empty_store_shows_no_board(state: AppState, renderer: RecordingRenderer) -> None:
    view = ViewSynchronizer().refresh(state)
    assert view.boards == []
    assert view.active_board == ""
    assert view.columns == {}
    assert view.task_count() == 0
