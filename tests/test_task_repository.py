# tests/test_task_repository.py

from __future__ import annotations

import pytest

from taskboard.core.errors import StoreUnavailable, TaskNotFound, ValidationError
from taskboard.store.kv_store import TASKS_KEY, KeyValueStore, initialize_data
from taskboard.store.seed import INITIAL_DATA
from taskboard.tasks.task_models import TaskStatus
from taskboard.tasks.task_repository import TaskRepository

from .fakes import MemoryKV


def test_create_then_list_contains_exactly_one_new_task(repo: TaskRepository) -> None:
    first = repo.create_task({"title": "A", "status": "todo", "board": "B1"})
    created = repo.create_task(
        {"title": "X", "description": "details", "status": "doing", "board": "B1"}
    )

    tasks = repo.list_tasks()
    assert [t.id for t in tasks] == [first.id, created.id]
    matching = [t for t in tasks if t.id == created.id]
    assert len(matching) == 1
    t = matching[0]
    assert (t.title, t.description, t.status, t.board) == ("X", "details", TaskStatus.DOING, "B1")
    assert len({t.id for t in tasks}) == len(tasks)


def test_ids_stay_unique_when_created_in_the_same_millisecond(
    repo: TaskRepository, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("taskboard.tasks.task_repository.time.time", lambda: 1_700_000_000.0)
    ids = [repo.create_task({"title": f"t{i}", "status": "todo", "board": "B"}).id for i in range(3)]
    assert ids == [1_700_000_000_000, 1_700_000_000_001, 1_700_000_000_002]


@pytest.mark.parametrize(
    "fields",
    [
        {"title": "", "status": "todo", "board": "B"},
        {"title": "   ", "status": "todo", "board": "B"},
        {"status": "todo", "board": "B"},
        {"title": "T", "status": "later", "board": "B"},
        {"title": "T", "board": "B"},
    ],
)
def test_create_rejects_invalid_fields_without_writing(fields) -> None:
    kv = MemoryKV()
    repo = TaskRepository(kv)
    with pytest.raises(ValidationError):
        repo.create_task(fields)
    assert kv.writes == []
    assert repo.list_tasks() == []


def test_patch_status_changes_only_status(repo: TaskRepository) -> None:
    task = repo.create_task({"title": "Write docs", "description": "all of them", "status": "todo", "board": "B"})
    before = task.to_dict()

    updated = repo.patch_task(task.id, {"status": "done"})

    after = repo.get_task(task.id)
    assert after is not None
    assert updated.to_dict() == after.to_dict()
    assert after.status is TaskStatus.DONE
    for key in ("id", "title", "description", "board"):
        assert after.to_dict()[key] == before[key]


def test_patch_missing_task_raises_not_found_and_changes_nothing() -> None:
    kv = MemoryKV()
    repo = TaskRepository(kv)
    repo.create_task({"title": "A", "status": "todo", "board": "B"})
    snapshot = kv.data[TASKS_KEY]

    with pytest.raises(TaskNotFound):
        repo.patch_task(12345, {"title": "ghost"})
    assert kv.data[TASKS_KEY] == snapshot


def test_patch_validates_supplied_fields(repo: TaskRepository) -> None:
    task = repo.create_task({"title": "A", "status": "todo", "board": "B"})
    with pytest.raises(ValidationError):
        repo.patch_task(task.id, {"title": ""})
    with pytest.raises(ValidationError):
        repo.patch_task(task.id, {"status": "blocked"})
    with pytest.raises(ValidationError):
        repo.patch_task(task.id, {"id": 1})
    assert repo.get_task(task.id) == task


def test_delete_is_idempotent(repo: TaskRepository) -> None:
    keep = repo.create_task({"title": "keep", "status": "todo", "board": "B"})
    gone = repo.create_task({"title": "gone", "status": "todo", "board": "B"})

    removed = repo.delete_task(gone.id)
    assert removed.id == gone.id
    assert [t.id for t in repo.list_tasks()] == [keep.id]

    with pytest.raises(TaskNotFound):
        repo.delete_task(gone.id)
    assert [t.id for t in repo.list_tasks()] == [keep.id]


@pytest.mark.parametrize("raw", ["{not json", '{"id": 1}', '"tasks"', "42"])
def test_malformed_collection_lists_as_empty(raw: str) -> None:
    repo = TaskRepository(MemoryKV({TASKS_KEY: raw}))
    assert repo.list_tasks() == []


def test_malformed_entries_are_skipped() -> None:
    raw = (
        '[{"id": 1, "title": "ok", "description": "", "status": "todo", "board": "B"},'
        ' "junk",'
        ' {"id": "2", "title": "string id"},'
        ' {"id": 3},'
        ' {"id": 4, "title": "odd status", "status": "archived", "board": "B"}]'
    )
    repo = TaskRepository(MemoryKV({TASKS_KEY: raw}))
    tasks = repo.list_tasks()
    assert [t.id for t in tasks] == [1, 4]
    assert tasks[1].status is TaskStatus.TODO


def test_failed_read_does_not_overwrite_stored_tasks(
    store: KeyValueStore, monkeypatch: pytest.MonkeyPatch
) -> None:
    initialize_data(store)
    repo = TaskRepository(store)
    snapshot = store.load(TASKS_KEY)

    def locked(key: str) -> str | None:
        raise StoreUnavailable("database is locked")

    monkeypatch.setattr(store, "_read", locked)

    with pytest.raises(StoreUnavailable):
        repo.create_task({"title": "new", "status": "todo", "board": "Roadmap"})
    with pytest.raises(StoreUnavailable):
        repo.delete_task(1)

    monkeypatch.undo()
    assert store.load(TASKS_KEY) == snapshot
    assert len(repo.list_tasks()) == len(INITIAL_DATA)


@pytest.mark.parametrize(
    "raw",
    [
        '[{"id": 1, "title": "a", "status": "todo", "board": "B"}, {"id": 2, "ti',
        '{"id": 1}',
        '[{"id": 1, "title": "a", "status": "todo", "board": "B"}, "junk"]',
    ],
)
def test_unreadable_collection_blocks_mutations(raw: str) -> None:
    kv = MemoryKV({TASKS_KEY: raw})
    repo = TaskRepository(kv)

    with pytest.raises(StoreUnavailable):
        repo.create_task({"title": "X", "status": "todo", "board": "B"})
    with pytest.raises(StoreUnavailable):
        repo.patch_task(1, {"status": "done"})
    with pytest.raises(StoreUnavailable):
        repo.delete_task(1)

    assert kv.data[TASKS_KEY] == raw
    assert kv.writes == []


def test_dropped_write_is_reported() -> None:
    kv = MemoryKV()
    kv.save = lambda key, text: False
    repo = TaskRepository(kv)

    with pytest.raises(StoreUnavailable):
        repo.create_task({"title": "X", "status": "todo", "board": "B"})
