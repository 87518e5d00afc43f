# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime, timezone

from task_api.models import Task, TaskStatus
from task_api.storage import TaskStore

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_task(task_id: str, title: str = "Task") -> Task:
    return Task(id=task_id, title=title, created_at=NOW, updated_at=NOW)


def test_list_is_empty_initially() -> None:
    store = TaskStore()
    assert store.list() == []
    assert len(store) == 0


def test_list_preserves_insertion_order() -> None:
    store = TaskStore()
    for task_id in ("b", "a", "c"):
        store.insert(make_task(task_id))

    assert [t.id for t in store.list()] == ["b", "a", "c"]


def test_find_returns_none_when_absent() -> None:
    store = TaskStore()
    store.insert(make_task("a"))

    assert store.find("a").id == "a"
    assert store.find("missing") is None


def test_replace_overwrites_in_place() -> None:
    store = TaskStore()
    store.insert(make_task("a"))
    store.insert(make_task("b"))

    updated = store.find("a").model_copy(update={"status": TaskStatus.COMPLETED})
    assert store.replace(updated) is updated

    assert [t.id for t in store.list()] == ["a", "b"]
    assert store.find("a").status == TaskStatus.COMPLETED


def test_replace_missing_task_returns_none() -> None:
    store = TaskStore()
    assert store.replace(make_task("ghost")) is None
    assert store.list() == []


def test_remove_reports_whether_something_was_deleted() -> None:
    store = TaskStore()
    store.insert(make_task("a"))
    store.insert(make_task("b"))

    assert store.remove("a") is True
    assert store.remove("a") is False
    assert [t.id for t in store.list()] == ["b"]


def test_stores_are_isolated() -> None:
    first, second = TaskStore(), TaskStore()
    first.insert(make_task("a"))

    assert second.list() == []
