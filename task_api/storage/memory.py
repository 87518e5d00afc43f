"""In-memory task storage."""

import threading

from ..models import Task


class TaskStore:
    """Process-local task storage keyed by ID.

    Tasks are kept in a dict, so listing preserves insertion order and
    lookups don't scan. Each operation holds the store lock; sequences of
    operations are the caller's concern.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list(self) -> list[Task]:
        """Get all tasks in insertion order."""
        with self._lock:
            return list(self._tasks.values())

    def find(self, task_id: str) -> Task | None:
        """Get a task by ID, or None if it isn't stored."""
        with self._lock:
            return self._tasks.get(task_id)

    def insert(self, task: Task) -> None:
        """Append a task. The ID is assumed to be new."""
        with self._lock:
            self._tasks[task.id] = task

    def replace(self, task: Task) -> Task | None:
        """Overwrite the stored task with the same ID, keeping its position."""
        with self._lock:
            if task.id not in self._tasks:
                return None
            self._tasks[task.id] = task
            return task

    def remove(self, task_id: str) -> bool:
        """Delete a task by ID."""
        with self._lock:
            return self._tasks.pop(task_id, None) is not None
