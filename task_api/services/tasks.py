"""Task lifecycle service."""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable

from ulid import ULID

from ..models import Task, TaskCreate, TaskStatus
from ..storage import TaskStore
from .results import Err, Failure, Ok, Result
from .validation import validate_id, validate_status, validate_title

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_task_id() -> str:
    return str(ULID())


class TaskService:
    """Create, read, update-status and delete tasks.

    Input is validated before storage is touched, so a failed call never
    leaves a partial change behind. Any status may replace any other,
    including itself.
    """

    def __init__(
        self,
        store: TaskStore,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ):
        self.store = store
        self._clock = clock or utc_now
        self._id_factory = id_factory or new_task_id
        # Serializes update_status (find -> replace) against other updates and removals.
        self._update_lock = threading.Lock()

    def list_all(self) -> list[Task]:
        """Get all tasks in creation order."""
        return self.store.list()

    def get_by_id(self, task_id: str) -> Result[Task]:
        """Get a task by ID."""
        task = self.store.find(task_id)
        if task is None:
            return Err(Failure.not_found(task_id))
        return Ok(task)

    def create(self, data: TaskCreate) -> Result[Task]:
        """Create a new PENDING task."""
        failure = validate_title(data.title)
        if failure:
            logger.info("Rejected task creation: %s", failure.message)
            return Err(failure)

        now = self._clock()
        task = Task(
            id=self._id_factory(),
            title=data.title,
            description=data.description,
            status=TaskStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        self.store.insert(task)
        logger.info("Created task %s", task.id)
        return Ok(task)

    def update_status(self, task_id: str, new_status: Any) -> Result[Task]:
        """Set a task's status and refresh its update time.

        The ID is checked before the status.
        """
        failure = validate_id(task_id) or validate_status(new_status)
        if failure:
            logger.info("Rejected status update for %r: %s", task_id, failure.message)
            return Err(failure)

        status = TaskStatus(new_status)
        with self._update_lock:
            task = self.store.find(task_id)
            if task is None:
                return Err(Failure.not_found(task_id))

            updated = task.model_copy(
                update={
                    "status": status,
                    "updated_at": max(self._clock(), task.updated_at),
                }
            )
            if self.store.replace(updated) is None:
                return Err(Failure.not_found(task_id))

        logger.info("Task %s status %s -> %s", task_id, task.status.value, status.value)
        return Ok(updated)

    def remove(self, task_id: str) -> Result[bool]:
        """Delete a task. Ok(False) means there was nothing to delete."""
        failure = validate_id(task_id)
        if failure:
            logger.info("Rejected removal of %r: %s", task_id, failure.message)
            return Err(failure)

        with self._update_lock:
            removed = self.store.remove(task_id)
        if removed:
            logger.info("Removed task %s", task_id)
        else:
            logger.debug("No task %s to remove", task_id)
        return Ok(removed)
