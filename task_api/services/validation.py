"""Input checks for task operations.

Each check returns None when the input is acceptable, or the Failure to
report otherwise. None of them touch storage.
"""

from typing import Any

from ..models import TaskStatus
from .results import Failure


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_title(title: Any) -> Failure | None:
    """Reject a missing, empty or whitespace-only title."""
    if _is_blank(title):
        return Failure.invalid_creation("Task title is required.")
    return None


def validate_id(task_id: Any) -> Failure | None:
    """Reject a missing, empty or whitespace-only task ID."""
    if _is_blank(task_id):
        return Failure.invalid_update("Task ID is required.")
    return None


def validate_status(status: Any) -> Failure | None:
    """Reject anything that isn't a TaskStatus value."""
    try:
        TaskStatus(status)
    except ValueError:
        return Failure.invalid_update("Invalid or empty status value.")
    return None
