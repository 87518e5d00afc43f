"""Models package."""

from .task import Task, TaskCreate, TaskStatus, TaskStatusUpdate

__all__ = [
    "TaskStatus",
    "Task",
    "TaskCreate",
    "TaskStatusUpdate",
]
