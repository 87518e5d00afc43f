"""Services package."""

from .results import Err, Failure, FailureKind, Ok, Result, TaskError
from .tasks import TaskService

__all__ = [
    "TaskService",
    "Ok",
    "Err",
    "Result",
    "Failure",
    "FailureKind",
    "TaskError",
]
