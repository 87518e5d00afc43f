"""Result values returned by the task service.

Expected failures (unknown task, malformed input) are returned as
``Err(Failure)`` instead of being raised, so that callers handle every
outcome explicitly. ``Failure.message`` carries the client-facing text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, Enum):
    """Kinds of expected task service failures."""

    NOT_FOUND = "not_found"
    INVALID_CREATION = "invalid_creation"
    INVALID_UPDATE = "invalid_update"


_MESSAGE_FORMATS = {
    FailureKind.NOT_FOUND: "Task with ID {detail} not found.",
    FailureKind.INVALID_CREATION: "Invalid task creation: {detail}",
    FailureKind.INVALID_UPDATE: "Invalid task. {detail}",
}


@dataclass(frozen=True)
class Failure:
    """An expected failure with its kind and detail text."""

    kind: FailureKind
    detail: str

    @classmethod
    def not_found(cls, task_id: str) -> "Failure":
        return cls(FailureKind.NOT_FOUND, task_id)

    @classmethod
    def invalid_creation(cls, detail: str) -> "Failure":
        return cls(FailureKind.INVALID_CREATION, detail)

    @classmethod
    def invalid_update(cls, detail: str) -> "Failure":
        return cls(FailureKind.INVALID_UPDATE, detail)

    @property
    def message(self) -> str:
        return _MESSAGE_FORMATS[self.kind].format(detail=self.detail)


class TaskError(Exception):
    """Raised by ``Err.unwrap()``."""

    def __init__(self, failure: Failure):
        super().__init__(failure.message)
        self.failure = failure


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed result."""

    failure: Failure

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise TaskError(self.failure)


Result = Union[Ok[T], Err]
