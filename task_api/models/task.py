"""Pydantic models for tasks."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TaskStatus(str, Enum):
    """Task status enumeration."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Task(CamelModel):
    """A stored task. Instances are immutable; updates produce copies."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime
    updated_at: datetime


class TaskCreate(CamelModel):
    """Request model for creating a task.

    The title is left untyped so that a missing or non-text title is rejected
    by the service with a creation failure instead of a parsing error.
    """

    title: Any = None
    description: str | None = None


class TaskStatusUpdate(CamelModel):
    """Request model for updating a task's status.

    Any value is accepted here; the service rejects non-members.
    """

    new_status: Any = None
