"""Storage package."""

from .memory import TaskStore

__all__ = ["TaskStore"]
