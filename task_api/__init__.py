"""In-memory task management HTTP service."""

__version__ = "0.1.0"
