"""Exceptions raised by the task store and its persistence layer.

"Already completed" is not an error; see store.CompletionOutcome.
"""
from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for all tasktracker errors."""


class InvalidInput(TaskTrackerError, ValueError):
    """Empty description, or an id that is not an integer."""


class NotFound(TaskTrackerError, LookupError):
    def __init__(self, task_id: int):
        super().__init__(f"Task with ID {task_id} not found!")
        self.task_id = task_id


class MalformedRecord(TaskTrackerError, ValueError):
    """A persisted line that does not describe a valid task."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class PersistenceUnavailable(TaskTrackerError, OSError):
    """The data file could not be read or written."""
