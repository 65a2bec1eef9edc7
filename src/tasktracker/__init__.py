"""Single-user terminal task tracker backed by a flat record file."""
from .errors import InvalidInput, MalformedRecord, NotFound, PersistenceUnavailable, TaskTrackerError
from .models import IdCounter, Task
from .store import CompletionOutcome, TaskStatistics, TaskStore

__version__ = "0.1.0"

__all__ = [
    'Task', 'IdCounter', 'TaskStore', 'CompletionOutcome', 'TaskStatistics',
    'TaskTrackerError', 'InvalidInput', 'NotFound', 'MalformedRecord', 'PersistenceUnavailable',
]
