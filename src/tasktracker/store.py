"""Task store: ordered task list, id management, mutation and persistence.

Insertion order is display order; nothing here sorts by id or status.
With autosave on, every successful mutation rewrites the data file.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from .errors import NotFound, PersistenceUnavailable
from .models import IdCounter, Task
from .storage import Storage

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class CompletionOutcome(Enum):
    COMPLETED = "completed"
    ALREADY_COMPLETED = "already_completed"
    REOPENED = "reopened"
    ALREADY_PENDING = "already_pending"


@dataclass(frozen=True)
class TaskStatistics:
    total: int
    completed: int
    pending: int
    completion_rate: Optional[float] = None  # percent, one decimal; None when total == 0


class TaskStore:
    def __init__(self, path: PathLike = 'tasks.txt', autosave: bool = True):
        self.path: Path = Path(path)
        self.autosave: bool = autosave
        self._tasks: List[Task] = []
        self._ids = IdCounter()
        self.last_save_ok: bool = True
        # file that exists but failed to load; never overwritten
        self._unreadable: Optional[Path] = None

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    @property
    def next_id(self) -> int:
        return self._ids.next_id

    # -------------------- persistence --------------------
    def load(self, path: Optional[PathLike] = None) -> int:
        """Replace the in-memory tasks with the file contents.

        Returns the number of tasks loaded. An unreadable file leaves the
        store empty and is protected from save() until a later load of it
        succeeds. The id counter only ever moves forward.
        """
        target = Path(path) if path is not None else self.path
        try:
            tasks, dropped = Storage.load_tasks(target, self._ids)
        except PersistenceUnavailable as exc:
            logger.warning("Could not load tasks, starting empty: %s", exc)
            self._unreadable = target
            tasks, dropped = [], 0
        else:
            if self._unreadable == target:
                self._unreadable = None
        self._tasks = tasks
        if dropped:
            logger.info("Dropped %d malformed record(s) from %s", dropped, target)
        logger.debug("Loaded %d task(s) from %s next_id=%d", len(tasks), target, self._ids.next_id)
        return len(tasks)

    def save(self, path: Optional[PathLike] = None) -> bool:
        """Write all tasks in order. Returns False (and logs) on failure."""
        target = Path(path) if path is not None else self.path
        if target == self._unreadable:
            logger.warning("Not saving over %s: it could not be read at load time", target)
            self.last_save_ok = False
            return False
        try:
            Storage.save_tasks(target, self._tasks)
        except PersistenceUnavailable as exc:
            logger.warning("Could not save tasks: %s", exc)
            self.last_save_ok = False
            return False
        logger.debug("Saved %d task(s) to %s", len(self._tasks), target)
        self.last_save_ok = True
        return True

    def _changed(self) -> None:
        if self.autosave:
            self.save()

    # -------------------- queries --------------------
    def find_by_id(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _require(self, task_id: int) -> Task:
        task = self.find_by_id(task_id)
        if task is None:
            raise NotFound(task_id)
        return task

    def filter_pending(self) -> List[Task]:
        return [t for t in self._tasks if not t.completed]

    def filter_completed(self) -> List[Task]:
        return [t for t in self._tasks if t.completed]

    def statistics(self) -> TaskStatistics:
        total = len(self._tasks)
        completed = len(self.filter_completed())
        rate = round(completed / total * 100, 1) if total > 0 else None
        return TaskStatistics(total=total, completed=completed, pending=total - completed, completion_rate=rate)

    # -------------------- task operations --------------------
    def add(self, description: str) -> Task:
        task = Task.create((description or '').strip(), self._ids)
        self._tasks.append(task)
        logger.debug("Task added id=%d", task.id)
        self._changed()
        return task

    def mark_completed(self, task_id: int) -> CompletionOutcome:
        task = self._require(task_id)
        if task.completed:
            return CompletionOutcome.ALREADY_COMPLETED
        task.mark_completed()
        logger.debug("Task completed id=%d", task_id)
        self._changed()
        return CompletionOutcome.COMPLETED

    def mark_pending(self, task_id: int) -> CompletionOutcome:
        task = self._require(task_id)
        if not task.completed:
            return CompletionOutcome.ALREADY_PENDING
        task.mark_pending()
        logger.debug("Task reopened id=%d", task_id)
        self._changed()
        return CompletionOutcome.REOPENED

    def rename(self, task_id: int, description: str) -> Task:
        task = self._require(task_id)
        task.set_description((description or '').strip())
        logger.debug("Task renamed id=%d", task_id)
        self._changed()
        return task

    def delete(self, task_id: int) -> Task:
        task = self._require(task_id)
        self._tasks.remove(task)
        logger.debug("Task deleted id=%d", task_id)
        self._changed()
        return task

    def __str__(self) -> str:
        stats = self.statistics()
        return f'Tasks: {stats.total} total, {stats.pending} pending, {stats.completed} completed'
