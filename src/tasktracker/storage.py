"""Persistence helpers (read/write) for the task record file.

One record per line, see models for the format. These helpers only move
lines between disk and memory and raise PersistenceUnavailable on I/O
failure; the best-effort policy (missing data means an empty store, a failed
write is reported but never fatal) lives in TaskStore.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from .errors import MalformedRecord, PersistenceUnavailable
from .models import IdCounter, Task

logger = logging.getLogger(__name__)

ENCODING = 'utf-8'


class Storage:
    @staticmethod
    def read_lines(path: Path) -> List[bytes]:
        """Return the non-blank raw lines of the file, trailing CR removed.

        Lines are left undecoded so one bad byte only spoils its own line.
        Missing file -> empty list.
        """
        if not path.exists():
            return []
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise PersistenceUnavailable(f"cannot read {path}: {exc}") from exc
        return [line.rstrip(b'\r') for line in raw.split(b'\n') if line.strip()]

    @staticmethod
    def decode_line(raw: bytes) -> str:
        try:
            return raw.decode(ENCODING)
        except UnicodeDecodeError:
            raise MalformedRecord(repr(raw), f"not valid {ENCODING}") from None

    @staticmethod
    def write_lines(path: Path, lines: Iterable[str]) -> None:
        """Overwrite the file with the given lines (newline terminated)."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding=ENCODING, newline='\n') as f:
                for line in lines:
                    f.write(line + '\n')
        except OSError as exc:
            raise PersistenceUnavailable(f"cannot write {path}: {exc}") from exc

    @staticmethod
    def load_tasks(path: Path, ids: IdCounter) -> Tuple[List[Task], int]:
        """Parse every record in file order.

        Undecodable lines, malformed records and records repeating an id
        already loaded are dropped. Returns (tasks, number_of_dropped_lines).
        """
        tasks: List[Task] = []
        seen = set()
        dropped = 0
        for raw in Storage.read_lines(path):
            try:
                line = Storage.decode_line(raw)
                task = Task.from_record(line, ids)
                if task.id in seen:
                    raise MalformedRecord(line, f"duplicate id {task.id}")
            except MalformedRecord as exc:
                logger.debug("Skipping record in %s: %s", path, exc)
                dropped += 1
                continue
            seen.add(task.id)
            tasks.append(task)
        return tasks, dropped

    @staticmethod
    def save_tasks(path: Path, tasks: Iterable[Task]) -> None:
        Storage.write_lines(path, (task.to_record() for task in tasks))
