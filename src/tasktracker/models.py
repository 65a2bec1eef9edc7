"""Data models for the task tracker.

Exposes the Task dataclass, the IdCounter that hands out task ids, and the
one-line record format used by storage:

    <id>,<description>,<completed:0|1>

Commas and backslashes in a description are backslash-escaped on write so
the record always splits into three fields. Line breaks never reach a record:
they are folded into spaces when a description is set. A line that does not
split into three fields with escapes honoured is retried as a plain split,
which reads older unescaped files whose descriptions end in a backslash.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List

from .errors import InvalidInput, MalformedRecord

DELIMITER = ','
ESCAPE = '\\'
_ESCAPES = {ESCAPE: ESCAPE, DELIMITER: DELIMITER}
_LINE_BREAKS = str.maketrans({"\r": " ", "\n": " "})


class IdCounter:
    """Monotonic id source owned by a TaskStore.

    Ids are never handed out twice: allocate() always returns a value larger
    than every id previously allocated or observed.
    """

    def __init__(self, start: int = 1):
        self.next_id: int = start

    def allocate(self) -> int:
        nid = self.next_id
        self.next_id += 1
        return nid

    def observe(self, task_id: int) -> None:
        if task_id >= self.next_id:
            self.next_id = task_id + 1


@dataclass
class Task:
    """A single to-do item.

    Fields:
        id: Unique integer id, assigned by the owning store's IdCounter.
        description: Non-empty, single logical line of text.
        completed: Completion flag; False for fresh tasks.
    """
    id: int
    description: str
    completed: bool = False

    @classmethod
    def create(cls, description: str, ids: IdCounter) -> "Task":
        description = _one_line(description)
        _require_description(description)
        return cls(id=ids.allocate(), description=description)

    @classmethod
    def reconstruct(cls, task_id: int, description: str, completed: bool, ids: IdCounter) -> "Task":
        """Rebuild a persisted task; advances ids past task_id."""
        ids.observe(task_id)
        return cls(id=task_id, description=description, completed=completed)

    def mark_completed(self) -> None:
        self.completed = True

    def mark_pending(self) -> None:
        self.completed = False

    def set_description(self, description: str) -> None:
        description = _one_line(description)
        _require_description(description)
        self.description = description

    # -------------------- record format --------------------
    def to_record(self) -> str:
        flag = '1' if self.completed else '0'
        return DELIMITER.join((str(self.id), escape(self.description), flag))

    @classmethod
    def from_record(cls, line: str, ids: IdCounter) -> "Task":
        """Parse one record line; raises MalformedRecord instead of guessing."""
        fields = split_record(line)
        if len(fields) != 3:
            fields = line.split(DELIMITER)
        if len(fields) != 3:
            raise MalformedRecord(line, f"expected 3 fields, got {len(fields)}")
        raw_id, description, flag = fields
        try:
            task_id = int(raw_id)
        except ValueError:
            raise MalformedRecord(line, "id is not an integer") from None
        if flag not in ('0', '1'):
            raise MalformedRecord(line, "completed flag must be 0 or 1")
        if not description.strip():
            raise MalformedRecord(line, "empty description")
        return cls.reconstruct(task_id, description, flag == '1', ids)


def _one_line(description: str) -> str:
    return (description or '').translate(_LINE_BREAKS)


def _require_description(description: str) -> None:
    if not description or not description.strip():
        raise InvalidInput("Task description cannot be empty!")


def escape(text: str) -> str:
    return ''.join(ESCAPE + ch if ch in _ESCAPES else ch for ch in text)


def split_record(line: str) -> List[str]:
    """Split on unescaped delimiters, unescaping each field.

    Unknown escape sequences (and a trailing lone backslash) are kept as-is.
    """
    fields: List[str] = []
    current: List[str] = []
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == ESCAPE and i + 1 < len(line):
            nxt = line[i + 1]
            if nxt in _ESCAPES:
                current.append(_ESCAPES[nxt])
            else:
                current.append(ch + nxt)
            i += 2
            continue
        if ch == DELIMITER:
            fields.append(''.join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append(''.join(current))
    return fields
