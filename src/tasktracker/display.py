"""Rendering of task tables and statistics for the terminal.

Functions return lists of lines instead of printing so the shell and the
one-shot commands can share them.
"""
from __future__ import annotations
import re
import shutil
import textwrap
from typing import List, Sequence

from .models import Task
from .store import TaskStatistics
from .theme import color, HEADER_COLOR, STATUS_COLOR, ID_COLOR, EMPTY_COLOR, BOLD

RULE_WIDTH = 40
STATS_RULE_WIDTH = 30
ID_WIDTH = 4
STATUS_LABELS = {False: 'Pending', True: 'Done'}
STATUS_WIDTH = max(len(label) for label in STATUS_LABELS.values())
SEP = ' | '
MIN_DESCRIPTION_WIDTH = 20
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def visible_len(s: str) -> int:
    return len(ANSI_RE.sub('', s))


def _description_width() -> int:
    term_width = shutil.get_terminal_size((80, 24)).columns
    return max(MIN_DESCRIPTION_WIDTH, term_width - ID_WIDTH - STATUS_WIDTH - 2 * len(SEP))


def task_lines(task: Task, width: int) -> List[str]:
    """One task as table row(s); long descriptions wrap under the description column."""
    wrapped = textwrap.wrap(task.description, width) or ['']
    label = STATUS_LABELS[task.completed].ljust(STATUS_WIDTH)
    status_col = STATUS_COLOR[task.completed]
    first = (color(str(task.id).rjust(ID_WIDTH), ID_COLOR) + SEP
             + color(label, status_col) + SEP + color(wrapped[0], status_col))
    indent = ' ' * (ID_WIDTH + len(SEP) + STATUS_WIDTH) + SEP
    return [first] + [indent + color(line, status_col) for line in wrapped[1:]]


def render_tasks(title: str, tasks: Sequence[Task], empty_message: str) -> List[str]:
    if not tasks:
        return ['', color(empty_message, EMPTY_COLOR)]
    width = _description_width()
    lines = [
        '',
        color(f'{title}:', HEADER_COLOR, BOLD),
        color('=' * RULE_WIDTH, HEADER_COLOR),
        'ID'.rjust(ID_WIDTH) + SEP + 'STATUS'.ljust(STATUS_WIDTH) + SEP + 'DESCRIPTION',
        color('-' * RULE_WIDTH, HEADER_COLOR),
    ]
    for task in tasks:
        lines.extend(task_lines(task, width))
    lines.append(color('=' * RULE_WIDTH, HEADER_COLOR))
    return lines


def render_statistics(stats: TaskStatistics) -> List[str]:
    lines = [
        '',
        color('TASK STATISTICS:', HEADER_COLOR, BOLD),
        color('=' * STATS_RULE_WIDTH, HEADER_COLOR),
        f'Total Tasks: {stats.total}',
        f'Completed: {stats.completed}',
        f'Pending: {stats.pending}',
    ]
    if stats.completion_rate is not None:
        lines.append(f'Completion Rate: {stats.completion_rate:.1f}%')
    lines.append(color('=' * STATS_RULE_WIDTH, HEADER_COLOR))
    return lines
