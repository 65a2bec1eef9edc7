# tests/test_display.py

from __future__ import annotations

from tasktracker.display import render_statistics, render_tasks, task_lines, visible_len
from tasktracker.models import Task
from tasktracker.store import TaskStatistics


def test_empty_list_shows_message_only() -> None:
    assert render_tasks("ALL TASKS", [], "No tasks available!") == ["", "No tasks available!"]


def test_table_rows() -> None:
    lines = render_tasks("ALL TASKS", [Task(1, "Buy milk"), Task(12, "Walk dog", True)], "unused")

    assert lines[1] == "ALL TASKS:"
    assert lines[3] == "  ID | STATUS  | DESCRIPTION"
    assert "   1 | Pending | Buy milk" in lines
    assert "  12 | Done    | Walk dog" in lines
    assert lines[-1] == "=" * 40


def test_long_description_wraps_under_its_column() -> None:
    lines = task_lines(Task(1, "alpha beta gamma"), 10)

    assert lines[0] == "   1 | Pending | alpha beta"
    assert lines[1] == " " * 14 + " | gamma"


def test_statistics_with_and_without_rate() -> None:
    empty = render_statistics(TaskStatistics(total=0, completed=0, pending=0))
    assert "Total Tasks: 0" in empty
    assert not any(line.startswith("Completion Rate") for line in empty)

    some = render_statistics(TaskStatistics(total=3, completed=1, pending=2, completion_rate=33.3))
    assert "Completion Rate: 33.3%" in some


def test_visible_len_ignores_ansi() -> None:
    assert visible_len("\x1b[1mabc\x1b[0m") == 3
