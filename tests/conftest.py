# tests/conftest.py

from __future__ import annotations

import logging
import os
from pathlib import Path

# Colours are resolved at import time; keep rendered output plain.
os.environ["NO_COLOR"] = "1"

import pytest  # noqa: E402

from tasktracker.config import Settings  # noqa: E402
from tasktracker.store import TaskStore  # noqa: E402


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.txt"


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    s = TaskStore(tasks_path)
    s.load()
    return s


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing every path into tmp_path."""
    return Settings(
        tasks_file=tmp_path / "tasks.txt",
        data_dir=tmp_path / "logs",
        log_level="WARNING",
        autosave=True,
        clear_screen=False,
    )


@pytest.fixture()
def isolated_logging():
    """Restore root logger handlers/level after code that calls setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
