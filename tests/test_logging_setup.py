# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from tasktracker.logging_setup import setup_logging


def test_setup_logging_writes_debug_to_file(tmp_path: Path, isolated_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)

    logging.getLogger("tasktracker.test").debug("hello from the test")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "tasktracker.log"
    assert "DEBUG tasktracker.test: hello from the test" in log_file.read_text(encoding="utf-8")


def test_setup_logging_replaces_handlers(tmp_path: Path, isolated_logging) -> None:
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)

    assert len(logging.getLogger().handlers) == 2


def test_unwritable_log_dir_falls_back_to_console(tmp_path: Path, isolated_logging) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    log_file = setup_logging(log_dir=blocker / "logs")

    assert log_file is None
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)
