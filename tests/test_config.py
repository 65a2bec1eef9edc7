# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasktracker.config import Settings

ENV_VARS = ("TASKS_FILE", "TASKS_DATA_DIR", "TASKS_LOG_LEVEL", "TASKS_AUTOSAVE", "TASKS_CLEAR_SCREEN")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()

    assert s.tasks_file == Path("tasks.txt")
    assert s.data_dir == Path(".local/tasktracker")
    assert s.log_level == "WARNING"
    assert s.autosave is True
    assert s.clear_screen is False


def test_values_from_environment(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKS_FILE", str(tmp_path / "todo.txt"))
    clean_env.setenv("TASKS_DATA_DIR", str(tmp_path / "logs"))
    clean_env.setenv("TASKS_LOG_LEVEL", "debug")
    clean_env.setenv("TASKS_AUTOSAVE", "off")
    clean_env.setenv("TASKS_CLEAR_SCREEN", "yes")

    s = Settings.from_env()

    assert s.tasks_file == tmp_path / "todo.txt"
    assert s.data_dir == tmp_path / "logs"
    assert s.log_level == "DEBUG"
    assert s.autosave is False
    assert s.clear_screen is True


def test_blank_values_fall_back_to_defaults(clean_env) -> None:
    clean_env.setenv("TASKS_FILE", "  ")
    clean_env.setenv("TASKS_AUTOSAVE", "")

    s = Settings.from_env()

    assert s.tasks_file == Path("tasks.txt")
    assert s.autosave is True


def test_with_overrides(clean_env) -> None:
    s = Settings.from_env().with_overrides(tasks_file=Path("x.txt"), log_level="info")

    assert s.tasks_file == Path("x.txt")
    assert s.log_level == "INFO"
    assert Settings.from_env().with_overrides() == Settings.from_env()


def test_unknown_log_level_falls_back_to_warning(clean_env) -> None:
    clean_env.setenv("TASKS_LOG_LEVEL", "BASIC_FORMAT")

    assert Settings.from_env().log_level == "WARNING"


def test_with_overrides_ignores_unknown_log_level(clean_env) -> None:
    clean_env.setenv("TASKS_LOG_LEVEL", "error")

    assert Settings.from_env().with_overrides(log_level="root").log_level == "ERROR"
