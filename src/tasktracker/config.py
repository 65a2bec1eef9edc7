"""Settings loaded from environment variables (+ optional .env).

All variables use the TASKS_ prefix. Command-line options override these
values; see main.py.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKS"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# .env from the working directory; the real environment wins.
load_dotenv(find_dotenv(usecwd=True), override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().upper()
    return value if value in choices else default


@dataclass(frozen=True)
class Settings:
    tasks_file: Path
    data_dir: Path
    log_level: str
    autosave: bool
    clear_screen: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            tasks_file=_env_path(_k("FILE"), Path("tasks.txt")),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/tasktracker")),
            log_level=_env_choice(_k("LOG_LEVEL"), LOG_LEVELS, "WARNING"),
            autosave=_env_bool(_k("AUTOSAVE"), True),
            clear_screen=_env_bool(_k("CLEAR_SCREEN"), False),
        )

    def with_overrides(self, *, tasks_file: Optional[Path] = None, log_level: Optional[str] = None) -> "Settings":
        changes = {}
        if tasks_file is not None:
            changes["tasks_file"] = Path(tasks_file)
        if log_level and log_level.upper() in LOG_LEVELS:
            changes["log_level"] = log_level.upper()
        return replace(self, **changes)


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
