from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FILE_NAME = "tasktracker.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive menu readable:
    - tasktracker logs pass (subject to the console level)
    - anything else, including captured warnings, only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("tasktracker."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: Union[str, Path] = ".local/tasktracker",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Optional[Path]:
    """
    Configure logging with:
    - Console handler on stderr, filtered, WARNING by default
    - File handler with full logs for debugging, skipped (console only)
      when the log directory cannot be created or written

    Call this ONCE, before the first log record. Returns the log file path,
    or None when file logging is unavailable.
    """
    log_file: Optional[Path] = Path(log_dir) / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError as exc:
        logging.getLogger(__name__).warning("File logging disabled: %s", exc)
        log_file = None
    else:
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
    return log_file
