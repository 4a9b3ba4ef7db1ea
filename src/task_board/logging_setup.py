# src/task_board/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "task-board.log"


class _ConsoleNoiseFilter(logging.Filter):
    """Only task_board records reach the console below ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "task_board" or name.startswith("task_board."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/task-board",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send filtered records to stderr (stdout shows the task list) and
    everything to <log_dir>/task-board.log. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    log_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    log_handler.setLevel(file_level)
    log_handler.setFormatter(fmt)
    root.addHandler(log_handler)

    # warnings.warn(...) arrives as 'py.warnings', filtered like third-party noise.
    logging.captureWarnings(True)
    return log_file
