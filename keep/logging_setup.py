"""Logging setup for Keep.

The TUI owns the terminal, so everything goes to a log file only.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FILE_NAME = "keep.log"


def setup_logging(log_dir: str | Path, level: int | str = logging.INFO) -> Path:
    """Configure the root logger with a single file handler.

    Call this once, before the app starts. Returns the log file path.
    """
    log_dir = Path(log_dir).expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
    return log_file
