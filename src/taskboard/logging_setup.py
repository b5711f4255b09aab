# src/taskboard/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Loggers whose INFO lines only repeat what the console reply already says.
_ECHOED_BY_REPLIES = ("taskboard.core.workflow", "taskboard.core.controller")


class _ConsoleNoiseFilter(logging.Filter):
    """
    The board is painted on stdout and log lines share the terminal on stderr.

    Only what the user cannot see otherwise reaches the console:
    - store and repository internals at WARNING+ (dropped writes, corrupt data)
    - workflow/controller chatter at WARNING+, the command reply covers the rest
    - other taskboard logs (startup, shutdown) as configured
    - anything from outside the app at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if not name.startswith("taskboard."):
            return record.levelno >= logging.ERROR

        if name.startswith(("taskboard.store.", "taskboard.tasks.")):
            return record.levelno >= logging.WARNING
        if name.startswith(_ECHOED_BY_REPLIES):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskboard",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure logging with:
    - Console handler: short lines, filtered so the board stays readable
    - File handler: everything, timestamped, in <log_dir>/taskboard.log

    Call this ONCE, before the first logger.info. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "taskboard.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
