# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskboard.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("taskboard.cli.main", logging.INFO, True),
        ("taskboard.board.view_sync", logging.INFO, True),
        ("taskboard.store.kv_store", logging.INFO, False),
        ("taskboard.store.kv_store", logging.ERROR, True),
        ("taskboard.tasks.task_repository", logging.DEBUG, False),
        ("taskboard.tasks.task_repository", logging.WARNING, True),
        ("taskboard.core.workflow", logging.INFO, False),
        ("taskboard.core.workflow", logging.WARNING, True),
        ("py.warnings", logging.WARNING, False),
        ("dotenv.main", logging.WARNING, False),
        ("dotenv.main", logging.ERROR, True),
    ],
)
def test_console_filter(name: str, level: int, shown: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is shown


def test_setup_logging_writes_everything_to_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs")
        logging.getLogger("taskboard.store.kv_store").debug("store detail")
        for h in root.handlers:
            h.flush()
        assert log_file == tmp_path / "logs" / "taskboard.log"
        assert "store detail" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
