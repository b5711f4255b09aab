# src/taskboard/store/kv_store.py

from __future__ import annotations

import contextlib
import json
import logging
import sqlite3
from pathlib import Path

from ..core.errors import StoreUnavailable
from .seed import INITIAL_DATA

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"
ACTIVE_BOARD_KEY = "activeBoard"
SHOW_SIDEBAR_KEY = "showSideBar"
LIGHT_THEME_KEY = "light-theme"


class KeyValueStore:
    """
    SQLite-backed key/value store holding whole values as text.

    Mirrors a browser-style storage: callers only ever get or set a complete
    value under a key. Failures are logged and degraded:
    - load() degrades to None
    - save() degrades to False
    fetch() is the strict read for write paths and raises StoreUnavailable.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "board.sqlite3") -> None:
        self._db_path = Path(db_path)
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._ensure_schema()
        except (OSError, StoreUnavailable):
            logger.exception("KeyValueStore schema init failed db=%s", self._db_path)
        else:
            logger.info("KeyValueStore ready db=%s", self._db_path)

    @property
    def path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        except sqlite3.Error as e:
            raise StoreUnavailable(f"cannot open {self._db_path}: {e}") from e
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StoreUnavailable(str(e)) from e
        finally:
            conn.close()

    def _read(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            cur = conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cur.fetchone()
            return None if row is None else str(row[0])
        except sqlite3.Error as e:
            raise StoreUnavailable(str(e)) from e
        finally:
            conn.close()

    def _write(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT INTO kv(key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StoreUnavailable(str(e)) from e
        finally:
            conn.close()

    # ---- public API ----

    def fetch(self, key: str) -> str | None:
        """Like load(), but a failing store raises StoreUnavailable instead of reading as absent."""
        return self._read(key)

    def load(self, key: str) -> str | None:
        try:
            return self._read(key)
        except StoreUnavailable:
            logger.exception("Store read failed key=%s", key)
            return None

    def save(self, key: str, text: str) -> bool:
        try:
            self._write(key, text)
        except StoreUnavailable:
            logger.exception("Store write dropped key=%s", key)
            return False
        logger.debug("Store write key=%s bytes=%d", key, len(text))
        return True


def initialize_data(store: KeyValueStore) -> bool:
    """
    Seed the store on first run.

    Returns True on a cold start (the tasks key was absent and the seed was
    written), False when data already existed or the store could not be read.
    Callers use the result for logging only.
    """
    try:
        existing = store.fetch(TASKS_KEY)
    except StoreUnavailable:
        logger.exception("Cannot tell whether tasks exist; skipping the seed.")
        return False
    if existing is not None:
        logger.info("Tasks data already exists in store.")
        return False

    payload = json.dumps(INITIAL_DATA, ensure_ascii=False)
    if not store.save(TASKS_KEY, payload):
        logger.error("Initial data could not be written; starting with an empty board.")
        return False
    store.save(SHOW_SIDEBAR_KEY, "true")
    logger.info("Initial data loaded into store (%d tasks).", len(INITIAL_DATA))
    return True
