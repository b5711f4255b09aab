# src/taskboard/store/preferences.py

from __future__ import annotations

import json
import logging

from ..core.ports import KeyValueBackend
from .kv_store import ACTIVE_BOARD_KEY, LIGHT_THEME_KEY, SHOW_SIDEBAR_KEY

logger = logging.getLogger(__name__)


class Preferences:
    """
    Small persisted flags stored next to the task collection.

    Encodings are fixed by the stored format:
    - activeBoard: JSON string
    - showSideBar: "true" | "false"
    - light-theme: "enabled" | "disabled"
    """

    def __init__(self, store: KeyValueBackend) -> None:
        self._store = store

    # ---- active board ----

    def active_board(self) -> str | None:
        raw = self._store.load(ACTIVE_BOARD_KEY)
        if not raw:
            return None
        try:
            val = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring malformed activeBoard preference: %r", raw)
            return None
        return val if isinstance(val, str) and val else None

    def set_active_board(self, name: str) -> bool:
        return self._store.save(ACTIVE_BOARD_KEY, json.dumps(name, ensure_ascii=False))

    # ---- sidebar ----

    def show_sidebar(self) -> bool:
        return self._store.load(SHOW_SIDEBAR_KEY) == "true"

    def set_show_sidebar(self, show: bool) -> bool:
        return self._store.save(SHOW_SIDEBAR_KEY, "true" if show else "false")

    # ---- theme ----

    def light_theme(self) -> bool:
        return self._store.load(LIGHT_THEME_KEY) == "enabled"

    def set_light_theme(self, enabled: bool) -> bool:
        return self._store.save(LIGHT_THEME_KEY, "enabled" if enabled else "disabled")
