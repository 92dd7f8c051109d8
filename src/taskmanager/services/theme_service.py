# Rev 0.2.0
from __future__ import annotations

import logging

from ..repositories.kv_store import KeyValueStore

log = logging.getLogger(__name__)

THEME_KEY = "isDarkMode"


class ThemeService:
    """Dark/light preference; read once at construction, written on every change."""

    def __init__(self, prefs: KeyValueStore):
        self._prefs = prefs
        stored = prefs.get_bool(THEME_KEY)
        self._dark = bool(stored) if stored is not None else False

    @property
    def is_dark(self) -> bool:
        return self._dark

    def set_dark(self, value: bool) -> None:
        self._dark = bool(value)
        if not self._prefs.set_bool(THEME_KEY, self._dark):
            log.warning("Theme preference not saved (dark=%s)", self._dark)
