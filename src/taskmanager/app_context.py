# taskManager application context
# Rev 0.2.0

from __future__ import annotations
from dataclasses import dataclass

from .utils.config import AppConfig
from .utils.logging_setup import get_logger
from .repositories.kv_store import KeyValueStore, open_store
from .services.task_store import TaskStore
from .services.theme_service import ThemeService


@dataclass
class AppContext:
    """Composition root: owns the preference backend and the services built on it."""
    config: AppConfig
    prefs: KeyValueStore
    store: TaskStore
    theme: ThemeService

    @classmethod
    def create(cls, config: AppConfig) -> "AppContext":
        log = get_logger("AppContext")
        path = config.resolved_prefs_path()
        prefs = open_store(config.prefs_backend, path)
        store = TaskStore(prefs)
        store.load()
        theme = ThemeService(prefs)
        log.info("AppContext initialized with %s preferences at %s", config.prefs_backend, path)
        return cls(config=config, prefs=prefs, store=store, theme=theme)

    def close(self) -> None:
        self.store.close()
        self.prefs.close()
        get_logger("AppContext").info("AppContext closed")
