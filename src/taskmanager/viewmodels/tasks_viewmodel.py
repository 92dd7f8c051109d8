# Rev 0.2.0
from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from ..models.entities import Priority, Task
from ..services.task_store import TaskStore
from ..services.theme_service import ThemeService


class TasksViewModel(QObject):
    tasksReloaded = Signal(list)
    themeChanged = Signal(bool)

    def __init__(self, store: TaskStore, theme: ThemeService, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._store = store
        self._theme = theme
        self._add_priority = Priority.MEDIUM

    # ---- state
    @property
    def tasks(self) -> List[Task]:
        return list(self._store.tasks)

    @property
    def add_priority(self) -> Priority:
        return self._add_priority

    @property
    def can_clear(self) -> bool:
        return not self._store.is_empty()

    @property
    def is_dark(self) -> bool:
        return self._theme.is_dark

    # ---- queries
    def reload(self) -> None:
        self._store.sort()
        self.tasksReloaded.emit(self.tasks)

    # ---- commands
    def set_add_priority(self, priority: Priority) -> None:
        self._add_priority = priority

    def add_task(self, name: str) -> Optional[Task]:
        task = self._store.add(name, self._add_priority)
        if task is not None:
            self._add_priority = Priority.MEDIUM
            self.reload()
        return task

    def toggle_completed(self, task_id: str) -> None:
        if self._store.toggle_completed(task_id) is not None:
            self.reload()

    def delete_task(self, task_id: str) -> None:
        if self._store.delete(task_id):
            self.reload()

    def change_priority(self, task_id: str, priority: Priority) -> None:
        if self._store.change_priority(task_id, priority) is not None:
            self.reload()

    def clear_all(self) -> None:
        self._store.clear_all()
        self.reload()

    def set_dark_mode(self, dark: bool) -> None:
        if bool(dark) == self._theme.is_dark:
            return
        self._theme.set_dark(dark)
        self.themeChanged.emit(self._theme.is_dark)

    # ---- display helpers
    @staticmethod
    def priority_choices() -> List[Priority]:
        return [Priority.HIGH, Priority.MEDIUM, Priority.LOW]

    @staticmethod
    def format_added(task: Task) -> str:
        return "Added: " + task.created_at.strftime("%Y-%m-%d %H:%M:%S")
