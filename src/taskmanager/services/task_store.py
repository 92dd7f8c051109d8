# Rev 0.2.0
"""Task store: ordered in-memory task list mirrored to one preference slot.

Every mutation updates memory first, re-sorts, then writes the whole list
as a JSON array under TASKS_KEY. The in-memory list stays authoritative
when a write fails.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from ..models.codec import decode_tasks, encode_tasks
from ..models.entities import Priority, Task, TaskDecodeError
from ..repositories.kv_store import KeyValueStore

log = logging.getLogger(__name__)

TASKS_KEY = "tasks_json"


def _new_id() -> str:
    return uuid.uuid4().hex


class TaskStore:
    def __init__(
        self,
        prefs: KeyValueStore,
        *,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._prefs = prefs
        self._clock = clock
        self._new_id = id_factory
        self._tasks: List[Task] = []

    # ---- reads
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def get(self, task_id: str) -> Optional[Task]:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    # ---- lifecycle
    def load(self) -> None:
        raw = self._prefs.get_string(TASKS_KEY)
        if raw is None:
            self._tasks = []
        else:
            try:
                self._tasks = decode_tasks(raw)
            except TaskDecodeError as e:
                log.warning("Discarding unreadable persisted tasks: %s", e)
                self._tasks = []
        self.sort()
        log.info("Loaded %d task(s)", len(self._tasks))

    def close(self) -> None:
        self._tasks = []

    # ---- commands
    def add(self, name: str, priority: Priority = Priority.MEDIUM) -> Optional[Task]:
        name = (name or "").strip()
        if not name:
            log.debug("add ignored: empty name")
            return None
        task = Task(
            id=self._new_id(),
            name=name,
            completed=False,
            priority=priority,
            created_at=self._clock(),
        )
        self._tasks.append(task)
        self.sort()
        self._persist()
        log.debug("Task added id=%s priority=%s", task.id, priority.label)
        return task

    def toggle_completed(self, task_id: str) -> Optional[Task]:
        idx = self._index_of(task_id)
        if idx is None:
            log.debug("toggle ignored: unknown id %s", task_id)
            return None
        updated = self._tasks[idx].with_completed(not self._tasks[idx].completed)
        self._tasks[idx] = updated
        self.sort()
        self._persist()
        return updated

    def delete(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            log.debug("delete ignored: unknown id %s", task_id)
            return False
        del self._tasks[idx]
        self._persist()
        return True

    def change_priority(self, task_id: str, priority: Priority) -> Optional[Task]:
        idx = self._index_of(task_id)
        if idx is None:
            log.debug("priority change ignored: unknown id %s", task_id)
            return None
        updated = self._tasks[idx].with_priority(priority)
        self._tasks[idx] = updated
        self.sort()
        self._persist()
        return updated

    def clear_all(self) -> None:
        self._tasks.clear()
        self._persist()
        log.info("All tasks cleared")

    def sort(self) -> None:
        self._tasks.sort(key=Task.sort_key)

    # ---- internals
    def _index_of(self, task_id: str) -> Optional[int]:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _persist(self) -> None:
        payload = encode_tasks(self._tasks)
        try:
            ok = self._prefs.set_string(TASKS_KEY, payload)
        except Exception:
            log.exception("Persisting %d task(s) failed", len(self._tasks))
            return
        if not ok:
            log.warning("Persisting %d task(s) reported failure", len(self._tasks))
