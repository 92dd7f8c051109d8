# Rev 0.2.0
"""Task entities and their persisted JSON shape.

Persisted form of a task:
    {"id": str, "name": str, "completed": bool,
     "priority": "High" | "Medium" | "Low", "createdAt": ISO-8601 str}
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict


class TaskDecodeError(ValueError):
    """Persisted task data does not have the expected shape."""


class Priority(Enum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def rank(self) -> int:
        return self.value

    @classmethod
    def from_label(cls, raw: str) -> "Priority":
        """Case-insensitive; anything unrecognized falls back to LOW."""
        try:
            return cls[raw.upper()]
        except KeyError:
            return cls.LOW


def _local_naive(ts: datetime) -> datetime:
    # keep every timestamp comparable with datetime.now()
    if ts.tzinfo is not None:
        return ts.astimezone().replace(tzinfo=None)
    return ts


@dataclass(frozen=True)
class Task:
    id: str
    name: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    created_at: datetime = field(default_factory=datetime.now)

    def with_completed(self, completed: bool) -> "Task":
        return replace(self, completed=completed)

    def with_priority(self, priority: Priority) -> "Task":
        return replace(self, priority=priority)

    def sort_key(self) -> tuple[int, bool, datetime]:
        # priority desc, incomplete first, oldest first
        return (-self.priority.rank, self.completed, self.created_at)

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "completed": self.completed,
            "priority": self.priority.label,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_json(cls, obj: Any) -> "Task":
        if not isinstance(obj, dict):
            raise TaskDecodeError(f"task entry must be an object, got {type(obj).__name__}")

        def _req(key: str, kind: type) -> Any:
            if key not in obj:
                raise TaskDecodeError(f"missing field {key!r}")
            val = obj[key]
            if not isinstance(val, kind):
                raise TaskDecodeError(f"field {key!r} must be {kind.__name__}, got {type(val).__name__}")
            return val

        task_id = _req("id", str)
        name = _req("name", str)
        completed = _req("completed", bool)
        priority = Priority.from_label(_req("priority", str))
        raw_ts = _req("createdAt", str)
        try:
            created_at = _local_naive(datetime.fromisoformat(raw_ts))
        except (ValueError, OverflowError) as e:
            raise TaskDecodeError(f"bad createdAt {raw_ts!r}") from e

        return cls(
            id=task_id,
            name=name,
            completed=completed,
            priority=priority,
            created_at=created_at,
        )
