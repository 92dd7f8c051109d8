# Rev 0.2.0
from __future__ import annotations

import json
from typing import Iterable, List

from .entities import Task, TaskDecodeError


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([t.to_json() for t in tasks], ensure_ascii=True)


def decode_tasks(raw: str) -> List[Task]:
    """Parse a persisted JSON array of tasks. All-or-nothing: one bad entry fails the lot."""
    try:
        doc = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise TaskDecodeError(f"tasks payload is not valid JSON: {e}") from e
    if not isinstance(doc, list):
        raise TaskDecodeError(f"tasks payload must be a JSON array, got {type(doc).__name__}")
    return [Task.from_json(item) for item in doc]
