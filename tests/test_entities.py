# tests/test_entities.py
from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from taskmanager.models.codec import decode_tasks, encode_tasks
from taskmanager.models.entities import Priority, Task, TaskDecodeError


# --- Priority ---------------------------------------------------------------

def test_priority_labels_and_ranks():
    assert [p.label for p in Priority] == ["Low", "Medium", "High"]
    assert (Priority.HIGH.rank, Priority.MEDIUM.rank, Priority.LOW.rank) == (3, 2, 1)


@pytest.mark.parametrize("raw, expected", [
    ("High", Priority.HIGH),
    ("high", Priority.HIGH),
    ("MEDIUM", Priority.MEDIUM),
    ("Low", Priority.LOW),
    ("urgent", Priority.LOW),
    ("", Priority.LOW),
    (" High", Priority.LOW),
    ("high ", Priority.LOW),
])
def test_priority_from_label_is_lenient(raw, expected):
    assert Priority.from_label(raw) is expected


# --- Task -------------------------------------------------------------------

def test_task_defaults():
    t = Task(id="a", name="Buy milk")
    assert t.completed is False
    assert t.priority is Priority.MEDIUM
    assert isinstance(t.created_at, datetime)


def test_task_updates_return_new_records():
    t = Task(id="a", name="x", created_at=datetime(2024, 1, 1))
    done = t.with_completed(True)
    high = t.with_priority(Priority.HIGH)
    assert t.completed is False and t.priority is Priority.MEDIUM
    assert done.completed is True and done.id == t.id and done.created_at == t.created_at
    assert high.priority is Priority.HIGH and high.name == t.name


def test_to_json_shape():
    t = Task(id="42", name="Write report", completed=True, priority=Priority.HIGH,
             created_at=datetime(2024, 5, 6, 7, 8, 9, 123000))
    assert t.to_json() == {
        "id": "42",
        "name": "Write report",
        "completed": True,
        "priority": "High",
        "createdAt": "2024-05-06T07:08:09.123000",
    }


def test_from_json_accepts_millisecond_timestamps_and_odd_case():
    t = Task.from_json({
        "id": "1700000000000", "name": "Legacy", "completed": False,
        "priority": "mEdIuM", "createdAt": "2023-11-14T22:13:20.123",
    })
    assert t.priority is Priority.MEDIUM
    assert t.created_at == datetime(2023, 11, 14, 22, 13, 20, 123000)


def test_from_json_converts_aware_timestamps_to_local_naive():
    t = Task.from_json({
        "id": "1", "name": "n", "completed": False,
        "priority": "Low", "createdAt": "2024-01-01T12:00:00+00:00",
    })
    assert t.created_at.tzinfo is None
    expected = datetime(2024, 1, 1, 12, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert t.created_at == expected


@pytest.mark.parametrize("obj", [
    [],
    {"name": "n", "completed": False, "priority": "Low", "createdAt": "2024-01-01T00:00:00"},
    {"id": 1, "name": "n", "completed": False, "priority": "Low", "createdAt": "2024-01-01T00:00:00"},
    {"id": "1", "name": "n", "completed": "no", "priority": "Low", "createdAt": "2024-01-01T00:00:00"},
    {"id": "1", "name": "n", "completed": False, "priority": None, "createdAt": "2024-01-01T00:00:00"},
    {"id": "1", "name": "n", "completed": False, "priority": "Low", "createdAt": "yesterday"},
    {"id": "1", "name": "n", "completed": False, "priority": "Low", "createdAt": "0001-01-01T00:00:00+05:00"},
])
def test_from_json_rejects_bad_shapes(obj):
    with pytest.raises(TaskDecodeError):
        Task.from_json(obj)


# --- Codec ------------------------------------------------------------------

def test_encode_decode_preserves_every_field():
    tasks = [
        Task(id="a", name="Ünïcode ✓", completed=True, priority=Priority.LOW,
             created_at=datetime(2024, 2, 2, 10, 0, 0, 500)),
        Task(id="b", name="Plain", priority=Priority.HIGH, created_at=datetime(2024, 2, 3)),
    ]
    back = decode_tasks(encode_tasks(tasks))
    assert back == tasks


def test_encode_produces_json_array():
    doc = json.loads(encode_tasks([Task(id="a", name="n", created_at=datetime(2024, 1, 1))]))
    assert isinstance(doc, list) and doc[0]["priority"] == "Medium"


def test_encode_escapes_lone_surrogates():
    raw = encode_tasks([Task(id="a", name="broken \ud800 pair", created_at=datetime(2024, 1, 1))])
    assert raw.isascii()
    assert decode_tasks(raw)[0].name == "broken \ud800 pair"


@pytest.mark.parametrize("raw", ["not valid json", '{"id": "1"}', "[1, 2]", "null"])
def test_decode_rejects_malformed_payloads(raw):
    with pytest.raises(TaskDecodeError):
        decode_tasks(raw)


def test_decode_is_all_or_nothing():
    good = Task(id="a", name="n", created_at=datetime(2024, 1, 1)).to_json()
    bad = dict(good, id=None)
    with pytest.raises(TaskDecodeError):
        decode_tasks(json.dumps([good, bad]))
