# tests/test_todo_models.py

from __future__ import annotations

import pytest

from pocket_todo.todos.todo_models import URGENCY_DISPLAY, Todo, Urgency


def test_defaults() -> None:
    t = Todo(title="x")
    assert t.is_completed is False
    assert t.notes == ""
    assert t.urgency is Urgency.NONE
    assert t.id and t.id != Todo(title="x").id


def test_equality_is_by_value_but_ids_differ() -> None:
    a = Todo(title="same")
    b = Todo(title="same")
    assert a != b
    assert a == Todo(title="same", id=a.id)


def test_every_urgency_has_display_info() -> None:
    assert set(URGENCY_DISPLAY) == set(Urgency)
    assert Urgency.TODAY.icon == "exclamationmark.circle.fill"
    assert Urgency.NONE.icon == "circle"
    assert Urgency.THIS_WEEK.label == "Эта неделя"
    assert Urgency.TODAY.color.startswith("#")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("today", Urgency.TODAY),
        ("this_week", Urgency.THIS_WEEK),
        ("Этот месяц", Urgency.THIS_MONTH),
        ("Без срочности", Urgency.NONE),
    ],
)
def test_urgency_from_raw(raw: str, expected: Urgency) -> None:
    assert Urgency.from_raw(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "Today", "soon", 3])
def test_urgency_from_raw_rejects_unknown(raw) -> None:
    with pytest.raises(ValueError):
        Urgency.from_raw(raw)


def test_to_dict_from_dict() -> None:
    t = Todo(title="Buy milk", is_completed=True, notes="2l", urgency=Urgency.THIS_WEEK)
    raw = t.to_dict()
    assert raw["isCompleted"] is True
    assert raw["urgency"] == "this_week"
    assert Todo.from_dict(raw) == t


@pytest.mark.parametrize(
    "raw",
    [
        [],
        {"title": "t", "isCompleted": False},
        {"id": "", "title": "t", "isCompleted": False},
        {"id": 7, "title": "t", "isCompleted": False},
        {"id": "A", "title": None, "isCompleted": False},
        {"id": "A", "title": "t", "isCompleted": 0},
        {"id": "A", "title": "t", "isCompleted": False, "notes": None},
        {"id": "A", "title": "t", "isCompleted": False, "urgency": None},
    ],
)
def test_from_dict_rejects_malformed(raw) -> None:
    with pytest.raises(ValueError):
        Todo.from_dict(raw)
