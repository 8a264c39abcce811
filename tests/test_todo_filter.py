# tests/test_todo_filter.py

from __future__ import annotations

import pytest

from pocket_todo.todos.todo_filter import TodoTab, filter_todos, resolve_category
from pocket_todo.todos.todo_models import Todo, Urgency


@pytest.fixture()
def todos() -> list[Todo]:
    return [
        Todo(title="a", urgency=Urgency.TODAY),
        Todo(title="b", urgency=Urgency.THIS_WEEK),
        Todo(title="c"),
        Todo(title="d", urgency=Urgency.TODAY, is_completed=True),
        Todo(title="e", urgency=Urgency.THIS_MONTH),
        Todo(title="f", urgency=Urgency.THIS_WEEK),
    ]


def test_all_returns_everything_in_order(todos: list[Todo]) -> None:
    assert filter_todos(todos, TodoTab.ALL) == todos
    assert filter_todos(todos, "all") == todos


def test_today_is_exact_subsequence_in_order(todos: list[Todo]) -> None:
    got = filter_todos(todos, "today")
    assert [t.title for t in got] == ["a", "d"]
    assert all(t.urgency is Urgency.TODAY for t in got)


def test_filter_is_idempotent(todos: list[Todo]) -> None:
    for category in (TodoTab.TODAY, TodoTab.WEEK, Urgency.THIS_MONTH, Urgency.NONE, TodoTab.ALL):
        once = filter_todos(todos, category)
        assert filter_todos(once, category) == once


def test_week_tab_shows_this_week_only(todos: list[Todo]) -> None:
    assert [t.title for t in filter_todos(todos, TodoTab.WEEK)] == ["b", "f"]
    assert filter_todos(todos, "week") == filter_todos(todos, Urgency.THIS_WEEK)


def test_filter_by_urgency_value(todos: list[Todo]) -> None:
    assert [t.title for t in filter_todos(todos, "this_month")] == ["e"]
    assert [t.title for t in filter_todos(todos, Urgency.NONE)] == ["c"]


def test_filter_does_not_mutate_input(todos: list[Todo]) -> None:
    snapshot = list(todos)
    result = filter_todos(todos, TodoTab.ALL)
    result.clear()
    filter_todos(todos, TodoTab.TODAY)
    assert todos == snapshot


def test_unknown_category_raises(todos: list[Todo]) -> None:
    with pytest.raises(ValueError):
        filter_todos(todos, "tomorrow")
    with pytest.raises(ValueError):
        resolve_category(42)  # type: ignore[arg-type]


def test_tab_metadata() -> None:
    assert TodoTab.ALL.urgency is None
    assert TodoTab.TODAY.urgency is Urgency.TODAY
    assert TodoTab.WEEK.label == "Неделя"
