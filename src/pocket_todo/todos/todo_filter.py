# todos/todo_filter.py

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from .todo_models import Todo, Urgency


class TodoTab(StrEnum):
    """Tabs of the main screen. WEEK shows this-week todos only, not today's."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"

    @property
    def label(self) -> str:
        return TAB_LABELS[self]

    @property
    def urgency(self) -> Urgency | None:
        return TAB_URGENCY[self]


TAB_LABELS: dict[TodoTab, str] = {
    TodoTab.ALL: "Задачи",
    TodoTab.TODAY: "Сегодня",
    TodoTab.WEEK: "Неделя",
}

TAB_URGENCY: dict[TodoTab, Urgency | None] = {
    TodoTab.ALL: None,
    TodoTab.TODAY: Urgency.TODAY,
    TodoTab.WEEK: Urgency.THIS_WEEK,
}

Category = TodoTab | Urgency | str


def resolve_category(category: Category) -> Urgency | None:
    """
    Map a tab, an urgency or their string value to the urgency to match.

    None means "all". Unknown values raise ValueError.
    """
    if isinstance(category, TodoTab):
        return category.urgency
    if isinstance(category, Urgency):
        return category
    if isinstance(category, str):
        raw = category.strip().lower()
        if raw in TodoTab._value2member_map_:
            return TodoTab(raw).urgency
        if raw in Urgency._value2member_map_:
            return Urgency(raw)
    raise ValueError(f"unknown category: {category!r}")


def filter_todos(todos: Iterable[Todo], category: Category) -> list[Todo]:
    """Stable subsequence of `todos` for `category`; the input is never modified."""
    urgency = resolve_category(category)
    if urgency is None:
        return list(todos)
    return [t for t in todos if t.urgency == urgency]
