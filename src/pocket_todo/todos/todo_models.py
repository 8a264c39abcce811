# todos/todo_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Urgency(StrEnum):
    """
    How soon a todo is due.

    Used only for filtering and display color; nothing is scheduled from it.
    """

    TODAY = "today"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"
    NONE = "none"

    @classmethod
    def from_raw(cls, raw: Any) -> Urgency:
        """
        Strict parse of a persisted value.

        Accepts the stored value or the display label; anything else raises
        ValueError so the caller can reject the whole blob.
        """
        if isinstance(raw, str):
            if raw in cls._value2member_map_:
                return cls(raw)
            for urgency, info in URGENCY_DISPLAY.items():
                if raw == info.label:
                    return urgency
        raise ValueError(f"unknown urgency: {raw!r}")

    @property
    def color(self) -> str:
        return URGENCY_DISPLAY[self].color

    @property
    def icon(self) -> str:
        return URGENCY_DISPLAY[self].icon

    @property
    def label(self) -> str:
        return URGENCY_DISPLAY[self].label


@dataclass(frozen=True, slots=True)
class UrgencyDisplay:
    color: str  # hex, see theme.colors
    icon: str  # SF Symbols name
    label: str


URGENCY_DISPLAY: dict[Urgency, UrgencyDisplay] = {
    Urgency.TODAY: UrgencyDisplay("#FF3B30", "exclamationmark.circle.fill", "Сегодня"),
    Urgency.THIS_WEEK: UrgencyDisplay("#FF9500", "exclamationmark.triangle.fill", "Эта неделя"),
    Urgency.THIS_MONTH: UrgencyDisplay("#FFCC00", "exclamationmark.square.fill", "Этот месяц"),
    Urgency.NONE: UrgencyDisplay("#8E8E93", "circle", "Без срочности"),
}


def new_todo_id() -> str:
    return str(uuid.uuid4()).upper()


@dataclass(frozen=True, slots=True)
class Todo:
    title: str
    is_completed: bool = False
    notes: str = ""
    urgency: Urgency = Urgency.NONE
    id: str = field(default_factory=new_todo_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "isCompleted": self.is_completed,
            "notes": self.notes,
            "urgency": self.urgency.value,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Todo:
        """
        Build a Todo from one persisted entry.

        Required: id (non-empty str), title (str), isCompleted (bool).
        Optional: notes (str, default ""), urgency (default none).
        Raises ValueError on anything malformed.
        """
        if not isinstance(raw, dict):
            raise ValueError("todo entry must be an object")

        todo_id = raw.get("id")
        title = raw.get("title")
        is_completed = raw.get("isCompleted")
        notes = raw.get("notes", "")

        if not isinstance(todo_id, str) or not todo_id:
            raise ValueError("todo id must be a non-empty string")
        if not isinstance(title, str):
            raise ValueError("todo title must be a string")
        if not isinstance(is_completed, bool):
            raise ValueError("todo isCompleted must be a boolean")
        if not isinstance(notes, str):
            raise ValueError("todo notes must be a string")

        urgency = Urgency.from_raw(raw["urgency"]) if "urgency" in raw else Urgency.NONE

        return cls(
            id=todo_id,
            title=title,
            is_completed=is_completed,
            notes=notes,
            urgency=urgency,
        )
