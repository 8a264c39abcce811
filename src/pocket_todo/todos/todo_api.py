# src/pocket_todo/todos/todo_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .todo_filter import filter_todos
from .todo_models import Todo

logger = logging.getLogger(__name__)


def visible_todos(state: AppState) -> list[Todo]:
    """Todos shown for the currently selected tab, in store order."""
    return filter_todos(state.store.todos, state.selected_tab)


def resolve_ref(state: AppState, ref: str) -> Todo | None:
    """
    Resolve a user-typed reference to a todo.

    Accepts a 1-based position in the visible list, a full id, or an id prefix
    (case-insensitive) that matches exactly one todo.
    """
    ref = (ref or "").strip()
    if not ref:
        return None

    if ref.isdigit():
        shown = visible_todos(state)
        idx = int(ref) - 1
        if 0 <= idx < len(shown):
            return shown[idx]
        return None

    exact = state.store.get(ref.upper())
    if exact is not None:
        return exact

    prefix = ref.upper()
    matches = [t for t in state.store.todos if t.id.startswith(prefix)]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        logger.debug("Ambiguous todo ref=%s (%d matches)", ref, len(matches))
    return None
