# src/pocket_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..theme.theme_state import ThemeState
from ..todos.todo_filter import TodoTab
from ..todos.todo_store import TodoStore


@dataclass
class AppState:
    # Settings are kept on the state so commands and connectors can read them.
    settings: object

    store: TodoStore
    theme: ThemeState

    # Presentation-only selection; never persisted.
    selected_tab: TodoTab = TodoTab.ALL
