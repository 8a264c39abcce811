# src/pocket_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the preference backend, TodoStore and ThemeState into AppState,
- hydrates the store from persisted preferences.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import PreferenceStore
from ..core.state import AppState
from ..storage.preferences import FilePreferences
from ..theme.theme_state import ThemeState
from ..todos.todo_store import TodoStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.prefs_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, prefs: PreferenceStore | None = None) -> AppState:
    """
    Create AppState from the provided settings and load persisted todos.

    Keeping settings (and the preference backend) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if prefs is None:
        _ensure_local_dirs(settings)
        prefs = FilePreferences(settings.prefs_dir)

    store = TodoStore(prefs, key=getattr(settings, "todos_key", "todos"))
    store.load()

    state = AppState(
        settings=settings,
        store=store,
        theme=ThemeState(is_dark_mode=bool(getattr(settings, "dark_mode", False))),
    )
    logger.info("State ready: %d todos, dark_mode=%s", len(store), state.theme.is_dark_mode)
    return state
