# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from pocket_todo.cli.bootstrap import create_initial_state
from pocket_todo.core.state import AppState
from pocket_todo.storage.preferences import MemoryPreferences
from pocket_todo.todos.todo_store import TodoStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    A SimpleNamespace rather than the real config keeps tests independent of the
    developer's environment and .env file.
    """
    return SimpleNamespace(
        app_name="pocket-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        prefs_dir=tmp_path / "data" / "prefs",
        todos_key="todos",
        dark_mode=False,
        console_color=False,
    )


@pytest.fixture()
def prefs() -> MemoryPreferences:
    return MemoryPreferences()


@pytest.fixture()
def store(prefs: MemoryPreferences) -> TodoStore:
    s = TodoStore(prefs)
    s.load()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, prefs: MemoryPreferences) -> AppState:
    """AppState wired to an in-memory preference backend."""
    return create_initial_state(settings=settings, prefs=prefs)
