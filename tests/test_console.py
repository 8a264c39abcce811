# tests/test_console.py

from __future__ import annotations

from pocket_todo.connectors.console_connector import run_console_loop
from pocket_todo.core.state import AppState

from .fakes import ScriptedInput


def _run(state: AppState, lines: list[str]) -> list[str]:
    out: list[str] = []
    run_console_loop(state, input_fn=ScriptedInput(lines), output_fn=out.append)
    return out


def test_plain_lines_are_added_as_todos(state: AppState) -> None:
    out = _run(state, ["Buy milk", "", "Call mom !week", "/exit", "never read"])
    assert [t.title for t in state.store.todos] == ["Buy milk", "Call mom"]
    assert "Added: Buy milk" in out
    # List is redrawn after each change.
    assert sum(1 for line in out if "Buy milk" in line and "1." in line) >= 2


def test_eof_ends_loop_and_listeners_are_released(state: AppState, monkeypatch) -> None:
    released: list[str] = []

    def tracking(name: str, subscribe):
        def _subscribe(listener):
            unsubscribe = subscribe(listener)

            def _unsubscribe() -> None:
                released.append(name)
                unsubscribe()

            return _unsubscribe

        return _subscribe

    monkeypatch.setattr(state.store, "subscribe", tracking("store", state.store.subscribe))
    monkeypatch.setattr(state.theme, "subscribe", tracking("theme", state.theme.subscribe))

    out = _run(state, ["/theme dark"])
    assert state.theme.is_dark_mode is True
    assert sorted(released) == ["store", "theme"]

    # Changes after the loop ended are not drawn anywhere.
    printed = len(out)
    state.store.add("added later")
    state.theme.set_dark_mode(False)
    assert len(out) == printed


def test_crashing_command_is_reported(state: AppState, monkeypatch) -> None:
    def boom(*_args, **_kwargs):
        raise RuntimeError("bug")

    monkeypatch.setattr("pocket_todo.connectors.console_connector.command_registry.handle", boom)
    out = _run(state, ["/status"])
    assert "Internal error while handling a command." in out
