# src/pocket_todo/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.state import AppState
from ..theme.colors import BOLD, DIM, STRIKE, ansi_fg, paint
from ..todos.todo_api import resolve_ref, visible_todos
from ..todos.todo_filter import TodoTab
from ..todos.todo_models import Todo, Urgency
from ..todos.todo_store import edit, set_notes, set_urgency, toggle_completed

# Handlers get the rest of the line exactly as typed (after the command name).
CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)

URGENCY_ALIASES: dict[str, Urgency] = {
    "today": Urgency.TODAY,
    "t": Urgency.TODAY,
    "week": Urgency.THIS_WEEK,
    "this_week": Urgency.THIS_WEEK,
    "w": Urgency.THIS_WEEK,
    "month": Urgency.THIS_MONTH,
    "this_month": Urgency.THIS_MONTH,
    "m": Urgency.THIS_MONTH,
    "none": Urgency.NONE,
    "-": Urgency.NONE,
}

NOTES_SEP = "::"

# "!today", "!week", ... as a standalone word.
_URGENCY_TAG_RE = re.compile(r"(?<!\S)!(\S+)")


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(None, 1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        text = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def _color_on(state: AppState) -> bool:
    return bool(getattr(state.settings, "console_color", False))


def format_todo(state: AppState, todo: Todo, position: int) -> str:
    pal = state.theme.palette
    on = _color_on(state)

    mark = "[x]" if todo.is_completed else "[ ]"
    mark = paint(mark, ansi_fg(pal.completed if todo.is_completed else pal.text_secondary), enabled=on)

    bar = paint("|", ansi_fg(todo.urgency.color), BOLD, enabled=on) if todo.urgency != Urgency.NONE else " "

    if todo.is_completed:
        title = paint(todo.title, ansi_fg(pal.text_secondary), STRIKE, enabled=on)
    else:
        title = paint(todo.title, ansi_fg(pal.text_primary), enabled=on)

    line = f"{position:>3}. {bar} {mark} {title}"
    if todo.urgency != Urgency.NONE:
        line += " " + paint(f"({todo.urgency.label})", ansi_fg(todo.urgency.color), enabled=on)
    line += " " + paint(todo.id[:8], DIM, enabled=on)

    if todo.notes:
        first = todo.notes.splitlines()[0]
        line += "\n        " + paint(first, ansi_fg(pal.text_secondary), enabled=on)
    return line


def format_list(state: AppState) -> str:
    tab = state.selected_tab
    tabs = "  ".join(
        paint(f"[{t.label}]", ansi_fg(state.theme.palette.accent), BOLD, enabled=_color_on(state))
        if t == tab
        else t.label
        for t in TodoTab
    )
    shown = visible_todos(state)
    if not shown:
        return f"{tabs}\n  Нет задач. Use /add <title> to create one."
    body = "\n".join(format_todo(state, t, i) for i, t in enumerate(shown, start=1))
    return f"{tabs}\n{body}"


def _parse_urgency(raw: str) -> Urgency | None:
    return URGENCY_ALIASES.get(raw.strip().lower().lstrip("!"))


def _parse_tab(raw: str) -> TodoTab | None:
    try:
        return TodoTab(raw.strip().lower())
    except ValueError:
        return None


# ---- handlers ----


def _split_ref(text: str) -> tuple[str, str]:
    """'3  rest of  line' -> ('3', 'rest of  line'); inner whitespace is kept."""
    parts = text.strip().split(None, 1)
    if not parts:
        return "", ""
    return parts[0], parts[1] if len(parts) > 1 else ""


def cmd_help(state: AppState, text: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, text: str) -> str:
    todos = state.store.todos
    done = sum(1 for t in todos if t.is_completed)
    prefs_dir = getattr(state.settings, "prefs_dir", "(in-memory)")
    return (
        "Status:\n"
        f"  Todos: {len(todos)} ({done} done)\n"
        f"  Tab: {state.selected_tab.value}\n"
        f"  Theme: {'dark' if state.theme.is_dark_mode else 'light'}\n"
        f"  Storage: {prefs_dir} key={state.store.key}"
    )


def cmd_list(state: AppState, text: str) -> str:
    """
    /list         -> show the current tab
    /list <tab>   -> switch tab (all | today | week) and show it
    """
    if text.strip():
        tab = _parse_tab(text)
        if tab is None:
            return "Usage: /list [all | today | week]"
        state.selected_tab = tab
    return format_list(state)


def cmd_tab(state: AppState, text: str) -> str:
    if not text.strip():
        return f"Current tab: {state.selected_tab.value}. Use /tab all | today | week."
    tab = _parse_tab(text)
    if tab is None:
        return "Usage: /tab all | today | week"
    state.selected_tab = tab
    return format_list(state)


def cmd_add(state: AppState, text: str) -> str:
    """
    /add <title> [!today|!week|!month] [:: notes]

    Words like '!today' that name an urgency are taken out of the title; everything
    else is kept as typed, including runs of spaces.
    """
    title_part, _, notes = text.partition(NOTES_SEP)

    urgency = Urgency.NONE

    def _take_urgency(m: re.Match[str]) -> str:
        nonlocal urgency
        parsed = _parse_urgency(m.group(1))
        if parsed is None:
            return m.group(0)
        urgency = parsed
        return ""

    title = _URGENCY_TAG_RE.sub(_take_urgency, title_part).strip()

    todo = state.store.add(title, notes=notes.strip(), urgency=urgency)
    if todo is None:
        return "A title is required: /add <title> [!today|!week|!month] [:: notes]"
    return f"Added: {todo.title}"


def cmd_done(state: AppState, text: str) -> str:
    ref, _ = _split_ref(text)
    if not ref:
        return "Usage: /done <n | id>"
    todo = resolve_ref(state, ref)
    if todo is None:
        return f"No such todo: {ref}"
    updated = state.store.update(todo.id, toggle_completed)
    if updated is None:
        return f"No such todo: {ref}"
    return f"{'Completed' if updated.is_completed else 'Reopened'}: {updated.title}"


def cmd_edit(state: AppState, text: str) -> str:
    """/edit <n | id> <new title> [:: notes]"""
    ref, rest = _split_ref(text)
    if not ref or not rest:
        return "Usage: /edit <n | id> <new title> [:: notes]"
    todo = resolve_ref(state, ref)
    if todo is None:
        return f"No such todo: {ref}"

    title, sep, notes = rest.partition(NOTES_SEP)
    if not title.strip():
        return "A title is required."

    mutator = edit(title=title.strip(), notes=notes.strip() if sep else None)
    updated = state.store.update(todo.id, mutator)
    return f"Updated: {updated.title}" if updated else f"No such todo: {ref}"


def cmd_notes(state: AppState, text: str) -> str:
    """
    /notes <n | id>          -> show notes
    /notes <n | id> <text>   -> replace notes
    /notes <n | id> -        -> clear notes
    """
    ref, notes = _split_ref(text)
    if not ref:
        return "Usage: /notes <n | id> [text | -]"
    todo = resolve_ref(state, ref)
    if todo is None:
        return f"No such todo: {ref}"

    if not notes.strip():
        return todo.notes or "(no notes)"

    notes = notes.strip()
    state.store.update(todo.id, set_notes("" if notes == "-" else notes))
    return f"Notes saved for: {todo.title}"


def cmd_urgency(state: AppState, text: str) -> str:
    ref, value = _split_ref(text)
    if not ref or not value:
        return "Usage: /urgency <n | id> today | week | month | none"
    todo = resolve_ref(state, ref)
    if todo is None:
        return f"No such todo: {ref}"
    urgency = _parse_urgency(value)
    if urgency is None:
        return "Usage: /urgency <n | id> today | week | month | none"
    state.store.update(todo.id, set_urgency(urgency))
    return f"Urgency of '{todo.title}' set to {urgency.label}."


def cmd_rm(state: AppState, text: str) -> str:
    ref, _ = _split_ref(text)
    if not ref:
        return "Usage: /rm <n | id>"
    todo = resolve_ref(state, ref)
    if todo is None:
        return f"No such todo: {ref}"
    state.store.remove(todo.id)
    return f"Removed: {todo.title}"


def cmd_theme(state: AppState, text: str) -> str:
    """
    /theme          -> show current mode
    /theme dark     -> switch to dark
    /theme light    -> switch to light
    /theme toggle   -> flip
    """
    arg = text.strip().lower()
    if not arg:
        return f"Theme is {'dark' if state.theme.is_dark_mode else 'light'}. Use /theme dark | light | toggle."

    if arg in ("dark", "on"):
        state.theme.set_dark_mode(True)
    elif arg in ("light", "off"):
        state.theme.set_dark_mode(False)
    elif arg == "toggle":
        state.theme.set_dark_mode(not state.theme.is_dark_mode)
    else:
        return "Usage: /theme dark | light | toggle"

    logger.debug("Theme command: %s", arg)
    return f"Theme is now {'dark' if state.theme.is_dark_mode else 'light'}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show counts, tab, theme and storage.")
registry.register("list", cmd_list, help_text="Show todos: /list [all | today | week].", aliases=["ls"])
registry.register("tab", cmd_tab, help_text="Select tab: /tab all | today | week.")
registry.register(
    "add", cmd_add, help_text="Add a todo: /add <title> [!today|!week|!month] [:: notes]."
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <n | id>.", aliases=["x"])
registry.register("edit", cmd_edit, help_text="Edit title (and notes): /edit <n | id> <title> [:: notes].")
registry.register("notes", cmd_notes, help_text="Show or set notes: /notes <n | id> [text | -].")
registry.register("urgency", cmd_urgency, help_text="Set urgency: /urgency <n | id> today|week|month|none.")
registry.register("rm", cmd_rm, help_text="Delete a todo: /rm <n | id>.", aliases=["del", "delete"])
registry.register("theme", cmd_theme, help_text="Appearance: /theme dark | light | toggle.")
