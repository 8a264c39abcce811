# todos/todo_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from dataclasses import replace

from ..core.events import ChangeNotifier
from ..core.ports import ChangeListener, PreferenceStore, Unsubscribe
from .todo_models import Todo, Urgency, new_todo_id

logger = logging.getLogger(__name__)

DEFAULT_TODOS_KEY = "todos"

# Takes the current record, returns the replacement (Todo is frozen).
TodoMutator = Callable[[Todo], Todo]


class TodoStore:
    """
    Ordered in-memory todo list persisted as a single JSON blob.

    - insertion order is display order (no sort key)
    - records are addressed by id, never by value
    - every successful mutation rewrites the whole blob, then notifies listeners
    - load/save never raise: bad data loads as an empty list, a failed write is dropped
    """

    def __init__(self, prefs: PreferenceStore, key: str = DEFAULT_TODOS_KEY) -> None:
        self._prefs = prefs
        self._key = key
        self._todos: list[Todo] = []
        self._changes = ChangeNotifier("TodoStore")

    # ---- read accessors ----

    @property
    def key(self) -> str:
        return self._key

    @property
    def todos(self) -> tuple[Todo, ...]:
        return tuple(self._todos)

    def get(self, todo_id: str) -> Todo | None:
        idx = self._index_of(todo_id)
        return None if idx is None else self._todos[idx]

    def __len__(self) -> int:
        return len(self._todos)

    def __iter__(self) -> Iterator[Todo]:
        return iter(tuple(self._todos))

    def subscribe(self, listener: ChangeListener) -> Unsubscribe:
        return self._changes.subscribe(listener)

    # ---- persistence ----

    @staticmethod
    def decode(blob: bytes | None) -> list[Todo]:
        """All-or-nothing decode: any malformed entry rejects the whole blob."""
        if not blob:
            return []
        data = json.loads(blob.decode("utf-8"))
        if not isinstance(data, list):
            raise ValueError("todos blob must be a JSON array")
        todos = [Todo.from_dict(raw) for raw in data]
        if len({t.id for t in todos}) != len(todos):
            raise ValueError("duplicate todo ids in blob")
        return todos

    @staticmethod
    def encode(todos: list[Todo] | tuple[Todo, ...]) -> bytes:
        return json.dumps([t.to_dict() for t in todos], ensure_ascii=False).encode("utf-8")

    def load(self) -> tuple[Todo, ...]:
        """
        Replace the in-memory list with the persisted one.

        Absent or malformed data yields an empty list; nothing is raised.
        """
        try:
            blob = self._prefs.get(self._key)
        except Exception:
            logger.exception("Failed to read todos key=%s; starting empty.", self._key)
            blob = None

        try:
            todos = self.decode(blob)
        except (ValueError, UnicodeDecodeError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError subclass; deep nesting raises RecursionError.
            logger.warning("Discarding unreadable todos key=%s: %s", self._key, e)
            todos = []

        self._todos = todos
        logger.info("TodoStore loaded key=%s total=%d", self._key, len(todos))
        self._changes.notify()
        return self.todos

    def save(self) -> bool:
        """
        Persist the full list. Returns False when the write was discarded.

        The previously persisted blob stays authoritative on failure.
        """
        try:
            blob = self.encode(self._todos)
            self._prefs.set(self._key, blob)
        except Exception:
            logger.exception("Failed to save todos key=%s; keeping previous state.", self._key)
            return False
        return True

    # ---- mutations ----

    def add(
        self,
        title: str,
        notes: str = "",
        urgency: Urgency = Urgency.NONE,
    ) -> Todo | None:
        """Append a new todo. Blank titles are ignored (returns None)."""
        if not title or not title.strip():
            logger.debug("Ignoring add with blank title.")
            return None

        todo = Todo(title=title, notes=notes, urgency=Urgency(urgency))
        while self._index_of(todo.id) is not None:
            todo = replace(todo, id=new_todo_id())

        self._todos.append(todo)
        logger.debug("Todo added id=%s urgency=%s", todo.id, todo.urgency.value)
        self._commit()
        return todo

    def update(self, todo_id: str, mutator: TodoMutator) -> Todo | None:
        """
        Replace the matching todo with `mutator(todo)`.

        Unknown ids are a no-op (returns None). The mutator must not change the id.
        """
        idx = self._index_of(todo_id)
        if idx is None:
            logger.debug("Ignoring update for unknown id=%s", todo_id)
            return None

        updated = mutator(self._todos[idx])
        if not isinstance(updated, Todo) or updated.id != todo_id:
            raise ValueError("mutator must return the same todo (id is immutable)")

        self._todos[idx] = updated
        logger.debug("Todo updated id=%s", todo_id)
        self._commit()
        return updated

    def remove(self, todo_id: str) -> Todo | None:
        """Remove by id. Unknown ids are a no-op (returns None)."""
        idx = self._index_of(todo_id)
        if idx is None:
            logger.debug("Ignoring remove for unknown id=%s", todo_id)
            return None

        removed = self._todos.pop(idx)
        logger.debug("Todo removed id=%s", todo_id)
        self._commit()
        return removed

    # ---- helpers ----

    def _index_of(self, todo_id: str) -> int | None:
        for i, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return i
        return None

    def _commit(self) -> None:
        self.save()
        self._changes.notify()


# ---- ready-made mutators for update() ----


def toggle_completed(todo: Todo) -> Todo:
    return replace(todo, is_completed=not todo.is_completed)


def set_title(title: str) -> TodoMutator:
    def _apply(todo: Todo) -> Todo:
        return replace(todo, title=title)

    return _apply


def set_notes(notes: str) -> TodoMutator:
    def _apply(todo: Todo) -> Todo:
        return replace(todo, notes=notes)

    return _apply


def set_urgency(urgency: Urgency) -> TodoMutator:
    value = Urgency(urgency)

    def _apply(todo: Todo) -> Todo:
        return replace(todo, urgency=value)

    return _apply


def edit(*, title: str | None = None, notes: str | None = None) -> TodoMutator:
    """
    Title/notes edit as done from the notes sheet.

    A blank title keeps the old one; notes are taken as-is.
    """

    def _apply(todo: Todo) -> Todo:
        if title is not None and title.strip():
            todo = replace(todo, title=title)
        if notes is not None:
            todo = replace(todo, notes=notes)
        return todo

    return _apply
