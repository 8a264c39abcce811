"""
pocket_todo: a small persisted to-do list.

Components:
- todos: data structures, the persisted TodoStore, tab/urgency filtering
- storage: key-value preference storage (one opaque blob per key)
- theme: light/dark ThemeState and its derived palette
- core: AppState and the ports the presentation layer talks to
- cli / connectors: console front end
"""

__version__ = "0.3.0"
