# src/pocket_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store and the presentation layer depend on Protocols instead of concrete
implementations, so the preference backend is swappable and tests stay simple.
"""

from collections.abc import Callable
from typing import Protocol

ChangeListener = Callable[[], None]
Unsubscribe = Callable[[], None]


class PreferenceStore(Protocol):
    """Key-value storage of opaque blobs (the platform's user-defaults equivalent)."""

    def get(self, key: str) -> bytes | None: ...
    def set(self, key: str, value: bytes) -> None: ...
    def delete(self, key: str) -> None: ...
