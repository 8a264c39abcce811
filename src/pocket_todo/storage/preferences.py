# storage/preferences.py

from __future__ import annotations

import contextlib
import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def _check_key(key: str) -> str:
    if not key or not _KEY_RE.match(key) or key.startswith("."):
        raise ValueError(f"invalid preference key: {key!r}")
    return key


class FilePreferences:
    """
    File-backed key-value store: one file per key, value is an opaque byte blob.

    Writes go to a temp file first and are swapped in with os.replace, so a failed
    write leaves the previous value intact.
    """

    def __init__(self, root_dir: str | Path) -> None:
        self._root = Path(root_dir)
        self._root.mkdir(parents=True, exist_ok=True)
        logger.info("FilePreferences ready dir=%s", self._root)

    @property
    def root_dir(self) -> Path:
        return self._root

    def path_for(self, key: str) -> Path:
        return self._root / f"{_check_key(key)}.json"

    def get(self, key: str) -> bytes | None:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None

    def set(self, key: str, value: bytes) -> None:
        path = self.path_for(key)
        tmp = path.with_suffix(".tmp")
        try:
            tmp.write_bytes(value)
            os.replace(tmp, path)
        except BaseException:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        logger.debug("Preference written key=%s bytes=%d", key, len(value))

    def delete(self, key: str) -> None:
        with contextlib.suppress(FileNotFoundError):
            self.path_for(key).unlink()


class MemoryPreferences:
    """In-process store with the same interface; used for tests and demos."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(_check_key(key))

    def set(self, key: str, value: bytes) -> None:
        self._data[_check_key(key)] = bytes(value)

    def delete(self, key: str) -> None:
        self._data.pop(_check_key(key), None)
