# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field


class FailingPreferences:
    """
    Preference backend whose writes fail after `fail_after` successful ones.

    Reads return whatever was last written successfully.
    """

    def __init__(self, fail_after: int = 0) -> None:
        self.fail_after = fail_after
        self.data: dict[str, bytes] = {}
        self.writes = 0

    def get(self, key: str) -> bytes | None:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        if self.writes >= self.fail_after:
            raise OSError("disk full")
        self.writes += 1
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class ExplodingPreferences:
    """Backend whose reads fail outright."""

    def get(self, key: str) -> bytes | None:
        raise OSError("storage unavailable")

    def set(self, key: str, value: bytes) -> None:
        raise OSError("storage unavailable")

    def delete(self, key: str) -> None:
        raise OSError("storage unavailable")


@dataclass(slots=True)
class CallCounter:
    """Change listener that counts notifications."""

    calls: int = 0
    seen: list[int] = field(default_factory=list)

    def __call__(self) -> None:
        self.calls += 1
        self.seen.append(self.calls)


class ScriptedInput:
    """input() replacement that replays lines, then raises EOFError."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)
