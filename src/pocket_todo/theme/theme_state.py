# theme/theme_state.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.events import ChangeNotifier
from ..core.ports import ChangeListener, Unsubscribe

logger = logging.getLogger(__name__)


class Dracula:
    """Dracula color scheme (https://draculatheme.com)."""

    BACKGROUND = "#282A36"
    CURRENT_LINE = "#44475A"
    SELECTION = "#44475A"
    FOREGROUND = "#F8F8F2"
    COMMENT = "#6272A4"
    CYAN = "#8BE9FD"
    GREEN = "#50FA7B"
    ORANGE = "#FFB86C"
    PINK = "#FF79C6"
    PURPLE = "#BD93F9"
    RED = "#FF5555"
    YELLOW = "#F1FA8C"


@dataclass(frozen=True, slots=True)
class Palette:
    background: str
    secondary_background: str
    foreground: str
    accent: str
    completed: str
    delete: str
    text_primary: str
    text_secondary: str


DARK_PALETTE = Palette(
    background=Dracula.BACKGROUND,
    secondary_background=Dracula.CURRENT_LINE,
    foreground=Dracula.FOREGROUND,
    accent=Dracula.PURPLE,
    completed=Dracula.GREEN,
    delete=Dracula.RED,
    text_primary=Dracula.FOREGROUND,
    text_secondary=Dracula.COMMENT,
)

# Light mode follows the platform's default system colors.
LIGHT_PALETTE = Palette(
    background="#FFFFFF",
    secondary_background="#F6F8FA",
    foreground="#000000",
    accent="#007AFF",
    completed="#34C759",
    delete="#FF3B30",
    text_primary="#000000",
    text_secondary="#993C3C43",
)

PALETTES: dict[bool, Palette] = {True: DARK_PALETTE, False: LIGHT_PALETTE}


def palette_for(is_dark_mode: bool) -> Palette:
    return PALETTES[bool(is_dark_mode)]


class ThemeState:
    """
    Process-wide light/dark flag.

    Only the host appearance signal should call set_dark_mode(); the palette is a
    pure function of the flag and is never persisted.
    """

    def __init__(self, is_dark_mode: bool = False) -> None:
        self._is_dark_mode = bool(is_dark_mode)
        self._changes = ChangeNotifier("ThemeState")

    @property
    def is_dark_mode(self) -> bool:
        return self._is_dark_mode

    @property
    def palette(self) -> Palette:
        return palette_for(self._is_dark_mode)

    def set_dark_mode(self, flag: bool) -> None:
        flag = bool(flag)
        if flag == self._is_dark_mode:
            return
        self._is_dark_mode = flag
        logger.info("Appearance changed: %s", "dark" if flag else "light")
        self._changes.notify()

    def subscribe(self, listener: ChangeListener) -> Unsubscribe:
        return self._changes.subscribe(listener)
