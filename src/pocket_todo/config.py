# src/pocket_todo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a local default.
- Legacy module-level constants are exported for quick scripts.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "POCKET"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    prefs_dir: Path

    # ---- Persistence ----
    todos_key: str

    # ---- Appearance ----
    dark_mode: bool
    console_color: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "pocket-todo").strip() or "pocket-todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/pocket_todo"))
        prefs_dir = _env_path(_k("PREFS_DIR"), data_dir / "prefs")

        todos_key = _env(_k("TODOS_KEY"), "todos").strip() or "todos"

        # Initial appearance; the host may flip it later via /theme.
        dark_mode = _env_bool(_k("DARK_MODE"), False)

        # Same conventions as most terminal tools: NO_COLOR always wins.
        console_color = _env_bool(_k("CONSOLE_COLOR"), True) and os.getenv("NO_COLOR") is None

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            prefs_dir=prefs_dir,
            todos_key=todos_key,
            dark_mode=dark_mode,
            console_color=console_color,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
try:
    import config_local as _config_local  # type: ignore

    if hasattr(_config_local, "DARK_MODE"):
        object.__setattr__(SETTINGS, "dark_mode", bool(_config_local.DARK_MODE))  # type: ignore[misc]
    if hasattr(_config_local, "CONSOLE_COLOR"):
        object.__setattr__(SETTINGS, "console_color", bool(_config_local.CONSOLE_COLOR))  # type: ignore[misc]
except ImportError:
    pass


def get_settings() -> Settings:
    return SETTINGS
