# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "POCKET_APP_NAME": "App display name (default: pocket-todo).",
    "POCKET_LOG_LEVEL": "File logging level (default: INFO). The console only shows WARNING+.",
    # Paths (gitignored)
    "POCKET_DATA_DIR": "Local data directory, also holds pocket_todo.log (default: .local/pocket_todo).",
    "POCKET_PREFS_DIR": "Preference store directory (default: <data_dir>/prefs).",
    # Persistence
    "POCKET_TODOS_KEY": "Preference key holding the todo list blob (default: todos).",
    # Appearance
    "POCKET_DARK_MODE": "Start in dark mode (true/false, default: false).",
    "POCKET_CONSOLE_COLOR": "ANSI colors in the console (true/false, default: true). NO_COLOR disables.",
}
