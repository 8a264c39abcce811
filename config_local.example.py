# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for everything else. Only the names below are honored.
"""

# Example: always start in dark mode
# DARK_MODE = True

# Example: plain output (e.g. when piping into a file)
# CONSOLE_COLOR = False
