"""Light/dark theme state and palette."""
