"""Key-value preference storage."""
