"""Email and date/time helpers."""
