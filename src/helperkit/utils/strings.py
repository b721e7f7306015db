"""String predicates shared by the email and time helpers."""

from typing import Any


def is_not_empty(value: Any) -> bool:
    """Return True if value is a string with non-whitespace content."""
    return isinstance(value, str) and value.strip() != ""
