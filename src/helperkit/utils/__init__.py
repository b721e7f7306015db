"""Shared utilities: errors, logging, configuration and string predicates."""

from .strings import is_not_empty

__all__ = ["is_not_empty"]
