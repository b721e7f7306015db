"""Shared constants for email helpers."""

import re


# local-part "@" domain "." suffix, none of them containing whitespace or "@"
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

WHITESPACE_PATTERN = re.compile(r"\s")


class RecordType:
    """DNS record types queried by the domain checks."""

    MX = "MX"
    # default record type of a plain host lookup
    ADDRESS = "A"
