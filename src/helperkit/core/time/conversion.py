"""Conversion of loosely typed inputs into local datetimes."""

import datetime as dt
import math
from typing import Any

from helperkit.utils.errors import ConstructionFailureError


def convert_to_date(value: Any) -> dt.datetime:
    """Best-effort conversion of ``value`` to a naive local datetime.

    Accepts datetimes (aware ones are converted to local time), dates
    (local midnight), numbers (epoch milliseconds) and ISO 8601 strings
    (a trailing "Z" is accepted).

    Raises:
        ConstructionFailureError: If no datetime can be built from ``value``.
    """
    try:
        if isinstance(value, dt.datetime):
            if value.tzinfo is not None:
                return value.astimezone().replace(tzinfo=None)
            return value.replace()

        if isinstance(value, dt.date):
            return dt.datetime(value.year, value.month, value.day)

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if not math.isfinite(value):
                raise ValueError("timestamp is not finite")
            return dt.datetime.fromtimestamp(value / 1000)

        if isinstance(value, str) and value.strip():
            text = value.strip()
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            parsed = dt.datetime.fromisoformat(text)
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone().replace(tzinfo=None)
            return parsed

    except (ValueError, OverflowError, OSError) as e:
        raise ConstructionFailureError(
            f"Cannot build a date from {value!r}: {e}",
            details={"value_type": type(value).__name__},
        ) from e

    raise ConstructionFailureError(
        f"Cannot build a date from {value!r}",
        details={"value_type": type(value).__name__},
    )


def weekday(value: dt.datetime) -> int:
    """Day of week with Sunday as 0 and Saturday as 6."""
    return (value.weekday() + 1) % 7


def month_start(year: int, month_index: int) -> dt.datetime:
    """First day of a month given a 0-based month index.

    Indexes outside 0..11 roll over into neighbouring years.
    """
    return dt.datetime(year + month_index // 12, month_index % 12 + 1, 1)


def shift_months(value: dt.datetime, months: int) -> dt.datetime:
    """Move ``value`` by whole months, keeping the day number.

    A day number past the end of the target month rolls over into the
    following month (Jan 31 + 1 month is Mar 2 or 3).
    """
    first = month_start(value.year, value.month - 1 + months)
    return first.replace(
        hour=value.hour,
        minute=value.minute,
        second=value.second,
        microsecond=value.microsecond,
    ) + dt.timedelta(days=value.day - 1)


def to_milliseconds(value: dt.datetime) -> int:
    """Epoch milliseconds of a naive local (or aware) datetime."""
    return int(value.replace(microsecond=0).timestamp()) * 1000 + value.microsecond // 1000
