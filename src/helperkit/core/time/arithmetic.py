"""Date arithmetic, week numbers, ages and format-driven parsing."""

import math
import re
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from helperkit.utils.errors import ErrorHandler, InvalidInputError, returns_sentinel

from .clock import TimeSource, resolve_clock
from .constants import MILLISECONDS_PER_YEAR
from .conversion import convert_to_date, month_start, shift_months, weekday

_DIGIT_RUNS = re.compile(r"\d+")
_FORMAT_GROUPS = re.compile(r"[Ymd]+")

UNIT_HANDLERS: Dict[str, Callable[[datetime, Any], datetime]] = {
    "seconds": lambda value, amount: value + timedelta(seconds=amount),
    "minutes": lambda value, amount: value + timedelta(minutes=amount),
    "hours": lambda value, amount: value + timedelta(hours=amount),
    "days": lambda value, amount: value + timedelta(days=amount),
    "months": lambda value, amount: shift_months(value, amount),
    "years": lambda value, amount: shift_months(value, 12 * amount),
}


def _add(date: Any, amount: Any, unit: str) -> datetime:
    value = convert_to_date(date)
    handler = UNIT_HANDLERS.get(unit)
    if handler is None:
        return value
    # fractions are truncated toward zero for every unit
    return handler(value, int(amount))


def _week_number(date: Any) -> int:
    value = convert_to_date(date)
    first_day = datetime(value.year, 1, 1)
    days_since_first_day = (value - first_day) / timedelta(days=1)
    return math.ceil((days_since_first_day + weekday(first_day) + 1) / 7)


def _age(birthdate: Any, reference_date: Any = None, clock: Optional[TimeSource] = None) -> int:
    birth = convert_to_date(birthdate)
    reference = (
        convert_to_date(reference_date)
        if reference_date is not None
        else resolve_clock(clock).now()
    )
    elapsed_ms = (reference - birth) / timedelta(milliseconds=1)
    return math.floor(elapsed_ms / MILLISECONDS_PER_YEAR)


def _group_index(groups: list[str], letter: str) -> int:
    for index, group in enumerate(groups):
        if set(group) == {letter}:
            return index
    raise InvalidInputError(f"Format has no '{letter}' group")


def _parse(date_string: str, fmt: str) -> datetime:
    parts = _DIGIT_RUNS.findall(date_string)
    if len(parts) < 3:
        raise InvalidInputError(f"Expected at least 3 numbers in {date_string!r}")

    groups = _FORMAT_GROUPS.findall(fmt)
    if len(groups) < 3:
        raise InvalidInputError(f"Expected at least 3 Y/m/d groups in {fmt!r}")

    try:
        year = int(parts[_group_index(groups, "Y")])
        month = int(parts[_group_index(groups, "m")]) - 1
        day = int(parts[_group_index(groups, "d")])
    except IndexError as e:
        raise InvalidInputError(f"{date_string!r} has fewer numbers than {fmt!r} groups") from e

    # out-of-range months and days roll over like a native date constructor
    return month_start(year, month) + timedelta(days=day - 1)


def add_time_to_date(date: Any, amount: Any, unit: str) -> Any:
    """Add ``amount`` ``unit`` to ``date``.

    ``unit`` is one of seconds, minutes, hours, days, months or years; any
    other unit leaves the date unchanged. Fractional amounts are truncated
    toward zero, so 1.5 hours adds one hour. On failure the original
    ``date`` is returned as given.
    """
    try:
        return _add(date, amount, unit)
    except Exception as e:
        ErrorHandler.handle(e, "add_time_to_date", log_traceback=False)
        return date


@returns_sentinel(-1)
def get_week_number(date: Any) -> int:
    """Week of the year, counting the partial first week as week 1.

    Weeks start on Sunday; no ISO 8601 year-boundary adjustment is made.
    """
    return _week_number(date)


@returns_sentinel(-1)
def get_age(birthdate: Any, reference_date: Any = None, clock: Optional[TimeSource] = None) -> int:
    """Whole 365-day years between ``birthdate`` and ``reference_date`` (default now)."""
    return _age(birthdate, reference_date, clock)


@returns_sentinel(None)
def parse_date(date_string: str, format: str) -> Optional[datetime]:
    """Build a date from the numbers in ``date_string`` ordered by ``format``.

    ``format`` is read for groups of Y, m and d (e.g. "d/m/Y" or
    "YYYY-mm-dd"); the n-th group names the n-th number.
    """
    return _parse(date_string, format)
