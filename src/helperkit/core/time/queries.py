"""Predicates and component accessors for date/time values.

Accessors take an optional ``date`` (anything ``convert_to_date`` accepts);
a falsy value means "now" as told by ``clock``. On failure predicates
return False, numeric accessors NaN, counts -1 and names "".
"""

import math
from datetime import datetime, timedelta
from typing import Any, Optional, Union

from helperkit.utils.errors import InvalidInputError, returns_sentinel

from .clock import TimeSource, resolve_clock
from .constants import BUSINESS_DAYS, BUSINESS_HOURS, MONTHS, SATURDAY, SUNDAY
from .conversion import convert_to_date, month_start, to_milliseconds, weekday

Number = Union[int, float]


def _moment(date: Any, clock: Optional[TimeSource]) -> datetime:
    return convert_to_date(date) if date else resolve_clock(clock).now()


def _days_in_month(month: Any = None, year: Any = None, clock: Optional[TimeSource] = None) -> int:
    if month and year:
        if isinstance(month, str):
            if month not in MONTHS:
                raise InvalidInputError(f"Unknown month name: {month!r}")
            month = MONTHS.index(month)
        first = month_start(year, month)
    else:
        now = resolve_clock(clock).now()
        first = month_start(now.year, now.month - 1)

    next_first = month_start(first.year, first.month)
    return (next_first - timedelta(days=1)).day


@returns_sentinel(False)
def is_valid(value: Any) -> bool:
    """Check that ``value`` is a datetime."""
    return isinstance(value, datetime)


@returns_sentinel(False)
def is_today(date: Any, clock: Optional[TimeSource] = None) -> bool:
    """Check whether ``date`` falls on today's local calendar day."""
    value = convert_to_date(date)
    today = resolve_clock(clock).now()
    return (
        value.day == today.day
        and value.month == today.month
        and value.year == today.year
    )


@returns_sentinel(False)
def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@returns_sentinel(-1)
def days_in_month(month: Any = None, year: Any = None, clock: Optional[TimeSource] = None) -> int:
    """Number of days in a month.

    ``month`` is a 0-based index or an English month name. Unless both
    ``month`` and ``year`` are truthy the current month is used, so the
    January index 0 also selects the current month.
    """
    return _days_in_month(month, year, clock)


@returns_sentinel("")
def current_month_name(clock: Optional[TimeSource] = None) -> str:
    return MONTHS[resolve_clock(clock).now().month - 1]


@returns_sentinel(math.nan)
def current_hour(date: Any = None, clock: Optional[TimeSource] = None) -> Number:
    return _moment(date, clock).hour


@returns_sentinel(math.nan)
def current_minute(date: Any = None, clock: Optional[TimeSource] = None) -> Number:
    return _moment(date, clock).minute


@returns_sentinel(math.nan)
def current_second(date: Any = None, clock: Optional[TimeSource] = None) -> Number:
    return _moment(date, clock).second


@returns_sentinel(math.nan)
def current_year(date: Any = None, clock: Optional[TimeSource] = None) -> Number:
    return _moment(date, clock).year


@returns_sentinel(math.nan)
def current_month(date: Any = None, clock: Optional[TimeSource] = None) -> Number:
    """Month number, January is 1."""
    return _moment(date, clock).month


@returns_sentinel(math.nan)
def current_day(date: Any = None, clock: Optional[TimeSource] = None) -> Number:
    """Day of week, Sunday is 0."""
    return weekday(_moment(date, clock))


@returns_sentinel(math.nan)
def current_date(date: Any = None, clock: Optional[TimeSource] = None) -> Number:
    """Day of month, starting at 1."""
    return _moment(date, clock).day


@returns_sentinel(math.nan)
def current_time_in_milliseconds(date: Any = None, clock: Optional[TimeSource] = None) -> Number:
    """Milliseconds since the Unix epoch."""
    return to_milliseconds(_moment(date, clock))


@returns_sentinel(False)
def is_weekend(date: Any) -> bool:
    return weekday(convert_to_date(date)) in (SATURDAY, SUNDAY)


@returns_sentinel(False)
def is_business_hours(date: Any) -> bool:
    """Monday to Friday, from 9:00 until the end of the 17:00 hour."""
    value = convert_to_date(date)
    return weekday(value) in BUSINESS_DAYS and value.hour in BUSINESS_HOURS
