"""Date/time helpers.

Dates are Python datetimes in local time. Helpers that read the current
time accept a ``clock`` (any object with a ``now()`` method) so callers
can pin "now".

Usage Examples
----------------

    >>> from datetime import datetime
    >>> from helperkit.core.time import format_date, relative_time, FixedClock
    >>> format_date(datetime(2023, 1, 5), "YYYY-MM-DD")
    '2023-01-05'
    >>> clock = FixedClock(datetime(2024, 3, 1, 12, 0, 0))
    >>> relative_time(datetime(2024, 3, 1, 11, 58, 30), clock=clock)
    '1 minute ago'

Notes
-----
- Helpers return False, "", NaN, -1 or None on failure
- to_iso_string_format raises InvalidInputError for malformed options
- DateTimeHelper exposes raising variants
"""

from .arithmetic import add_time_to_date, get_age, get_week_number, parse_date
from .clock import FixedClock, SystemClock, TimeSource
from .constants import MONTHS
from .conversion import convert_to_date
from .formatting import (
    IsoFormatOptions,
    current_full_date,
    current_time,
    format_date,
    relative_time,
    to_iso_string_format,
)
from .helper import DateTimeHelper
from .queries import (
    current_date,
    current_day,
    current_hour,
    current_minute,
    current_month,
    current_month_name,
    current_second,
    current_time_in_milliseconds,
    current_year,
    days_in_month,
    is_business_hours,
    is_leap_year,
    is_today,
    is_valid,
    is_weekend,
)

__all__ = [
    # Clock
    "TimeSource",
    "SystemClock",
    "FixedClock",
    "MONTHS",
    # Validation
    "is_valid",
    "is_today",
    "is_leap_year",
    "is_weekend",
    "is_business_hours",
    # Accessors
    "days_in_month",
    "current_month_name",
    "current_hour",
    "current_minute",
    "current_second",
    "current_year",
    "current_month",
    "current_day",
    "current_date",
    "current_time_in_milliseconds",
    # Formatting
    "IsoFormatOptions",
    "current_full_date",
    "current_time",
    "format_date",
    "to_iso_string_format",
    "relative_time",
    # Arithmetic and parsing
    "add_time_to_date",
    "get_week_number",
    "get_age",
    "parse_date",
    "convert_to_date",
    "DateTimeHelper",
]
