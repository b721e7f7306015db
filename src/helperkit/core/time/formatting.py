"""Formatting of date/time values into strings."""

import math
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from helperkit.utils.errors import ConversionError, InvalidInputError, returns_sentinel
from helperkit.utils.logging import get_logger

from .clock import TimeSource, resolve_clock
from .constants import (
    DEFAULT_DATE_FORMAT,
    ISO_OPTIONS_MESSAGE,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from .conversion import convert_to_date

logger = get_logger(__name__)


class IsoFormatOptions(BaseModel):
    """Options for ``to_iso_string_format``."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    date: datetime
    timezone_offset: bool = Field(default=False, alias="timezoneOffset")
    exact_timezone_offset: bool = Field(default=False, alias="exactTimezoneOffset")


def _pad(number: int, width: int = 2) -> str:
    return str(number).zfill(width)


def _format(date: Any, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    value = convert_to_date(date)
    replacements = (
        ("YYYY", str(value.year)),
        ("MM", _pad(value.month)),
        ("DD", _pad(value.day)),
        ("hh", _pad(value.hour)),
        ("mm", _pad(value.minute)),
        ("ss", _pad(value.second)),
        ("SSS", _pad(value.microsecond // 1000, 3)),
    )
    for token, text in replacements:
        fmt = fmt.replace(token, text, 1)
    return fmt


def _timezone_offset_minutes(value: datetime) -> int:
    """Minutes to add to local time to get UTC (UTC+2 gives -120).

    Aware datetimes use their own offset, naive ones the system zone.
    """
    offset = value.utcoffset() if value.tzinfo is not None else value.astimezone().utcoffset()
    return -round(offset.total_seconds() / 60)


@returns_sentinel("")
def current_full_date(date: Any = None, clock: Optional[TimeSource] = None) -> str:
    """Date as YYYY-MM-DD."""
    value = convert_to_date(date) if date else resolve_clock(clock).now()
    return f"{value.year}-{_pad(value.month)}-{_pad(value.day)}"


@returns_sentinel("")
def current_time(date: Any = None, clock: Optional[TimeSource] = None) -> str:
    """Time as HH:MM:SS on a 24-hour clock."""
    value = convert_to_date(date) if date else resolve_clock(clock).now()
    return f"{_pad(value.hour)}:{_pad(value.minute)}:{_pad(value.second)}"


@returns_sentinel("")
def format_date(date: Any, format: str = DEFAULT_DATE_FORMAT) -> str:
    """Substitute YYYY, MM, DD, hh, mm, ss and SSS in ``format``.

    Only the first occurrence of each token is replaced.
    """
    return _format(date, format)


def to_iso_string_format(
    options: Union[IsoFormatOptions, Mapping[str, Any], None] = None,
    clock: Optional[TimeSource] = None,
) -> str:
    """Format a datetime as an ISO 8601-like string from its local fields.

    By default the string ends with a literal ".000Z". With
    ``timezone_offset`` a "+HH:MM"/"-HH:MM" suffix is used instead, and
    with ``exact_timezone_offset`` as well, the raw offset in minutes. The
    sign follows the minutes-to-UTC convention, so UTC+2 renders as
    "-02:00" and "-120".

    Raises:
        InvalidInputError: If ``options`` is missing a datetime ``date`` or
            is otherwise malformed.
        ConversionError: If an offset is requested but the zone offset of
            ``date`` cannot be determined.
    """
    try:
        if options is None:
            opts = IsoFormatOptions(date=resolve_clock(clock).now())
        elif isinstance(options, IsoFormatOptions):
            opts = options
        else:
            opts = IsoFormatOptions.model_validate(options)

        value = opts.date
        base = (
            f"{value.year}-{_pad(value.month)}-{_pad(value.day)}"
            f"T{_pad(value.hour)}:{_pad(value.minute)}:{_pad(value.second)}"
        )

    except (PydanticValidationError, TypeError, ValueError, AttributeError, OverflowError) as e:
        logger.debug(f"Rejected ISO format options: {e}")
        raise InvalidInputError(ISO_OPTIONS_MESSAGE) from e

    if not opts.timezone_offset:
        return f"{base}.000Z"

    try:
        tzo = _timezone_offset_minutes(value)
    except (ValueError, OverflowError, OSError) as e:
        raise ConversionError(
            f"Cannot determine the timezone offset of {value.isoformat()}",
            details={"date": value.isoformat()},
        ) from e

    if opts.exact_timezone_offset:
        return f"{base}{tzo}"

    sign = "+" if tzo >= 0 else "-"
    return f"{base}{sign}{_pad(abs(tzo) // 60)}:{_pad(abs(tzo) % 60)}"


@returns_sentinel("")
def relative_time(date: Any, clock: Optional[TimeSource] = None) -> str:
    """Describe how long ago ``date`` was, e.g. "5 minutes ago"."""
    value = convert_to_date(date)
    elapsed = math.floor((resolve_clock(clock).now() - value).total_seconds())

    if elapsed < SECONDS_PER_MINUTE:
        return "just now"
    if elapsed < 2 * SECONDS_PER_MINUTE:
        return "1 minute ago"
    if elapsed < SECONDS_PER_HOUR:
        return f"{elapsed // SECONDS_PER_MINUTE} minutes ago"
    if elapsed < 2 * SECONDS_PER_HOUR:
        return "1 hour ago"
    if elapsed < SECONDS_PER_DAY:
        return f"{elapsed // SECONDS_PER_HOUR} hours ago"
    if elapsed < 2 * SECONDS_PER_DAY:
        return "1 day ago"
    return f"{elapsed // SECONDS_PER_DAY} days ago"
