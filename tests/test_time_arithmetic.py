"""
Tests for date arithmetic, parsing and conversion

Tests cover:
- add_time_to_date for every unit and month rollover
- Week numbers and ages
- Format-driven parse_date
- convert_to_date and the strict DateTimeHelper
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from helperkit.core.result import attempt
from helperkit.core.time import (
    DateTimeHelper,
    FixedClock,
    add_time_to_date,
    convert_to_date,
    get_age,
    get_week_number,
    parse_date,
)
from helperkit.utils.errors import ConstructionFailureError, InvalidInputError


class TestAddTimeToDate:
    """Tests for add_time_to_date"""

    BASE = datetime(2024, 1, 15, 10, 30, 0)

    @pytest.mark.parametrize("amount,unit,expected", [
        (30, "seconds", datetime(2024, 1, 15, 10, 30, 30)),
        (45, "minutes", datetime(2024, 1, 15, 11, 15, 0)),
        (-12, "hours", datetime(2024, 1, 14, 22, 30, 0)),
        (20, "days", datetime(2024, 2, 4, 10, 30, 0)),
        (2, "months", datetime(2024, 3, 15, 10, 30, 0)),
        (12, "months", datetime(2025, 1, 15, 10, 30, 0)),
        (-1, "months", datetime(2023, 12, 15, 10, 30, 0)),
        (3, "years", datetime(2027, 1, 15, 10, 30, 0)),
    ])
    def test_units(self, amount, unit, expected):
        """Test each supported unit"""
        assert add_time_to_date(self.BASE, amount, unit) == expected

    def test_month_overflow_rolls_over(self):
        """Test a day past the end of the target month rolls into the next"""
        assert add_time_to_date(datetime(2023, 1, 31), 1, "months") == datetime(2023, 3, 3)
        assert add_time_to_date(datetime(2024, 1, 31), 1, "months") == datetime(2024, 3, 2)

    def test_leap_day_plus_year(self):
        """Test Feb 29 plus one year lands on Mar 1"""
        assert add_time_to_date(datetime(2024, 2, 29), 1, "years") == datetime(2025, 3, 1)

    @pytest.mark.parametrize("amount,unit,expected", [
        (1.5, "hours", datetime(2024, 1, 15, 11, 30, 0)),
        (1.9, "days", datetime(2024, 1, 16, 10, 30, 0)),
        (1.5, "months", datetime(2024, 2, 15, 10, 30, 0)),
        (-1.5, "months", datetime(2023, 12, 15, 10, 30, 0)),
        (2.7, "years", datetime(2026, 1, 15, 10, 30, 0)),
    ])
    def test_fractional_amounts_are_truncated(self, amount, unit, expected):
        """Test fractional amounts drop their fraction for every unit"""
        assert add_time_to_date(self.BASE, amount, unit) == expected

    def test_unknown_unit_is_noop(self):
        """Test an unknown unit leaves the date unchanged"""
        result = add_time_to_date(self.BASE, 5, "fortnights")
        assert result == self.BASE

    def test_input_not_mutated(self):
        """Test the input datetime is left untouched"""
        base = datetime(2024, 1, 15)
        add_time_to_date(base, 1, "days")
        assert base == datetime(2024, 1, 15)

    def test_string_input_is_converted(self):
        """Test string dates are converted first"""
        assert add_time_to_date("2024-01-15T10:30:00", 1, "hours") == datetime(2024, 1, 15, 11, 30)

    def test_failure_returns_original_input(self):
        """Test failures return the input as given"""
        assert add_time_to_date("not a date", 1, "days") == "not a date"
        assert add_time_to_date(self.BASE, "one", "days") is self.BASE


class TestWeekNumber:
    """Tests for get_week_number"""

    @pytest.mark.parametrize("moment,expected", [
        (datetime(2023, 1, 1), 1),
        (datetime(2023, 1, 7), 1),
        (datetime(2023, 1, 8), 2),
        (datetime(2024, 1, 1), 1),
        (datetime(2024, 1, 6), 1),
        (datetime(2024, 1, 7), 2),
        (datetime(2024, 1, 7, 12, 0), 2),
        (datetime(2024, 12, 31), 53),
    ])
    def test_week_numbers(self, moment, expected):
        """Test Sunday-based week counting from January 1"""
        assert get_week_number(moment) == expected

    def test_invalid_input(self):
        """Test unconvertible input yields -1"""
        assert get_week_number("week 5") == -1


class TestGetAge:
    """Tests for get_age"""

    def test_age_with_reference(self):
        """Test whole 365-day years are counted"""
        assert get_age(datetime(2000, 1, 1), datetime(2024, 1, 1)) == 24
        assert get_age(datetime(2000, 1, 1), datetime(2023, 12, 25)) == 23

    def test_age_uses_clock(self):
        """Test the clock is the default reference"""
        clock = FixedClock(datetime(2020, 6, 1))
        assert get_age(datetime(1990, 5, 1), clock=clock) == 30

    def test_future_birthdate(self):
        """Test a birthdate after the reference gives a negative age"""
        assert get_age(datetime(2024, 1, 2), datetime(2024, 1, 1)) == -1

    def test_invalid_input(self):
        """Test unconvertible input yields -1"""
        assert get_age("long ago") == -1


class TestParseDate:
    """Tests for parse_date"""

    @pytest.mark.parametrize("text,fmt,expected", [
        ("2024-03-15", "Y-m-d", datetime(2024, 3, 15)),
        ("2024-03-15", "YYYY-mm-dd", datetime(2024, 3, 15)),
        ("15/03/2024", "d/m/Y", datetime(2024, 3, 15)),
        ("03.15.2024", "mm.dd.YYYY", datetime(2024, 3, 15)),
        ("on 2024/3/15 at noon", "Y/m/d", datetime(2024, 3, 15)),
    ])
    def test_formats(self, text, fmt, expected):
        """Test numbers are mapped by format group order"""
        assert parse_date(text, fmt) == expected

    def test_out_of_range_values_roll_over(self):
        """Test month and day overflow roll into later dates"""
        assert parse_date("2024-13-01", "Y-m-d") == datetime(2025, 1, 1)
        assert parse_date("2023-02-30", "Y-m-d") == datetime(2023, 3, 2)

    @pytest.mark.parametrize("text,fmt", [
        ("2024-03", "Y-m-d"),
        ("2024-03-15", "Y-m"),
        ("2024-03-15", "Ymd"),
        ("2024-03-15", "Y-d-d"),
        ("0-03-15", "Y-m-d"),
        (None, "Y-m-d"),
    ])
    def test_unparseable_returns_none(self, text, fmt):
        """Test unparseable input yields None"""
        assert parse_date(text, fmt) is None


class TestConvertToDate:
    """Tests for convert_to_date"""

    def test_datetime_copy(self):
        """Test naive datetimes are returned as equal values"""
        moment = datetime(2024, 1, 15, 10, 0)
        assert convert_to_date(moment) == moment

    def test_date_becomes_midnight(self):
        """Test dates become local midnight"""
        assert convert_to_date(date(2024, 1, 15)) == datetime(2024, 1, 15)

    def test_aware_becomes_local_naive(self):
        """Test aware datetimes are converted to naive local time"""
        moment = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        converted = convert_to_date(moment)
        assert converted.tzinfo is None
        assert converted == moment.astimezone().replace(tzinfo=None)

    def test_iso_string_with_z(self):
        """Test a trailing Z is read as UTC"""
        converted = convert_to_date("2024-01-15T12:00:00Z")
        assert converted == datetime(2024, 1, 15, 12, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)

    def test_epoch_milliseconds(self):
        """Test numbers are epoch milliseconds"""
        assert convert_to_date(86_400_000) == datetime.fromtimestamp(86_400)

    @pytest.mark.parametrize("value", ["", "garbage", None, True, float("nan"), [2024, 1, 1]])
    def test_unconvertible_raises(self, value):
        """Test unconvertible input raises ConstructionFailureError"""
        with pytest.raises(ConstructionFailureError):
            convert_to_date(value)


class TestDateTimeHelper:
    """Tests for the strict helper API"""

    def test_parse_reports_reason(self):
        """Test strict parsing raises InvalidInputError"""
        with pytest.raises(InvalidInputError):
            DateTimeHelper.parse("2024", "Y-m-d")

    def test_attempt_wraps_failure(self):
        """Test attempt captures the failure kind"""
        result = attempt(DateTimeHelper.week_number, "not a date")
        assert not result.ok
        assert result.failure_kind == "ConstructionFailureError"
        assert result.unwrap_or(-1) == -1

    def test_attempt_wraps_success(self):
        """Test attempt carries the value"""
        result = attempt(DateTimeHelper.days_in_month, "February", 2024)
        assert result.ok
        assert result.value == 29

    def test_strict_add_and_format(self):
        """Test strict variants return plain values"""
        moment = DateTimeHelper.add(datetime(2024, 1, 1), 1, "days")
        assert DateTimeHelper.format(moment, "DD.MM.YYYY") == "02.01.2024"
        assert DateTimeHelper.age(datetime(2000, 1, 1), datetime(2010, 1, 2)) == 10
        assert DateTimeHelper.to_datetime("2024-01-01") == datetime(2024, 1, 1)
