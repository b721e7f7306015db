"""Shared constants for date/time helpers."""

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400

# fixed 365-day year, not calendar aware
MILLISECONDS_PER_YEAR = 31_536_000_000

# weekday numbering used throughout: Sunday=0 .. Saturday=6
SUNDAY = 0
SATURDAY = 6

BUSINESS_DAYS = range(1, 6)
BUSINESS_HOURS = range(9, 18)

DEFAULT_DATE_FORMAT = "YYYY-MM-DD"

ISO_OPTIONS_MESSAGE = (
    "Options must provide 'date' as a datetime, 'timezone_offset' as a boolean "
    "and 'exact_timezone_offset' as a boolean"
)
