"""helperkit: email and date/time helper functions.

    >>> from helperkit import email, time
    >>> email.is_valid("user@example.com")
    True
    >>> time.is_leap_year(2024)
    True
"""

from helperkit.core import email, time
from helperkit.core.result import Result, attempt

__version__ = "0.1.0"

__all__ = ["email", "time", "Result", "attempt", "__version__"]
