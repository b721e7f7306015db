"""Strict date/time helpers that raise instead of returning sentinels."""

from .arithmetic import _add, _age, _parse, _week_number
from .conversion import convert_to_date
from .formatting import _format
from .queries import _days_in_month


class DateTimeHelper:
    """Raising counterparts of the module-level date/time helpers.

    Failures surface as ``InvalidInputError`` or
    ``ConstructionFailureError``. Wrap a call in
    ``helperkit.core.result.attempt`` to get a ``Result`` instead.
    """

    to_datetime = staticmethod(convert_to_date)
    add = staticmethod(_add)
    week_number = staticmethod(_week_number)
    age = staticmethod(_age)
    parse = staticmethod(_parse)
    format = staticmethod(_format)
    days_in_month = staticmethod(_days_in_month)
