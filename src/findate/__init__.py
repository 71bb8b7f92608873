"""findate: immutable Gregorian calendar dates with clamp-not-rollover arithmetic.

Everything here is a value: instances are never modified, and arithmetic
returns new instances.
"""

from .core.calendar import MAX_YEAR, MIN_YEAR, is_leap_year, last_day_of_month
from .core.date import CalendarDate
from .core.enums import Unit
from .core.errors import ConfigError, DateError, InvalidInput

__all__ = [
    "CalendarDate",
    "ConfigError",
    "DateError",
    "InvalidInput",
    "MAX_YEAR",
    "MIN_YEAR",
    "Unit",
    "is_leap_year",
    "last_day_of_month",
]
