"""CalendarDate: an immutable Gregorian date (year, month, day).

Years are limited to 1000..9999.  Every instance is a real date; there is
no way to build or mutate one into February 30th.  Arithmetic returns new
instances.

Usage::

    d = CalendarDate(2019, 1, 31)
    d.add(1, "month")           # CalendarDate(year=2019, month=2, day=28)
    d.add(-1, Unit.YEARS)       # CalendarDate(year=2018, month=1, day=31)
    d.diff_in_days(CalendarDate.create("2019-03-01"))   # 29
    str(d)                      # "2019-01-31"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, overload

from .calendar import (
    MAX_YEAR,
    MIN_YEAR,
    clamp_day,
    is_leap_year,
    last_day_of_month,
    roll_months,
)
from .clock import IClock, WallClock
from .engine import ICalendarEngine, get_engine
from .enums import Unit
from .errors import InvalidInput

logger = logging.getLogger(__name__)

_WALL_CLOCK = WallClock()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _has_date_fields(value: Any) -> bool:
    return all(_is_int(getattr(value, name, None)) for name in ("year", "month", "day"))


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A validated Gregorian calendar date.

    Field order is (year, month, day), so the generated ordering is
    chronological and equal dates hash equal.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            value = getattr(self, name)
            if not _is_int(value):
                raise InvalidInput(
                    f"CalendarDate: {name} must be int, got {type(value).__name__}"
                )

        if self.year < MIN_YEAR or self.year > MAX_YEAR:
            raise InvalidInput(f"CalendarDate: year must be {MIN_YEAR}..{MAX_YEAR}")
        if self.month < 1 or self.month > 12:
            raise InvalidInput("CalendarDate: month must be 1..12")
        if self.day < 1 or self.day > 31:
            raise InvalidInput("CalendarDate: day must be 1..31")
        if self.day > last_day_of_month(self.year, self.month):
            raise InvalidInput("CalendarDate: day is not valid for the specified month")

    # ------------------------------------------------------------------
    # Calendar rules
    # ------------------------------------------------------------------

    @staticmethod
    def last_day_of_month(year: int, month: int) -> int:
        return last_day_of_month(year, month)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return is_leap_year(year)

    def get_last_day_of_month(self) -> int:
        return last_day_of_month(self.year, self.month)

    def get_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def to_first_of_month(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, 1)

    def to_last_of_month(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, self.get_last_day_of_month())

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    @overload
    @classmethod
    def create(
        cls, *, clock: IClock | None = None, engine: ICalendarEngine | None = None
    ) -> CalendarDate: ...

    @overload
    @classmethod
    def create(cls, year: int, month: int = 1, day: int = 1) -> CalendarDate: ...

    @overload
    @classmethod
    def create(
        cls, value: str | date | CalendarDate, *, engine: ICalendarEngine | None = None
    ) -> CalendarDate: ...

    @classmethod
    def create(
        cls,
        *args: Any,
        clock: IClock | None = None,
        engine: ICalendarEngine | None = None,
    ) -> CalendarDate:
        """Build a date from whatever the caller has at hand.

        create()                 today, from *clock* (system date by default)
        create(2019, 3, 28)      explicit fields; month and day default to 1
        create("2019-12-23")     text, parsed by *engine*
        create(datetime(...))    any date/datetime or object with int
                                 year/month/day attributes
        create(calendar_date)    the same instance

        Raises:
            InvalidInput: For invalid fields, unparseable text or an
                unsupported argument shape.
        """
        if not args:
            today = (clock or _WALL_CLOCK).today()
            return cls(today.year, today.month, today.day)

        first = args[0]
        if _is_int(first):
            if len(args) > 3:
                raise InvalidInput(
                    f"CalendarDate.create: at most 3 arguments, got {len(args)}"
                )
            year, month, day = (*args, 1, 1)[:3]
            return cls(year, month, day)

        if len(args) != 1:
            raise InvalidInput(
                "CalendarDate.create: year must be int when multiple arguments are passed"
            )

        if isinstance(first, CalendarDate):
            return first

        if isinstance(first, str):
            try:
                parsed = (engine or get_engine()).parse(first)
            except ValueError as exc:
                logger.debug("Rejected date string %r: %s", first, exc)
                raise InvalidInput(
                    f"CalendarDate.create: date string is invalid: {exc}"
                ) from exc
            return cls(parsed.year, parsed.month, parsed.day)

        if isinstance(first, date) or _has_date_fields(first):
            return cls(first.year, first.month, first.day)

        raise InvalidInput(
            f"CalendarDate.create: unsupported parameter type {type(first).__name__}"
        )

    @classmethod
    def from_json(cls, value: str) -> CalendarDate:
        """Inverse of ``to_json``."""
        if not isinstance(value, str):
            raise InvalidInput(
                f"CalendarDate.from_json: expected str, got {type(value).__name__}"
            )
        return cls.create(value)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(
        self,
        count: int,
        unit: Unit | str,
        *,
        engine: ICalendarEngine | None = None,
    ) -> CalendarDate:
        """Return a new date *count* units away (count may be negative).

        Month and year steps never spill into the following month: the day
        is cut back to the target month's last day, so 2019-01-31 plus one
        month is 2019-02-28.

        Raises:
            InvalidInput: For a non-int count, an unknown unit, or a result
                outside the supported year range.
        """
        unit = Unit.parse(unit)
        if not _is_int(count):
            raise InvalidInput(
                f"CalendarDate.add: count must be int, got {type(count).__name__}"
            )

        if unit is Unit.DAYS:
            try:
                result = (engine or get_engine()).add_days(self.to_date(), count)
            except (ValueError, OverflowError) as exc:
                raise InvalidInput(f"CalendarDate.add: {exc}") from exc
            return CalendarDate(result.year, result.month, result.day)

        if unit is Unit.YEARS:
            year, month = self.year + count, self.month
        else:
            year, month = roll_months(self.year, self.month, count)

        day = clamp_day(year, month, self.day)
        if day != self.day:
            logger.debug(
                "Clamped day %d -> %d adding %d %s to %s",
                self.day, day, count, unit.value, self,
            )
        return CalendarDate(year, month, day)

    def diff_in_days(
        self, other: CalendarDate, *, engine: ICalendarEngine | None = None
    ) -> int:
        """Signed number of days from this date to *other*.

        Positive when *other* is later, negative when earlier.
        """
        if not isinstance(other, CalendarDate):
            raise InvalidInput(
                f"CalendarDate.diff_in_days: expected CalendarDate, got {type(other).__name__}"
            )
        return (engine or get_engine()).days_between(self.to_date(), other.to_date())

    # ------------------------------------------------------------------
    # Conversion / formatting
    # ------------------------------------------------------------------

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_string(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def to_json(self) -> str:
        return self.to_string()

    def format(self, pattern: str, *, engine: ICalendarEngine | None = None) -> str:
        """Format with strftime codes; time-of-day codes render midnight."""
        try:
            return (engine or get_engine()).format(self.to_date(), pattern)
        except ValueError as exc:
            raise InvalidInput(f"CalendarDate.format: {exc}") from exc

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.to_string()
        return self.format(format_spec)

    # ------------------------------------------------------------------
    # pydantic integration
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict[str, Any]:
        return {"type": "string", "format": "date"}

    @staticmethod
    def _serialize(value: CalendarDate, info: Any) -> CalendarDate | str:
        # Python-mode dumps keep the value so model_validate can take it back.
        return value.to_json() if info.mode_is_json() else value

    @classmethod
    def _validate(cls, value: Any) -> CalendarDate:
        if _is_int(value):
            raise InvalidInput("CalendarDate: a bare year is not a date")
        return cls.create(value)
