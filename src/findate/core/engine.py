"""Calendar engine abstraction.

The engine is the only place where ``datetime`` does the work for us:
day arithmetic, day counting, text parsing and strftime formatting.
Leap years, month lengths and month rollover live in ``calendar`` and do
not go through the engine.

PythonCalendarEngine: stdlib ``datetime`` implementation (default)
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Protocol, Sequence, runtime_checkable

logger = logging.getLogger(__name__)

DEFAULT_PARSE_FORMATS: tuple[str, ...] = ("%Y/%m/%d", "%d.%m.%Y", "%Y%m%d")


@runtime_checkable
class ICalendarEngine(Protocol):
    """Exact calendar operations delegated to a date library.

    Implementations raise ``ValueError`` or ``OverflowError`` on failure;
    callers translate those into ``InvalidInput``.
    """

    def add_days(self, day: date, count: int) -> date: ...

    def days_between(self, start: date, end: date) -> int: ...

    def parse(self, text: str) -> date: ...

    def format(self, day: date, pattern: str) -> str: ...


class PythonCalendarEngine:
    """``datetime``-backed engine.

    Text is tried as ISO-8601 first (date, then date-time), then against
    each of *formats* in order.
    """

    def __init__(self, formats: Sequence[str] | None = None) -> None:
        self._formats = tuple(DEFAULT_PARSE_FORMATS if formats is None else formats)

    @property
    def formats(self) -> tuple[str, ...]:
        return self._formats

    def add_days(self, day: date, count: int) -> date:
        return day + timedelta(days=count)

    def days_between(self, start: date, end: date) -> int:
        return (end - start).days

    def parse(self, text: str) -> date:
        value = text.strip()
        if not value:
            raise ValueError("empty date string")

        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value).date()
        except ValueError as exc:
            iso_error = exc

        for fmt in self._formats:
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue

        logger.debug("No parser accepted %r (formats=%s)", value, self._formats)
        raise ValueError(
            f"{iso_error}; also tried formats {', '.join(self._formats) or '(none)'}"
        )

    def format(self, day: date, pattern: str) -> str:
        return datetime(day.year, day.month, day.day).strftime(pattern)


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_engine: ICalendarEngine = PythonCalendarEngine()


def get_engine() -> ICalendarEngine:
    """Return the engine used when callers do not pass one."""
    return _engine


def set_engine(engine: ICalendarEngine) -> ICalendarEngine:
    """Replace the default engine.  Returns the previous one."""
    global _engine
    previous = _engine
    _engine = engine
    return previous
