"""Clock abstraction for "today".

WallClock: the host system's local calendar date
FixedClock: a pinned date (tests, replays, batch runs for a business date)

``CalendarDate.create()`` never calls ``date.today()`` directly; it asks a clock.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol


class IClock(Protocol):
    """Source of the current calendar date."""

    def today(self) -> date:
        """Current local calendar date."""
        ...


class WallClock:
    """Real system date."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock pinned to a single date.

    The date can be moved explicitly, e.g. when a batch job steps through
    business days.
    """

    def __init__(self, day: date | None = None) -> None:
        self._day = day or date(2024, 1, 1)

    def today(self) -> date:
        return self._day

    def set_today(self, day: date) -> None:
        self._day = day
