"""Enumerations used across findate."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidInput


class Unit(str, Enum):
    """Calendar unit accepted by ``CalendarDate.add``."""

    YEARS = "years"
    MONTHS = "months"
    DAYS = "days"

    @classmethod
    def parse(cls, token: Unit | str) -> Unit:
        """Resolve a unit token, accepting singular and plural spellings."""
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise InvalidInput(
                f"CalendarDate.add: unit must be a string, got {type(token).__name__}"
            )
        unit = _ALIASES.get(token.strip().lower())
        if unit is None:
            raise InvalidInput(f"CalendarDate.add: unknown unit {token!r}")
        return unit


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


_ALIASES: dict[str, Unit] = {
    "year": Unit.YEARS,
    "years": Unit.YEARS,
    "month": Unit.MONTHS,
    "months": Unit.MONTHS,
    "day": Unit.DAYS,
    "days": Unit.DAYS,
}
