"""Shared fixtures for the findate test suite."""

from __future__ import annotations

from datetime import date

import pytest

from findate.core.clock import FixedClock
from findate.core.date import CalendarDate
from findate.core.engine import PythonCalendarEngine, get_engine, set_engine


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

@pytest.fixture
def base_date() -> CalendarDate:
    """2019-01-30: day 30 does not exist in February, so month steps clamp."""
    return CalendarDate(2019, 1, 30)


@pytest.fixture
def leap_day() -> CalendarDate:
    return CalendarDate(2020, 2, 29)


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to 2024-06-01."""
    return FixedClock(date(2024, 6, 1))


@pytest.fixture
def engine() -> PythonCalendarEngine:
    return PythonCalendarEngine()


@pytest.fixture
def restore_engine():
    """Put the process-wide engine back after a test swaps it."""
    previous = get_engine()
    yield
    set_engine(previous)
