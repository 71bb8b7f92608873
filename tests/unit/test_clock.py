"""Test WallClock and FixedClock."""

from datetime import date

from findate.core.clock import FixedClock, WallClock


class TestWallClock:
    def test_today_returns_date(self):
        today = WallClock().today()
        assert isinstance(today, date)

    def test_today_matches_system(self):
        before = date.today()
        today = WallClock().today()
        after = date.today()
        assert before <= today <= after


class TestFixedClock:
    def test_default_day(self):
        assert FixedClock().today() == date(2024, 1, 1)

    def test_custom_day(self, fixed_clock):
        assert fixed_clock.today() == date(2024, 6, 1)

    def test_set_today(self, fixed_clock):
        fixed_clock.set_today(date(2030, 12, 31))
        assert fixed_clock.today() == date(2030, 12, 31)
