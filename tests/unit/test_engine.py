"""Test PythonCalendarEngine and the process-wide default engine."""

from datetime import date

import pytest

from findate.core.date import CalendarDate
from findate.core.engine import (
    DEFAULT_PARSE_FORMATS,
    ICalendarEngine,
    PythonCalendarEngine,
    get_engine,
    set_engine,
)
from findate.core.errors import InvalidInput


class TestParse:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2019-12-23", date(2019, 12, 23)),
            ("  2019-12-23\n", date(2019, 12, 23)),
            ("2019-11-18T17:23", date(2019, 11, 18)),
            ("2019-11-18 17:23:05", date(2019, 11, 18)),
            ("2019/12/23", date(2019, 12, 23)),
            ("23.12.2019", date(2019, 12, 23)),
            ("20191223", date(2019, 12, 23)),
        ],
    )
    def test_accepted_forms(self, engine, text, expected):
        assert engine.parse(text) == expected

    def test_empty_rejected(self, engine):
        with pytest.raises(ValueError, match="empty date string"):
            engine.parse("   ")

    def test_unparseable_lists_formats(self, engine):
        with pytest.raises(ValueError, match="also tried formats"):
            engine.parse("next tuesday")

    def test_custom_formats(self):
        engine = PythonCalendarEngine(formats=["%m/%d/%Y"])
        assert engine.parse("12/23/2019") == date(2019, 12, 23)
        with pytest.raises(ValueError):
            engine.parse("23.12.2019")

    def test_iso_only(self):
        engine = PythonCalendarEngine(formats=[])
        assert engine.formats == ()
        with pytest.raises(ValueError, match=r"\(none\)"):
            engine.parse("2019/12/23")

    def test_default_formats(self, engine):
        assert engine.formats == DEFAULT_PARSE_FORMATS


class TestDayArithmetic:
    def test_add_days(self, engine):
        assert engine.add_days(date(2019, 12, 31), 1) == date(2020, 1, 1)
        assert engine.add_days(date(2020, 3, 1), -1) == date(2020, 2, 29)

    def test_days_between(self, engine):
        assert engine.days_between(date(2004, 3, 1), date(2005, 3, 1)) == 365
        assert engine.days_between(date(2005, 3, 1), date(2004, 3, 1)) == -365

    def test_format(self, engine):
        assert engine.format(date(2019, 1, 2), "%Y.%m.%d") == "2019.01.02"


class TestDefaultEngine:
    def test_default_is_python_engine(self):
        assert isinstance(get_engine(), PythonCalendarEngine)

    def test_satisfies_protocol(self, engine):
        assert isinstance(engine, ICalendarEngine)

    def test_set_engine_returns_previous(self, restore_engine):
        previous = get_engine()
        replacement = PythonCalendarEngine(formats=["%m/%d/%Y"])
        assert set_engine(replacement) is previous
        assert get_engine() is replacement

    def test_create_uses_default_engine(self, restore_engine):
        set_engine(PythonCalendarEngine(formats=["%m/%d/%Y"]))
        assert CalendarDate.create("12/23/2019") == CalendarDate(2019, 12, 23)
        with pytest.raises(InvalidInput):
            CalendarDate.create("23.12.2019")

    def test_explicit_engine_overrides_default(self):
        engine = PythonCalendarEngine(formats=["%m/%d/%Y"])
        assert CalendarDate.create("12/23/2019", engine=engine) == CalendarDate(2019, 12, 23)
