"""CLI entry point for findate."""

from __future__ import annotations

from typing import Any

import click

from .core.config import Settings, build_engine, load_settings
from .core.date import CalendarDate
from .core.engine import ICalendarEngine
from .core.enums import Unit
from .core.errors import ConfigError, InvalidInput
from .observability.logger import bind_command, get_logger, new_run_id, setup_logging

_UNIT_TOKENS = ["year", "years", "month", "months", "day", "days"]


class DateParamType(click.ParamType):
    """Click parameter converting text into a CalendarDate."""

    name = "date"

    def convert(self, value: Any, param: Any, ctx: click.Context | None) -> CalendarDate:
        if isinstance(value, CalendarDate):
            return value
        engine = _engine(ctx)
        try:
            return CalendarDate.create(value, engine=engine)
        except InvalidInput as exc:
            self.fail(str(exc), param, ctx)


DATE = DateParamType()


def _engine(ctx: click.Context | None) -> ICalendarEngine | None:
    if ctx is None:
        return None
    obj = ctx.find_object(dict) or {}
    return obj.get("engine")


@click.group()
@click.option("--config", default=None, help="Config file path (TOML)")
@click.option("--log-level", default=None, help="Override observability.log_level")
@click.pass_context
def main(ctx: click.Context, config: str | None, log_level: str | None) -> None:
    """Calendar date arithmetic."""
    try:
        settings = load_settings(config_path=config)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    setup_logging(
        level=log_level or settings.observability.log_level,
        format=settings.observability.log_format.value,
    )
    new_run_id()
    bind_command(ctx.invoked_subcommand)
    ctx.obj = {"settings": settings, "engine": build_engine(settings)}
    get_logger("findate.cli").debug("cli_start", parse_formats=settings.parse_formats)


@main.command()
def today() -> None:
    """Print today's date."""
    click.echo(CalendarDate.create())


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("date", type=DATE)
@click.argument("count", type=int)
@click.argument("unit", type=click.Choice(_UNIT_TOKENS, case_sensitive=False))
def add(date: CalendarDate, count: int, unit: str) -> None:
    """Add COUNT years, months or days to DATE (COUNT may be negative)."""
    try:
        click.echo(date.add(count, Unit.parse(unit)))
    except InvalidInput as exc:
        raise click.ClickException(str(exc)) from exc


@main.command()
@click.argument("start", type=DATE)
@click.argument("end", type=DATE)
def diff(start: CalendarDate, end: CalendarDate) -> None:
    """Print the signed number of days from START to END."""
    click.echo(start.diff_in_days(end))


@main.command("format")
@click.argument("date", type=DATE)
@click.argument("pattern", required=False)
@click.pass_obj
def format_(obj: dict[str, Any], date: CalendarDate, pattern: str | None) -> None:
    """Format DATE with a strftime PATTERN."""
    settings: Settings = obj["settings"]
    try:
        click.echo(date.format(pattern or settings.default_format, engine=obj["engine"]))
    except InvalidInput as exc:
        raise click.ClickException(str(exc)) from exc


@main.command()
@click.argument("date", type=DATE)
def info(date: CalendarDate) -> None:
    """Show calendar facts about DATE."""
    click.echo(f"date:           {date}")
    click.echo(f"leap_year:      {str(date.get_leap_year()).lower()}")
    click.echo(f"days_in_month:  {date.get_last_day_of_month()}")
    click.echo(f"first_of_month: {date.to_first_of_month()}")
    click.echo(f"last_of_month:  {date.to_last_of_month()}")


if __name__ == "__main__":
    main()
