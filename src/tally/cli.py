"""Tally CLI - personal task list."""

import logging
import sys
from datetime import date, datetime, time

import click

from .adapters.sqlite_store import StoreError
from .config import Config, load_config
from .core.display import entries_to_json, format_entries
from .core.entries import Priority
from .core.query import Query
from .workflows import add_entry, get_entries

PRIORITY_CHOICES = [p.label for p in Priority]


class DateTimeParam(click.ParamType):
    """
    ISO-8601 date or date-time.

    Naive values are read in the configured timezone. A bare date means
    the start of that day, or its last instant when end_of_day is set.
    """

    name = "datetime"

    def __init__(self, end_of_day: bool = False):
        self.end_of_day = end_of_day

    def convert(self, value, param, ctx):
        if isinstance(value, datetime):
            return value

        text = value.strip()
        try:
            day = date.fromisoformat(text)
        except ValueError:
            day = None

        if day is not None:
            parsed = datetime.combine(day, time.max if self.end_of_day else time.min)
        else:
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError:
                self.fail(f"{value!r} is not a valid date or date-time (e.g. 2023-02-25 or 2023-02-25T14:00)", param, ctx)

        if parsed.tzinfo is None:
            config = ctx.find_object(Config) if ctx else None
            parsed = config.localize(parsed) if config else parsed.astimezone()
        return parsed


@click.group()
@click.version_option()
@click.option("--db", "db_path", default=None, help="Path to the entry database")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, db_path: str | None, debug: bool):
    """Tally - personal task list."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if db_path:
        config.database_path = db_path
    ctx.obj = config


@main.command()
@click.argument("description", nargs=-1, required=True)
@click.option(
    "--priority", "-p",
    type=click.Choice(PRIORITY_CHOICES, case_sensitive=False),
    default="normal",
    show_default=True,
    help="Entry priority",
)
@click.pass_obj
def add(config: Config, description: tuple[str, ...], priority: str):
    """Add an entry to the list."""
    try:
        entry = add_entry(config, " ".join(description), Priority.from_name(priority))
    except (StoreError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Added #{entry.id}")


@main.command()
@click.option(
    "--priority", "-p",
    type=click.Choice(PRIORITY_CHOICES, case_sensitive=False),
    default=None,
    help="Only show entries with this priority",
)
@click.option("--from", "-f", "since", type=DateTimeParam(), default=None,
              help="Only show entries created at or after this date/time")
@click.option("--to", "-t", "until", type=DateTimeParam(end_of_day=True), default=None,
              help="Only show entries created at or before this date/time")
@click.option("--extended", "-e", is_flag=True, help="Show full creation timestamps")
@click.option("--reversed", "-r", "reverse", is_flag=True, help="Reverse the listing order")
@click.option("--chronological", "-c", is_flag=True, help="Order by creation time only, ignoring priority")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def get(
    config: Config,
    priority: str | None,
    since: datetime | None,
    until: datetime | None,
    extended: bool,
    reverse: bool,
    chronological: bool,
    as_json: bool,
):
    """List entries, highest priority and newest first."""
    query = Query(
        priority=Priority.from_name(priority) if priority else None,
        since=since,
        until=until,
        chronological=chronological,
        reversed=reverse,
        extended=extended,
    )

    try:
        entries = get_entries(config, query)
    except (StoreError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(entries_to_json(entries))
        return

    click.echo(format_entries(entries, extended=query.extended))


if __name__ == "__main__":
    main()
