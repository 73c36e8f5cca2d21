"""CalendarCore CLI - Agenda and sort commands for event list files."""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError

from calendarcore.agenda import build_agenda, format_agenda_row
from calendarcore.config import get_config
from calendarcore.loader import EventLoader
from calendarcore.models import CalendarEventList
from calendarcore.ordering import sort_calendar_events


def _load_or_exit(file: str) -> CalendarEventList:
    """Load an event file, exiting with status 1 on any load error."""
    try:
        return EventLoader().load(Path(file))
    except (OSError, UnicodeDecodeError, TypeError, yaml.YAMLError, ValidationError) as e:
        click.echo(f"Error: could not load {file}: {e}", err=True)
        sys.exit(1)


def _parse_now(ctx, param, value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"not an ISO 8601 datetime: {value}")


def _direction_option(f):
    return click.option(
        "--desc/--asc", "descending",
        default=lambda: get_config().default_descending,
        help="Latest or earliest event first (default from CALENDARCORE_DEFAULT_DESCENDING)",
    )(f)


@click.command()
@click.argument("file", type=click.Path())
@_direction_option
@click.option("--now", callback=_parse_now, help="Reference time for ended events (ISO 8601)")
def agenda(file: str, descending: bool, now: Optional[datetime]):
    """Print an ordered agenda of the events in FILE.

    Active events are marked with '*'.

    Example:
        calendarcore agenda team.events.yaml --now 2024-02-01T12:00:00+00:00
    """
    doc = _load_or_exit(file)

    if doc.description:
        click.echo(f"# {doc.calendar_id}: {doc.description}")
    else:
        click.echo(f"# {doc.calendar_id}")

    try:
        rows = build_agenda(doc.events, now=now, descending=descending)
    except TypeError as e:
        # naive and aware datetimes cannot be compared
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not rows:
        click.echo("No events.")
        return

    for row in rows:
        click.echo(format_agenda_row(row))


@click.command()
@click.argument("file", type=click.Path())
@_direction_option
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["yaml", "json"]),
    help="Output format (default from CALENDARCORE_OUTPUT_FORMAT)",
)
def sort(file: str, descending: bool, output_format: Optional[str]):
    """Print the events in FILE in chronological order.

    Keys are camelCase and datetimes ISO 8601, so the output can be fed
    back to `calendarcore agenda`.
    """
    doc = _load_or_exit(file)
    output_format = output_format or get_config().output_format

    try:
        ordered = sort_calendar_events(doc.events, descending=descending)
    except TypeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    payload = {
        "schemaVersion": doc.schema_version,
        "calendarId": doc.calendar_id,
        "events": [
            e.model_dump(mode="json", by_alias=True, exclude_none=True)
            for e in ordered
        ],
    }

    if output_format == "json":
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), nl=False)
