"""
CalendarCore CLI - Print calendar events in chronological order.

Commands:
    calendarcore agenda     Print an ordered agenda of an event file
    calendarcore sort       Print the ordered events as YAML or JSON
"""

import logging

import click

from calendarcore.config import get_config

from .agenda import agenda, sort


@click.group()
@click.version_option(package_name="calendarcore")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """CalendarCore - Chronological ordering for calendar events."""
    level = "debug" if verbose else get_config().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


main.add_command(agenda)
main.add_command(sort)
