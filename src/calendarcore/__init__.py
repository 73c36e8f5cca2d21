"""
CalendarCore - Chronological ordering for calendar events.

Provides the comparators used to lay out agendas and event lists in
time order, plus the event model, a YAML event list loader and
display-ready agenda rows built on top of them.

Example usage:
    from functools import cmp_to_key
    from calendarcore import CalendarEvent, sort_calendar_events_asc

    agenda = sorted(events, key=cmp_to_key(sort_calendar_events_asc))
"""

from calendarcore.models import CalendarEvent, CalendarEventList, EventVisibility
from calendarcore.ordering import (
    sort_calendar_events,
    sort_calendar_events_asc,
    sort_calendar_events_desc,
)

__version__ = "0.1.0"
__all__ = [
    "CalendarEvent",
    "CalendarEventList",
    "EventVisibility",
    "sort_calendar_events",
    "sort_calendar_events_asc",
    "sort_calendar_events_desc",
    "__version__",
]
