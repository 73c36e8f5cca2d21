"""
Chronological ordering of calendar events.

Public API::

    from calendarcore.ordering import (
        # Comparators
        sort_calendar_events_asc,
        sort_calendar_events_desc,
        # Stable sort
        sort_calendar_events,
        # OTel helpers
        emit_sort_result,
    )
"""

from calendarcore.ordering.comparator import (
    sort_calendar_events,
    sort_calendar_events_asc,
    sort_calendar_events_desc,
)
from calendarcore.ordering.otel import emit_sort_result

__all__ = [
    # Comparators
    "sort_calendar_events_asc",
    "sort_calendar_events_desc",
    # Sort
    "sort_calendar_events",
    # OTel
    "emit_sort_result",
]
