"""
Chronological comparators for calendar events.

Start time is the primary key.  When two events start at the same instant
the end time breaks the tie, but only if both events have one; otherwise
the events are tied and their relative order is left to the (stable) sort.
No further key such as the title is consulted.

Comparators accept anything exposing ``starts_at`` / ``ends_at``
attributes (``CalendarEvent``, dataclasses, named tuples) or a mapping
with ``startsAt`` / ``endsAt`` (or snake_case) keys.

Usage::

    from functools import cmp_to_key
    from calendarcore.ordering.comparator import sort_calendar_events_asc

    agenda = sorted(events, key=cmp_to_key(sort_calendar_events_asc))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import cmp_to_key
from typing import Any, TypeVar

from calendarcore.ordering.otel import emit_sort_result

logger = logging.getLogger(__name__)

E = TypeVar("E")


def _read(event: Any, attr: str, key: str) -> Any:
    if isinstance(event, Mapping):
        if key in event:
            return event[key]
        return event.get(attr)
    return getattr(event, attr, None)


def _sign(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def sort_calendar_events_asc(event_a: Any, event_b: Any) -> int:
    """Order two events chronologically, earliest first.

    Returns:
        ``-1`` if ``event_a`` sorts first, ``1`` if ``event_b`` does,
        ``0`` if they are tied.
    """
    by_start = _sign(
        _read(event_a, "starts_at", "startsAt"),
        _read(event_b, "starts_at", "startsAt"),
    )
    if by_start != 0:
        return by_start

    ends_a = _read(event_a, "ends_at", "endsAt")
    ends_b = _read(event_b, "ends_at", "endsAt")
    if ends_a is None or ends_b is None:
        return 0
    return _sign(ends_a, ends_b)


def sort_calendar_events_desc(event_a: Any, event_b: Any) -> int:
    """Order two events latest first; always ``-sort_calendar_events_asc``."""
    return -sort_calendar_events_asc(event_a, event_b)


def sort_calendar_events(events: Iterable[E], descending: bool = False) -> list[E]:
    """Return a new list of ``events`` in chronological order.

    The sort is stable: tied events keep their input order.

    Args:
        events: Events to order; not modified.
        descending: Latest event first when True.

    Returns:
        A new, sorted list.
    """
    comparator = sort_calendar_events_desc if descending else sort_calendar_events_asc
    ordered = sorted(events, key=cmp_to_key(comparator))

    logger.debug(
        "Sorted %d calendar event(s) %s",
        len(ordered),
        "descending" if descending else "ascending",
    )
    emit_sort_result(len(ordered), descending)
    return ordered
