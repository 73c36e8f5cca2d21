"""
Agenda rows: the per-event display decisions behind an event list.

An ``AgendaRow`` captures everything a front end needs to draw one event
without re-deriving it: the time label, whether the event is over, and
the title to show (withheld for METADATA-only events).

Usage::

    from calendarcore.agenda import build_agenda, format_agenda_row

    for row in build_agenda(doc.events):
        print(format_agenda_row(row))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from calendarcore.config import CalendarCoreConfig, get_config
from calendarcore.models import CalendarEvent
from calendarcore.ordering import sort_calendar_events

logger = logging.getLogger(__name__)


class AgendaRow(BaseModel):
    """Display-ready summary of one calendar event."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    event: CalendarEvent = Field(..., description="The summarised event")
    time_label: str = Field(..., description="'All Day' or 'HH:MM → HH:MM'")
    title: str = Field(..., description="Title to display")
    has_ended: bool = Field(..., description="Event is entirely in the past")
    is_shared: bool = Field(..., description="False when only metadata is visible")
    is_canceled: bool = Field(False, description="Event was canceled")

    @property
    def active(self) -> bool:
        return not self.has_ended


def event_has_ended(event: CalendarEvent, now: datetime) -> bool:
    """Whether ``event`` is over at ``now``.

    Events with an end are over once it has passed.  Open-ended full-day
    events are over after the end of their start day.  Any other
    open-ended event never ends.
    """
    if event.ends_at is not None:
        return event.ends_at < now
    if event.is_full_day:
        end_of_day = datetime.combine(
            event.starts_at.date(), time.max, tzinfo=event.starts_at.tzinfo
        )
        return end_of_day < now
    return False


def event_time_label(
    event: CalendarEvent, config: Optional[CalendarCoreConfig] = None
) -> str:
    cfg = config or get_config()
    if event.is_full_day:
        return cfg.full_day_label
    label = event.starts_at.strftime(cfg.time_format)
    if event.ends_at is not None:
        label = f"{label} → {event.ends_at.strftime(cfg.time_format)}"
    return label


def build_agenda_row(
    event: CalendarEvent,
    now: Optional[datetime] = None,
    config: Optional[CalendarCoreConfig] = None,
) -> AgendaRow:
    """Summarise one event for display.

    Args:
        event: The event to summarise.
        now: Reference instant for ``has_ended``.  Defaults to the current
            time in the event's own timezone (naive if the event is naive).
        config: Label settings; the global config when omitted.
    """
    cfg = config or get_config()
    if now is None:
        now = datetime.now(event.starts_at.tzinfo)

    if event.is_shared:
        title = event.title or ""
    else:
        title = cfg.not_shared_label

    return AgendaRow(
        event=event,
        time_label=event_time_label(event, cfg),
        title=title,
        has_ended=event_has_ended(event, now),
        is_shared=event.is_shared,
        is_canceled=event.is_canceled,
    )


def build_agenda(
    events: Iterable[CalendarEvent],
    now: Optional[datetime] = None,
    descending: Optional[bool] = None,
    config: Optional[CalendarCoreConfig] = None,
) -> list[AgendaRow]:
    """Order ``events`` chronologically and summarise each one.

    Args:
        events: Events to include.
        now: Reference instant for ``has_ended`` (see ``build_agenda_row``).
        descending: Latest first; ``config.default_descending`` when None.
        config: Label and ordering settings; the global config when omitted.
    """
    cfg = config or get_config()
    if descending is None:
        descending = cfg.default_descending

    rows = [
        build_agenda_row(event, now=now, config=cfg)
        for event in sort_calendar_events(events, descending=descending)
    ]
    logger.debug(
        "Built agenda: %d row(s), %d ended",
        len(rows),
        sum(1 for row in rows if row.has_ended),
    )
    return rows


def format_agenda_row(row: AgendaRow) -> str:
    """Render a row as one line of plain text.

    Active events are marked with ``*``.  Withheld titles are bracketed
    and canceled shared events are suffixed with ``(canceled)``.
    """
    marker = "*" if row.active else " "
    title = row.title if row.is_shared else f"[{row.title}]"
    if row.is_canceled and row.is_shared:
        title = f"{title} (canceled)"
    return f"{marker} {row.time_label:<13}  {title}".rstrip()
