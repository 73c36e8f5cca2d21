"""
Pydantic v2 models for calendar events and event list YAML documents.

Events are immutable value records.  Field names are snake_case in Python
and camelCase on the wire (``startsAt``, ``endsAt``, ``isFullDay`` ...);
both spellings are accepted when parsing.

All models use ``extra="forbid"`` to reject unknown keys at parse time.

Usage::

    from calendarcore.models import CalendarEventList
    import yaml

    with open("team.events.yaml") as fh:
        raw = yaml.safe_load(fh)
    doc = CalendarEventList.model_validate(raw)
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EventVisibility(str, Enum):
    """How much of an event is shared with the viewer."""

    SHARE_EVERYTHING = "SHARE_EVERYTHING"
    METADATA = "METADATA"


class CalendarEvent(BaseModel):
    """A single time-bound calendar event.

    ``ends_at`` is optional; ``None`` marks an open-ended event or one whose
    duration is unknown.  Nothing checks that ``ends_at`` is not before
    ``starts_at``.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    starts_at: datetime = Field(..., description="Instant the event starts")
    ends_at: Optional[datetime] = Field(
        None, description="Instant the event ends (None if open-ended)"
    )
    title: Optional[str] = Field(None, description="Event title")
    is_full_day: bool = Field(False, description="Event spans the whole day")
    is_canceled: bool = Field(False, description="Event was canceled")
    visibility: EventVisibility = Field(
        EventVisibility.SHARE_EVERYTHING,
        description="SHARE_EVERYTHING or METADATA (title withheld)",
    )

    @property
    def is_shared(self) -> bool:
        return self.visibility != EventVisibility.METADATA


class CalendarEventList(BaseModel):
    """Root model for an event list YAML file."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    schema_version: str = Field(
        ..., min_length=1, description="Document schema version (e.g. 0.1.0)"
    )
    calendar_id: str = Field(
        ..., min_length=1, description="Calendar these events belong to"
    )
    events: list[CalendarEvent] = Field(
        default_factory=list, description="Events in no particular order"
    )
    description: Optional[str] = Field(
        None, description="Human-readable description of this calendar"
    )
