"""Tests for calendar event models."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from calendarcore.models import CalendarEvent, CalendarEventList, EventVisibility


class TestCalendarEvent:
    def test_camel_case_keys(self):
        e = CalendarEvent.model_validate({
            "startsAt": "2000-02-01T09:00:00+00:00",
            "endsAt": "2000-02-01T10:00:00+00:00",
            "isFullDay": False,
            "isCanceled": True,
        })
        assert e.starts_at == datetime(2000, 2, 1, 9, tzinfo=timezone.utc)
        assert e.ends_at == datetime(2000, 2, 1, 10, tzinfo=timezone.utc)
        assert e.is_canceled is True

    def test_snake_case_keys(self):
        e = CalendarEvent(starts_at=datetime(2000, 2, 1, 9))
        assert e.ends_at is None
        assert e.title is None
        assert e.is_full_day is False
        assert e.visibility == EventVisibility.SHARE_EVERYTHING

    def test_start_required(self):
        with pytest.raises(ValidationError):
            CalendarEvent.model_validate({"endsAt": "2000-02-01T10:00:00"})

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            CalendarEvent.model_validate({"startsAt": "2000-02-01T09:00:00", "location": "HQ"})

    def test_unknown_visibility_rejected(self):
        with pytest.raises(ValidationError):
            CalendarEvent.model_validate({"startsAt": "2000-02-01T09:00:00", "visibility": "PRIVATE"})

    def test_frozen(self):
        e = CalendarEvent(starts_at=datetime(2000, 2, 1, 9))
        with pytest.raises(ValidationError):
            e.title = "changed"

    def test_end_before_start_accepted(self):
        e = CalendarEvent(starts_at=datetime(2000, 2, 1, 9), ends_at=datetime(2000, 2, 1, 8))
        assert e.ends_at < e.starts_at

    def test_is_shared(self):
        shared = CalendarEvent(starts_at=datetime(2000, 2, 1))
        hidden = CalendarEvent(starts_at=datetime(2000, 2, 1), visibility="METADATA")
        assert shared.is_shared is True
        assert hidden.is_shared is False

    def test_dump_by_alias(self):
        e = CalendarEvent(starts_at=datetime(2000, 2, 1, 9), is_full_day=True)
        dumped = e.model_dump(mode="json", by_alias=True, exclude_none=True)
        assert dumped["startsAt"] == "2000-02-01T09:00:00"
        assert dumped["isFullDay"] is True
        assert "endsAt" not in dumped


class TestCalendarEventList:
    def test_valid(self):
        doc = CalendarEventList(schema_version="0.1.0", calendar_id="team")
        assert doc.events == []

    def test_camel_case_root(self):
        doc = CalendarEventList.model_validate({
            "schemaVersion": "0.1.0",
            "calendarId": "team",
            "events": [{"startsAt": "2000-02-01T09:00:00"}],
        })
        assert doc.calendar_id == "team"
        assert len(doc.events) == 1

    def test_empty_calendar_id_rejected(self):
        with pytest.raises(ValidationError):
            CalendarEventList(schema_version="0.1.0", calendar_id="")

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            CalendarEventList.model_validate({
                "schema_version": "0.1.0",
                "calendar_id": "team",
                "owner": "me",
            })
