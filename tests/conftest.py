"""
Pytest configuration and fixtures for CalendarCore tests.
"""

from __future__ import annotations

import os
from typing import Dict, Generator

import pytest

from calendarcore.config import reset_config
from calendarcore.loader import EventLoader


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def test_env() -> Dict[str, str]:
    """Test environment variables."""
    return {
        "CALENDARCORE_LOG_LEVEL": "warning",
        "CALENDARCORE_DEFAULT_DESCENDING": "false",
        "CALENDARCORE_OUTPUT_FORMAT": "yaml",
    }


@pytest.fixture(autouse=True)
def set_test_env(test_env: Dict[str, str]) -> Generator[None, None, None]:
    """Set test environment variables and fresh global state for each test."""
    original = {}
    for key, value in test_env.items():
        original[key] = os.environ.get(key)
        os.environ[key] = value
    reset_config()
    EventLoader.clear_cache()

    yield

    for key, value in original.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value
    reset_config()
    EventLoader.clear_cache()


# ============================================================================
# Data Fixtures
# ============================================================================


@pytest.fixture
def sample_events_yaml() -> str:
    """Event list document with events out of chronological order."""
    return """\
schema_version: "0.1.0"
calendar_id: team
description: Team calendar
events:
  - title: Retro
    startsAt: "2000-02-01T15:00:00+00:00"
    endsAt: "2000-02-01T16:00:00+00:00"
  - title: Standup
    startsAt: "2000-02-01T09:00:00+00:00"
    endsAt: "2000-02-01T09:15:00+00:00"
  - title: Offsite
    startsAt: "2000-02-01T00:00:00+00:00"
    isFullDay: true
  - title: "One on one"
    startsAt: "2000-02-01T09:00:00+00:00"
    endsAt: "2000-02-01T09:30:00+00:00"
    visibility: METADATA
"""
