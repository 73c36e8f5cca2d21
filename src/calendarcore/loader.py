"""
YAML event list loader with per-path caching.

Loads event list YAML files, validates them against the Pydantic
``CalendarEventList`` model, and caches the result per resolved file path.

Usage::

    from calendarcore.loader import EventLoader

    loader = EventLoader()
    doc = loader.load(Path("team.events.yaml"))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

import yaml

from calendarcore.models import CalendarEventList

logger = logging.getLogger(__name__)


class EventLoader:
    """Loads and caches calendar event lists from YAML files."""

    _cache: ClassVar[dict[str, CalendarEventList]] = {}

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the document cache (useful in tests)."""
        cls._cache.clear()

    def load(self, path: Path) -> CalendarEventList:
        """Load an event list from a YAML file.

        Args:
            path: Path to the YAML event file.

        Returns:
            Validated ``CalendarEventList`` instance.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: If the path cannot be read (e.g. it is a directory).
            UnicodeDecodeError: If the file is not valid text.
            TypeError: If the YAML root is not a mapping.
            yaml.YAMLError: If the file contains invalid YAML.
            pydantic.ValidationError: If the YAML does not match the schema.
        """
        key = str(path.resolve())
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Event list cache hit: %s", key)
            return cached

        if not path.exists():
            raise FileNotFoundError(f"Event file not found: {path}")

        with open(path) as fh:
            raw = yaml.safe_load(fh)

        doc = self._validate(raw, source=str(path))
        self._cache[key] = doc

        logger.debug(
            "Loaded event list: calendar=%s, events=%d",
            doc.calendar_id,
            len(doc.events),
        )
        return doc

    def load_from_string(self, yaml_str: str) -> CalendarEventList:
        """Load an event list from a YAML string (not cached).

        Args:
            yaml_str: YAML content as a string.

        Returns:
            Validated ``CalendarEventList`` instance.

        Raises:
            TypeError: If the YAML root is not a mapping.
            pydantic.ValidationError: If the YAML does not match the schema.
        """
        return self._validate(yaml.safe_load(yaml_str), source="<string>")

    @staticmethod
    def _validate(raw: object, source: str) -> CalendarEventList:
        if not isinstance(raw, dict):
            raise TypeError(
                f"Expected YAML mapping at root of {source}, "
                f"got {type(raw).__name__}"
            )
        return CalendarEventList.model_validate(raw)
