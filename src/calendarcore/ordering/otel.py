"""
OTel span event emission for calendar event sorting.

Guarded by ``_HAS_OTEL`` so sorting works unchanged when OpenTelemetry
is not installed or no span is recording.

Usage::

    from calendarcore.ordering.otel import emit_sort_result

    emit_sort_result(count=12, descending=False)
"""

from __future__ import annotations

try:
    from opentelemetry import trace as otel_trace

    _HAS_OTEL = True
except ImportError:  # pragma: no cover
    _HAS_OTEL = False


def emit_sort_result(count: int, descending: bool) -> None:
    """Emit a span event summarising one sort.

    Event name: ``calendar.events.sorted``
    """
    if not _HAS_OTEL:
        return
    span = otel_trace.get_current_span()
    if not span.is_recording():
        return
    span.add_event(
        name="calendar.events.sorted",
        attributes={
            "calendar.events.count": count,
            "calendar.events.direction": "desc" if descending else "asc",
        },
    )
