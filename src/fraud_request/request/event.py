"""Event data for the scoring request.

The event time is formatted when it is handed to the builder, not when
the request is serialized, so the wire value is frozen at assignment.
Format: ``YYYY-MM-DDTHH:MM:SS.ssZ`` in UTC (hundredths of a second).
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from fraud_request.core.enums import EventType
from fraud_request.core.errors import TimeParseError

from .base import ModelBuilder, RequestModel

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"

# strptime's %f also takes 1-6 digits, so the two-digit fraction is
# enforced separately.
_TIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{2}Z$")


def format_event_time(value: datetime) -> str:
    """Format *value* in UTC, truncated to hundredths of a second.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    # strftime does not zero-pad years before 1000 on every platform.
    return (
        f"{value.year:04d}-{value:%m-%dT%H:%M:%S}."
        f"{value.microsecond // 10_000:02d}Z"
    )


def parse_event_time(value: str) -> datetime:
    """Parse a string produced by ``format_event_time`` back to UTC."""
    if not _TIME_RE.match(value):
        raise TimeParseError(value, TIME_FORMAT)
    try:
        parsed = datetime.strptime(value, TIME_FORMAT)
    except ValueError as exc:
        raise TimeParseError(value, TIME_FORMAT) from exc
    return parsed.replace(tzinfo=timezone.utc)


class EventBuilder(ModelBuilder["Event"]):
    def time(self, value: datetime) -> EventBuilder:
        """Set the time the event occurred."""
        return self._set("time", format_event_time(value))


class Event(RequestModel):
    """The event being scored."""

    transaction_id: str | None = None
    shop_id: str | None = None  # Reseller / affiliate shop
    time: str | None = None
    type: EventType | None = None

    @classmethod
    def builder(cls) -> EventBuilder:
        return EventBuilder(cls)

    def parsed_time(self) -> datetime | None:
        """The event time as an aware UTC datetime, or None if unset.

        Raises:
            TimeParseError: if the stored string is not in ``TIME_FORMAT``.
        """
        if self.time is None:
            return None
        return parse_event_time(self.time)
