"""Test Event timestamp formatting and parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from fraud_request.core.enums import EventType
from fraud_request.core.errors import TimeParseError
from fraud_request.request import (
    TIME_FORMAT,
    Event,
    format_event_time,
    parse_event_time,
)


class TestFormatEventTime:
    def test_truncates_to_hundredths(self, sample_time):
        assert format_event_time(sample_time) == "2024-03-09T14:05:07.12Z"

    def test_converts_to_utc(self):
        eastern = timezone(timedelta(hours=-5))
        when = datetime(2024, 3, 9, 9, 5, 7, 990_000, tzinfo=eastern)
        assert format_event_time(when) == "2024-03-09T14:05:07.99Z"

    def test_naive_is_taken_as_utc(self):
        when = datetime(2024, 1, 1, 0, 0, 0)
        assert format_event_time(when) == "2024-01-01T00:00:00.00Z"

    def test_pads_single_digit_fraction(self):
        when = datetime(2024, 1, 1, 0, 0, 0, 50_000, tzinfo=timezone.utc)
        assert format_event_time(when) == "2024-01-01T00:00:00.05Z"

    def test_pads_early_years_to_four_digits(self):
        when = datetime(999, 1, 2, 3, 4, 5, 60_000, tzinfo=timezone.utc)
        assert format_event_time(when) == "0999-01-02T03:04:05.06Z"

    def test_early_year_event_time_parses_back(self):
        when = datetime(999, 1, 2, 3, 4, 5, 60_000, tzinfo=timezone.utc)
        event = Event.builder().time(when).build()
        assert event.parsed_time() == when


class TestParseEventTime:
    def test_round_trip(self, sample_time):
        parsed = parse_event_time(format_event_time(sample_time))
        assert parsed == sample_time.replace(microsecond=120_000)
        assert parsed.tzinfo == timezone.utc

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "2024-03-09",
            "2024-03-09T14:05:07Z",
            "2024-03-09T14:05:07.123Z",
            "2024-03-09 14:05:07.12Z",
            "2024-13-09T14:05:07.12Z",
        ],
    )
    def test_malformed_raises(self, value):
        with pytest.raises(TimeParseError) as exc_info:
            parse_event_time(value)
        assert exc_info.value.value == value
        assert exc_info.value.fmt == TIME_FORMAT


class TestEvent:
    def test_fields(self, sample_event):
        assert sample_event.transaction_id == "txn-1"
        assert sample_event.shop_id == "shop-9"
        assert sample_event.time == "2024-03-09T14:05:07.12Z"
        assert sample_event.type == EventType.PURCHASE

    def test_parsed_time_matches_to_hundredths(self, sample_event, sample_time):
        parsed = sample_event.parsed_time()
        assert parsed == sample_time.replace(microsecond=120_000)
        assert abs(parsed - sample_time) < timedelta(milliseconds=10)

    def test_parsed_time_none_when_unset(self):
        assert Event.builder().build().parsed_time() is None

    def test_corrupted_time_raises_on_parse(self):
        event = Event(time="not a timestamp")
        with pytest.raises(TimeParseError):
            event.parsed_time()

    def test_serialized_shape(self, sample_event):
        assert sample_event.to_dict() == {
            "transaction_id": "txn-1",
            "shop_id": "shop-9",
            "time": "2024-03-09T14:05:07.12Z",
            "type": "purchase",
        }

    def test_type_accepts_wire_value(self):
        event = Event.builder().type("account_login").build()
        assert event.type is EventType.ACCOUNT_LOGIN
