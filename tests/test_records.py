"""Tests for raw row parsing."""

from datetime import datetime

import pytest

from shop_core.analytics.types import OrderEvent, SaleEvent
from shop_core.exceptions import MalformedRecordError
from shop_core.sources.records import (
    parse_order_record,
    parse_order_records,
    parse_sale_record,
    parse_sale_records,
    parse_timestamp,
)


def test_aware_timestamp_is_converted_to_civil_time() -> None:
    assert parse_timestamp("2025-01-14T02:00:00+00:00", "Asia/Manila") == datetime(2025, 1, 14, 10, 0)


def test_aware_timestamp_can_change_civil_day() -> None:
    """17:00 UTC is already the next day in Manila (UTC+8)."""
    assert parse_timestamp("2025-01-14T17:30:00Z", "Asia/Manila") == datetime(2025, 1, 15, 1, 30)


def test_naive_timestamp_is_kept() -> None:
    assert parse_timestamp("2025-01-14 10:15:00") == datetime(2025, 1, 14, 10, 15)
    assert parse_timestamp(datetime(2025, 1, 14, 10, 15)) == datetime(2025, 1, 14, 10, 15)


@pytest.mark.parametrize("value", [None, "", "   ", "not a date", float("nan")])
def test_bad_timestamps_raise(value) -> None:
    with pytest.raises(MalformedRecordError):
        parse_timestamp(value)


def test_parse_sale_record() -> None:
    event = parse_sale_record(
        {"id": 1, "total": "150.00", "date": "2025-01-14T10:00:00", "sold_by": " Online "}
    )
    assert event == SaleEvent(datetime(2025, 1, 14, 10, 0), "150.00", "Online")


def test_sale_record_falls_back_to_created_at() -> None:
    event = parse_sale_record(
        {"id": 2, "total": 10, "date": None, "created_at": "2025-01-15T08:00:00", "sold_by": None}
    )
    assert event.timestamp == datetime(2025, 1, 15, 8, 0)
    assert event.channel is None


def test_parse_order_record() -> None:
    event = parse_order_record({"id": 7, "created_at": "2025-01-16T09:00:00", "status": "To Ship"})
    assert event == OrderEvent(datetime(2025, 1, 16, 9, 0), "To Ship")


def test_malformed_rows_are_skipped_not_fatal(caplog) -> None:
    rows = [
        {"id": 1, "total": 5, "date": "2025-01-14T10:00:00", "sold_by": "Online"},
        {"id": 2, "total": 5, "date": "yesterday-ish", "sold_by": "Online"},
        {"id": 3, "total": 5, "sold_by": "Online"},
    ]
    with caplog.at_level("WARNING"):
        events = parse_sale_records(rows)

    assert len(events) == 1
    assert "Skipping sale record 2" in caplog.text
    assert "Skipping sale record 3" in caplog.text


def test_parse_order_records_skips_missing_timestamp() -> None:
    rows = [
        {"id": 1, "created_at": "2025-01-16T09:00:00", "status": "Paid"},
        {"id": 2, "created_at": None, "status": "Paid"},
    ]
    assert [e.status for e in parse_order_records(rows)] == ["Paid"]
