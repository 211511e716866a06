from datetime import timezone

import pytest

from voyage_curator.services.planning.trip_length import calculate_trip_length, parse_trip_timestamp


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("2024-03-01", "2024-03-05", 4),
        ("2024-03-01", "2024-03-15", 14),
        ("2024-02-28", "2024-03-01", 2),   # leap year
        ("2024-03-01", "2024-03-01", 1),   # same day floors at 1
        ("2024-03-10", "2024-03-01", 1),   # inverted range floors at 1
    ],
)
def test_nights_between_dates(start, end, expected):
    assert calculate_trip_length(start, end) == expected


@pytest.mark.parametrize(
    "start,end",
    [
        ("", ""),
        ("not-a-date", "2024-03-05"),
        ("2024-03-01", "2024-13-40"),
    ],
)
def test_unparseable_dates_default_to_five_nights(start, end):
    assert calculate_trip_length(start, end) == 5


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("2024-03-01T00:00:00", "2024-03-03T23:00:00", 3),    # 2.96 days rounds up
        ("2024-03-01T00:00:00Z", "2024-03-03T23:00:00Z", 3),
        ("2024-03-01T18:00:00", "2024-03-04T09:00:00", 3),    # 2.625 days
        ("2024-03-01T00:00:00", "2024-03-03T11:00:00", 2),    # 2.46 days rounds down
        ("2024-03-01T00:00:00", "2024-03-03T12:00:00", 3),    # exactly half rounds up
        ("2024-03-01", "2024-03-05T00:00:00+00:00", 4),       # date mixed with aware datetime
        ("2024-03-01T00:00:00+02:00", "2024-03-04T22:00:00Z", 4),
    ],
)
def test_datetimes_round_to_nearest_day(start, end, expected):
    assert calculate_trip_length(start, end) == expected


def test_parse_trip_timestamp():
    assert parse_trip_timestamp("tomorrow") is None
    assert parse_trip_timestamp("") is None

    parsed = parse_trip_timestamp("2024-03-01")
    assert parsed.date().isoformat() == "2024-03-01"
    assert parsed.utcoffset() == timezone.utc.utcoffset(None)
    assert parse_trip_timestamp("2024-03-01T10:30:00Z").hour == 10
