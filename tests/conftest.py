from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from bikeflow.traffic.types import Station, Trip

DAY = datetime(2024, 3, 1)


def at_minute(minute: int, day: datetime = DAY) -> datetime:
    return day + timedelta(minutes=minute)


@pytest.fixture
def make_trip():
    def _make(start_id: str, end_id: str, start_min: int, end_min: int) -> Trip:
        return Trip(
            start_station_id=start_id,
            end_station_id=end_id,
            started_at=at_minute(start_min),
            ended_at=at_minute(end_min),
        )
    return _make


@pytest.fixture
def stations() -> list[Station]:
    return [
        Station(short_name="A32000", lat=42.3601, lon=-71.0942, name="MIT at Mass Ave"),
        Station(short_name="B32006", lat=42.3554, lon=-71.0640, name="Boston Common"),
        Station(short_name="C32010", lat=42.3736, lon=-71.1190, name="Harvard Square"),
    ]


@pytest.fixture
def minute_trips(make_trip) -> list[Trip]:
    """
    One trip per minute of the day; both ids name the minute the trip
    started/ended so a selection can be checked minute by minute.
    """
    return [make_trip(str(m), str(m), m, m) for m in range(1440)]
