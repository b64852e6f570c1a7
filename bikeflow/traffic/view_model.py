# bikeflow/traffic/view_model.py
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence, Tuple

from bikeflow.traffic.aggregate import aggregate
from bikeflow.traffic.bucket_index import TimeBucketIndex
from bikeflow.traffic.flow import classify
from bikeflow.traffic.types import ALL_DAY, Station, TrafficView, Trip
from bikeflow.traffic.window import DEFAULT_HALF_WIDTH, check_half_width, select

# ALL_DAY query
ALL_DAY_RADIUS_RANGE: Tuple[float, float] = (0, 25)
# single-minute query, totals are per window
FILTERED_RADIUS_RANGE: Tuple[float, float] = (3, 50)


def radius_range_for(time_filter: int) -> Tuple[float, float]:
    if time_filter == ALL_DAY:
        return ALL_DAY_RADIUS_RANGE
    return FILTERED_RADIUS_RANGE


class ViewModel:
    """
    Turns a time filter into the per-station records the map draws.

    Holds the station catalog and the TimeBucketIndex; both are read-only,
    so every query is independent of the ones before it.
    """

    def __init__(
        self,
        stations: Sequence[Station],
        trips: Optional[Iterable[Trip]] = None,
        *,
        index: Optional[TimeBucketIndex] = None,
        half_width: int = DEFAULT_HALF_WIDTH,
    ):
        if index is None:
            index = TimeBucketIndex.build(trips if trips is not None else ())
        elif trips is not None:
            raise ValueError("pass either trips or a prebuilt index, not both")

        self.stations = tuple(stations)
        self.index = index
        self.half_width = check_half_width(half_width)

    def query(self, time_filter: int = ALL_DAY) -> TrafficView:
        departure_trips = select(self.index.departure_buckets, time_filter, self.half_width)
        arrival_trips = select(self.index.arrival_buckets, time_filter, self.half_width)

        records = aggregate(self.stations, departure_trips, arrival_trips)
        records = tuple(replace(r, flow=classify(r)) for r in records)

        return TrafficView(
            time_filter=time_filter,
            records=records,
            radius_domain_max=max((r.total_traffic for r in records), default=0),
            radius_range=radius_range_for(time_filter),
        )
