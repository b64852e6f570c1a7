# bikeflow/traffic/bucket_index.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from tqdm import tqdm

from bikeflow.traffic.minutes import minute_of_day
from bikeflow.traffic.types import MINUTES_PER_DAY, Trip

Buckets = Tuple[Tuple[Trip, ...], ...]


@dataclass(frozen=True)
class TimeBucketIndex:
    """
    departure_buckets[m] = trips that started at minute-of-day m
    arrival_buckets[m]   = trips that ended at minute-of-day m

    Built once per dataset load and read by every query afterwards.
    """
    departure_buckets: Buckets
    arrival_buckets: Buckets

    @classmethod
    def build(cls, trips: Iterable[Trip], *, progress: bool = False) -> "TimeBucketIndex":
        departures: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]
        arrivals: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]

        it = trips
        if progress:
            it = tqdm(trips, desc="Bucketing trips", unit="trip")

        for trip in it:
            departures[minute_of_day(trip.started_at)].append(trip)
            arrivals[minute_of_day(trip.ended_at)].append(trip)

        return cls(
            departure_buckets=tuple(tuple(b) for b in departures),
            arrival_buckets=tuple(tuple(b) for b in arrivals),
        )

    @property
    def trip_count(self) -> int:
        return sum(len(b) for b in self.departure_buckets)
