# bikeflow/traffic/aggregate.py
from __future__ import annotations

from typing import Iterable, List, Sequence

import pandas as pd

from bikeflow.traffic.types import Station, StationFlowRecord, Trip


def count_by_station(station_ids: Iterable[str]) -> pd.Series:
    """
    index=station_id, values=number of trips
    """
    return pd.Series(list(station_ids), dtype=object).value_counts()


def count_for(counts: pd.Series, station_id: str) -> int:
    # stations missing from the selected trips had no traffic in the window
    return int(counts.get(station_id, 0))


def aggregate(
    stations: Sequence[Station],
    departure_trips: Sequence[Trip],
    arrival_trips: Sequence[Trip],
) -> List[StationFlowRecord]:
    """
    One fresh record per catalog station, in catalog order. flow is left at
    its default; the view model classifies each record afterwards.

    Trips whose station id is not in the catalog never match a station and
    so drop out of the totals.
    """
    departures = count_by_station(t.start_station_id for t in departure_trips)
    arrivals = count_by_station(t.end_station_id for t in arrival_trips)

    records: List[StationFlowRecord] = []
    for s in stations:
        dep = count_for(departures, s.short_name)
        arr = count_for(arrivals, s.short_name)
        total = dep + arr

        records.append(
            StationFlowRecord(
                short_name=s.short_name,
                name=s.name,
                lat=s.lat,
                lon=s.lon,
                departures=dep,
                arrivals=arr,
                total_traffic=total,
            )
        )

    return records
