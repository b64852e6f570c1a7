# bikeflow/util/trips.py
from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pandas as pd
from colorama import Fore, Style

from bikeflow.traffic.types import Station, Trip
from bikeflow.util.stations import load_stations

REQUIRED_COLUMNS = [
    "start_station_id",
    "end_station_id",
    "started_at",
    "ended_at",
]


def load_trips(trips_csv: str | Path) -> List[Trip]:
    """
    Loads a trip CSV with (at least) the columns:

      started_at, ended_at, start_station_id, end_station_id

    Station ids are kept as text so they join against Station.short_name.
    Timestamps are parsed with pandas; only their time of day is used later.
    """
    print(f"{Fore.CYAN}Reading trips from {trips_csv}…{Style.RESET_ALL}")

    df = pd.read_csv(trips_csv, dtype=str, keep_default_na=False)
    df.columns = [c.strip() for c in df.columns]

    for col in REQUIRED_COLUMNS:
        if col not in df.columns:
            raise ValueError(f"Trips CSV missing '{col}' column.")

    # exports mix "…:12.123" and "…:00" rows
    started = pd.to_datetime(df["started_at"], format="ISO8601")
    ended = pd.to_datetime(df["ended_at"], format="ISO8601")

    trips = [
        Trip(
            start_station_id=str(s0).strip(),
            end_station_id=str(s1).strip(),
            started_at=t0,
            ended_at=t1,
        )
        for s0, s1, t0, t1 in zip(
            df["start_station_id"].tolist(),
            df["end_station_id"].tolist(),
            started.tolist(),
            ended.tolist(),
        )
    ]

    print(f"{Fore.MAGENTA}Loaded {len(trips):,} trips{Style.RESET_ALL}")
    return trips


def load_traffic_data(
    stations_json: str | Path,
    trips_csv: str | Path,
) -> Tuple[List[Station], List[Trip]]:
    print(f"{Fore.CYAN}Loading station registry…{Style.RESET_ALL}")
    stations = load_stations(stations_json)
    print(f"{Fore.MAGENTA}Loaded {len(stations):,} stations{Style.RESET_ALL}")

    trips = load_trips(trips_csv)
    return stations, trips
