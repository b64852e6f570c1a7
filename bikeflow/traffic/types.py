# bikeflow/traffic/types.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Tuple

MINUTES_PER_DAY = 1440

# time_filter sentinel: no time-of-day restriction
ALL_DAY = -1


@dataclass(frozen=True)
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime


@dataclass(frozen=True)
class Station:
    """
    Catalog entry. short_name is the join key against trip station ids.
    """
    short_name: str
    lat: float
    lon: float
    name: str = ""


@dataclass(frozen=True)
class StationFlowRecord:
    short_name: str
    name: str
    lat: float
    lon: float
    departures: int
    arrivals: int
    total_traffic: int
    flow: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TrafficView:
    """
    One query result handed to the renderer.

      - records: one StationFlowRecord per catalog station, catalog order
      - radius_domain_max: max(total_traffic), 0 when empty
      - radius_range: (min_px, max_px) for the sqrt size scale
    """
    time_filter: int
    records: Tuple[StationFlowRecord, ...]
    radius_domain_max: int
    radius_range: Tuple[float, float]

    @property
    def filtered(self) -> bool:
        return self.time_filter != ALL_DAY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time_filter": self.time_filter,
            "records": [r.to_dict() for r in self.records],
            "radius_domain_max": self.radius_domain_max,
            "radius_range": list(self.radius_range),
        }
