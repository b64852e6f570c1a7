# bikeflow/traffic/flow.py
from __future__ import annotations

import math

from bikeflow.traffic.types import StationFlowRecord

# low (arrival-heavy), mid (balanced), high (departure-heavy)
FLOW_LEVELS = (0.0, 0.5, 1.0)


def flow_ratio(departures: int, total_traffic: int) -> float:
    """
    departures / total_traffic, and 0.0 for a station with no traffic.
    """
    if total_traffic <= 0:
        return 0.0
    return departures / total_traffic


def quantize_flow(ratio: float) -> float:
    """
    Split [0, 1] into len(FLOW_LEVELS) equal bins and return the level of the
    bin `ratio` falls in. Out-of-domain values clamp to the end bins and
    1.0 belongs to the top bin.
    """
    n = len(FLOW_LEVELS)
    i = int(math.floor(ratio * n))
    i = max(0, min(i, n - 1))
    return FLOW_LEVELS[i]


def classify(record: StationFlowRecord) -> float:
    return quantize_flow(flow_ratio(record.departures, record.total_traffic))
