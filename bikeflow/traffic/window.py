# bikeflow/traffic/window.py
from __future__ import annotations

from itertools import chain
from typing import List, Sequence, Tuple

from bikeflow.traffic.types import ALL_DAY, MINUTES_PER_DAY, Trip

DEFAULT_HALF_WIDTH = 60


def check_half_width(half_width: int) -> int:
    half_width = int(half_width)
    if half_width <= 0:
        raise ValueError("half_width must be > 0")
    if half_width >= MINUTES_PER_DAY // 2:
        raise ValueError("half_width must be < 720 (half a day)")
    return half_width


def window_bounds(minute: int, half_width: int = DEFAULT_HALF_WIDTH) -> Tuple[int, int]:
    """
    (min_minute, max_minute) of the window around `minute`.
    The upper bound is exclusive; min_minute > max_minute means the window
    wraps past midnight.
    """
    min_minute = (minute - half_width + MINUTES_PER_DAY) % MINUTES_PER_DAY
    max_minute = (minute + half_width) % MINUTES_PER_DAY
    return min_minute, max_minute


def _flatten(buckets: Sequence[Sequence[Trip]]) -> List[Trip]:
    return list(chain.from_iterable(buckets))


def select(
    buckets: Sequence[Sequence[Trip]],
    time_filter: int,
    half_width: int = DEFAULT_HALF_WIDTH,
) -> List[Trip]:
    """
    Trips from the per-minute buckets inside the circular window centred on
    time_filter. ALL_DAY returns every bucket.

    Window is [min_minute, max_minute): with half_width=60 and a target of
    600 that is minutes 540..659, the minute at 660 is left out.
    """
    if time_filter == ALL_DAY:
        return _flatten(buckets)

    min_minute, max_minute = window_bounds(time_filter, half_width)

    if min_minute > max_minute:
        return _flatten(buckets[min_minute:]) + _flatten(buckets[:max_minute])
    return _flatten(buckets[min_minute:max_minute])
