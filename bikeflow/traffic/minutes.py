# bikeflow/traffic/minutes.py
from __future__ import annotations

from datetime import datetime

from bikeflow.traffic.types import ALL_DAY, MINUTES_PER_DAY


def minute_of_day(ts: datetime) -> int:
    """
    Minutes since midnight, date discarded. Accepts datetime or pd.Timestamp.
    """
    return (ts.hour * 60 + ts.minute) % MINUTES_PER_DAY


def format_time(minute: int) -> str:
    """
    Short 12-hour clock label, e.g. 5 -> "12:05 AM", 810 -> "1:30 PM".
    """
    minute = int(minute) % MINUTES_PER_DAY
    hh, mm = divmod(minute, 60)
    suffix = "AM" if hh < 12 else "PM"
    return f"{hh % 12 or 12}:{mm:02d} {suffix}"


def describe_time_filter(time_filter: int) -> str:
    if time_filter == ALL_DAY:
        return "(any time)"
    return format_time(time_filter)
