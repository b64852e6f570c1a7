import pytest

from bikeflow.traffic.flow import FLOW_LEVELS, classify, flow_ratio, quantize_flow
from bikeflow.traffic.types import StationFlowRecord


def _record(departures, arrivals):
    return StationFlowRecord(
        short_name="A32000",
        name="",
        lat=0.0,
        lon=0.0,
        departures=departures,
        arrivals=arrivals,
        total_traffic=departures + arrivals,
    )


def test_flow_ratio():
    assert flow_ratio(3, 4) == 0.75
    assert flow_ratio(0, 5) == 0.0
    assert flow_ratio(5, 5) == 1.0


def test_flow_ratio_without_traffic_is_zero():
    assert flow_ratio(0, 0) == 0.0


@pytest.mark.parametrize(
    "ratio, level",
    [
        (0.0, 0.0),
        (0.2, 0.0),
        (0.34, 0.5),
        (0.5, 0.5),
        (0.66, 0.5),
        (0.67, 1.0),
        (1.0, 1.0),
        (-0.3, 0.0),
        (1.7, 1.0),
    ],
)
def test_quantize_flow(ratio, level):
    assert quantize_flow(ratio) == level


def test_levels_are_ordered():
    assert list(FLOW_LEVELS) == sorted(FLOW_LEVELS)
    assert len(FLOW_LEVELS) == 3


def test_classify():
    assert classify(_record(9, 1)) == 1.0
    assert classify(_record(1, 1)) == 0.5
    assert classify(_record(1, 9)) == 0.0
    assert classify(_record(0, 0)) == 0.0
