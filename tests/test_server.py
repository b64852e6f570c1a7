import pytest

from bikeflow.traffic.types import ALL_DAY
from bikeflow.traffic.view_model import ViewModel
from bikeflow.viz.app.server import TimeFilterError, create_app, parse_time_filter


@pytest.fixture
def client(stations, make_trip):
    trips = [
        make_trip("A32000", "B32006", 5, 20),
        make_trip("B32006", "C32010", 600, 615),
    ]
    app = create_app(ViewModel(stations, trips), title="Test map")
    app.config["TESTING"] = True
    return app.test_client()


def test_traffic_endpoint_for_a_minute(client):
    resp = client.get("/traffic?t=5")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["time_filter"] == 5
    assert data["radius_range"] == [3, 50]
    by_name = {r["short_name"]: r for r in data["records"]}
    assert by_name["A32000"]["departures"] == 1
    assert by_name["B32006"]["arrivals"] == 1
    assert by_name["C32010"]["total_traffic"] == 0


def test_traffic_endpoint_defaults_to_all_day(client):
    data = client.get("/traffic").get_json()

    assert data["time_filter"] == ALL_DAY
    assert data["radius_range"] == [0, 25]
    assert data["radius_domain_max"] == 2
    assert [r["short_name"] for r in data["records"]] == ["A32000", "B32006", "C32010"]


@pytest.mark.parametrize("bad", ["abc", "1440", "-2", "3.5"])
def test_traffic_endpoint_rejects_bad_minutes(client, bad):
    resp = client.get(f"/traffic?t={bad}")

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_index_page(client):
    resp = client.get("/?t=600")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert 'id="time-slider"' in html
    assert "__BIKEFLOW_VIEW__" in html
    assert '"time_filter": 600' in html
    assert "Test map" in html


@pytest.mark.parametrize(
    "raw, expected",
    [(None, ALL_DAY), ("", ALL_DAY), ("-1", ALL_DAY), ("0", 0), (" 1439 ", 1439)],
)
def test_parse_time_filter(raw, expected):
    assert parse_time_filter(raw) == expected


def test_parse_time_filter_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_time_filter("noon")
    with pytest.raises(TimeFilterError):
        parse_time_filter("2000")
