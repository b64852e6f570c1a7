import os

from colorama import Fore, Style

from bikeflow.traffic.bucket_index import TimeBucketIndex
from bikeflow.traffic.types import ALL_DAY
from bikeflow.traffic.view_model import ViewModel
from bikeflow.util.trips import load_traffic_data
from bikeflow.viz.app.server import serve_traffic_map
from bikeflow.viz.maps.render import build_traffic_map

TRIPS = os.environ.get("TRIPS_CSV", "bluebikes-traffic-2024-03.csv")
STATIONS = os.environ.get("STATIONS_JSON", "bluebikes-stations.json")
WINDOW_MINUTES = int(os.environ.get("WINDOW_MINUTES", "60"))
BIKE_LANES_URL = os.environ.get(
    "BIKE_LANES_URL",
    "https://bostonopendata-boston.opendata.arcgis.com/datasets/boston::existing-bike-network-2022.geojson",
)
TITLE = os.environ.get("MAP_TITLE", "Bikeshare Station Traffic")
EXPORT_HTML = os.environ.get("EXPORT_HTML")


def build_view_model():
    stations, trips = load_traffic_data(STATIONS, TRIPS)

    print(f"{Fore.CYAN}Bucketing trips by minute of day…{Style.RESET_ALL}")
    index = TimeBucketIndex.build(trips, progress=True)

    vm = ViewModel(stations, index=index, half_width=WINDOW_MINUTES)
    print(f"{Fore.GREEN}Index ready: {index.trip_count:,} trips{Style.RESET_ALL}")
    return vm


def main():
    vm = build_view_model()

    if EXPORT_HTML:
        m = build_traffic_map(
            vm.query(ALL_DAY),
            title=TITLE,
            bike_lanes_url=BIKE_LANES_URL or None,
        )
        m.save(EXPORT_HTML)
        print(f"{Fore.GREEN}Wrote {EXPORT_HTML}{Style.RESET_ALL}")
        return

    port = int(os.environ.get("PORT", "8080"))

    serve_traffic_map(
        vm,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=port,
        title=TITLE,
        bike_lanes_url=BIKE_LANES_URL or None,
    )


if __name__ == "__main__":
    main()
