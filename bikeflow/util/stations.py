import json

from colorama import Fore, Style

from bikeflow.traffic.types import Station


def load_stations(path):
    """
    Load bikeshare stations from a station_information.json style file
    ({"data": {"stations": [...]}}).
    Returns a list of Station in file order; entries without a short_name
    cannot be joined against trips and are skipped.
    """
    with open(path) as f:
        raw = json.load(f)["data"]["stations"]

    stations = []
    skipped = 0
    for s in raw:
        short_name = s.get("short_name")
        if short_name in (None, ""):
            skipped += 1
            continue

        stations.append(Station(
            short_name=str(short_name),
            lat=float(s["lat"]),
            lon=float(s["lon"]),
            name=s.get("name", ""),
        ))

    if skipped:
        print(f"{Fore.YELLOW}Skipped {skipped} stations without short_name{Style.RESET_ALL}")

    return stations
