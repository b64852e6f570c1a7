import folium
import numpy as np
from markupsafe import escape

from bikeflow.traffic.minutes import describe_time_filter

DEPARTURES_COLOR = "#4682b4"  # steelblue
ARRIVALS_COLOR = "#ff8c00"    # darkorange
BALANCED_COLOR = "#a2875a"

FLOW_COLORS = {
    0.0: ARRIVALS_COLOR,
    0.5: BALANCED_COLOR,
    1.0: DEPARTURES_COLOR,
}


def sqrt_radius(value, domain_max, radius_range):
    """
    Square-root size scale from [0, domain_max] onto radius_range, so circle
    area tracks traffic. Works on scalars or arrays; an empty domain
    (domain_max == 0) maps everything to the low end of the range.
    """
    r0, r1 = radius_range
    v = np.clip(np.asarray(value, dtype=np.float64), 0.0, None)
    if domain_max <= 0:
        out = np.full_like(v, float(r0))
    else:
        out = r0 + (r1 - r0) * np.sqrt(v) / np.sqrt(float(domain_max))
    return float(out) if out.ndim == 0 else out


def flow_color(flow):
    return FLOW_COLORS.get(float(flow), BALANCED_COLOR)


def traffic_tooltip(record):
    return (
        f"{record.total_traffic} trips "
        f"({record.departures} departures, {record.arrivals} arrivals)"
    )


def add_traffic_markers(m, view):
    """
    Draw one circle per station record for a static (non-interactive) map.
    view: TrafficView from ViewModel.query
    """
    radii = sqrt_radius(
        [r.total_traffic for r in view.records],
        view.radius_domain_max,
        view.radius_range,
    )

    for rec, radius in zip(view.records, np.atleast_1d(radii)):
        popup = [
            f"<b>{escape(rec.name or rec.short_name)}</b>",
            f"Station: {escape(rec.short_name)}",
            f"Time: {describe_time_filter(view.time_filter)}",
            traffic_tooltip(rec),
        ]

        folium.CircleMarker(
            location=[rec.lat, rec.lon],
            radius=float(radius),
            color="white",
            weight=1,
            fill=True,
            fill_color=flow_color(rec.flow),
            fill_opacity=0.8,
            tooltip=traffic_tooltip(rec),
            popup="<br>".join(popup),
        ).add_to(m)
