# bikeflow/viz/maps/render.py
import folium
from jinja2.utils import htmlsafe_json_dumps

from bikeflow.viz.overlays.stations import add_traffic_markers
from bikeflow.viz.widgets.legend import build_flow_legend
from bikeflow.viz.widgets.time_slider import build_time_slider

# Boston, used when the catalog is empty
CENTER_LAT = 42.36027
CENTER_LON = -71.09415

BIKE_LANE_COLOR = "#32D400"


def _map_center(records):
    if not records:
        return CENTER_LAT, CENTER_LON
    lat = sum(r.lat for r in records) / len(records)
    lon = sum(r.lon for r in records) / len(records)
    return lat, lon


def _base_map(view, bike_lanes_url=None):
    m = folium.Map(
        location=list(_map_center(view.records)),
        zoom_start=12,
        min_zoom=5,
        max_zoom=18,
        tiles="cartodbpositron",
    )

    if bike_lanes_url:
        folium.GeoJson(
            bike_lanes_url,
            name="Bike lanes",
            style_function=lambda _feature: {
                "color": BIKE_LANE_COLOR,
                "weight": 4,
                "opacity": 0.5,
            },
        ).add_to(m)

    return m


def _title_element(title):
    title_js = ""
    if title:
        title_js = (
            "const t=document.createElement('div');t.id='map-title';"
            f"t.textContent={htmlsafe_json_dumps(title)};wrap.appendChild(t);"
        )

    return folium.Element(
        f"""
<style>
#map-wrap {{
  position: relative;
  width: 100%;
}}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: 100vh !important;
  min-height: 520px;
}}
#map-title {{
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

  const existingTitle = document.getElementById("map-title");
  if (existingTitle) existingTitle.remove();

  {title_js}
}});
</script>
"""
    )


def build_traffic_map(view, *, title=None, bike_lanes_url=None):
    """
    Static map: circles drawn once for `view`, no slider.
    Used for HTML export.
    """
    m = _base_map(view, bike_lanes_url)
    add_traffic_markers(m, view)
    m.get_root().html.add_child(build_flow_legend())
    m.get_root().html.add_child(_title_element(title))
    return m


def render_map_document(
    view,
    *,
    title=None,
    bike_lanes_url=None,
    half_width=60,
    endpoint="/traffic",
):
    """
    Interactive page: base map, legend, and the time slider that owns the
    station circles (first drawn from `view`, then refreshed from `endpoint`).
    """
    m = _base_map(view, bike_lanes_url)

    # legend first: its DOMContentLoaded handler creates #map-wrap
    m.get_root().html.add_child(build_flow_legend())
    m.get_root().html.add_child(
        build_time_slider(
            view,
            m.get_name(),
            half_width=half_width,
            endpoint=endpoint,
        )
    )
    m.get_root().html.add_child(_title_element(title))

    return m.get_root().render()
