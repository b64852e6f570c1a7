# bikeflow/viz/widgets/time_slider.py
import folium
from jinja2.utils import htmlsafe_json_dumps

from bikeflow.traffic.minutes import describe_time_filter
from bikeflow.traffic.types import ALL_DAY, MINUTES_PER_DAY
from bikeflow.viz.overlays.stations import BALANCED_COLOR, FLOW_COLORS


def build_time_slider(view, map_name, *, half_width=60, endpoint="/traffic"):
    """
    Time-of-day slider + the live station overlay.

      - slider runs from -1 (any time) to 1439 (11:59 PM)
      - every input event fetches `endpoint?t=<minute>` and redraws
      - one Leaflet circle per short_name: new stations are added, known
        ones restyled in place, missing ones removed

    view: TrafficView used for the first draw (embedded in the page)
    map_name: folium Map.get_name(), the global Leaflet map variable
    """
    # <, > and & are escaped so station names cannot close the <script>
    payload_json = htmlsafe_json_dumps(view.to_dict())
    colors_json = htmlsafe_json_dumps({str(k): v for k, v in FLOW_COLORS.items()})
    endpoint_json = htmlsafe_json_dumps(endpoint)
    label = describe_time_filter(view.time_filter)
    any_time = view.time_filter == ALL_DAY

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  left: 50%;
  bottom: 24px;
  transform: translateX(-50%);
  width: min(560px, calc(100% - 32px));
  background: rgba(255,255,255,0.95);
  padding: 8px 14px;
  border-radius: 10px;
  font-size: 13px;
  z-index: 1200;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}
#time-filter label {{
  display: flex;
  align-items: center;
  gap: 10px;
}}
#time-slider {{
  flex: 1;
}}
#time-filter .time-readout {{
  min-width: 80px;
  text-align: right;
}}
#any-time {{
  color: #777;
  font-style: italic;
}}
#time-filter .window-note {{
  color: #777;
  font-size: 11px;
}}
</style>

<div id="time-filter">
  <label>
    Filter by time:
    <input id="time-slider" type="range" min="{ALL_DAY}" max="{MINUTES_PER_DAY - 1}"
           value="{view.time_filter}">
    <span class="time-readout">
      <time id="selected-time">{"" if any_time else label}</time>
      <em id="any-time" style="display:{'inline' if any_time else 'none'}">(any time)</em>
    </span>
  </label>
  <div class="window-note">Trips within &plusmn;{half_width} min of the selected time</div>
</div>

<script>
window.__BIKEFLOW_VIEW__ = {payload_json};
</script>

<script>
(function() {{
  var FLOW_COLORS = {colors_json};
  var FALLBACK_COLOR = "{BALANCED_COLOR}";
  var markers = {{}};
  var latest = null;

  function getMap() {{
    return window["{map_name}"];
  }}

  function radius(v, max, range) {{
    if (!(max > 0)) return range[0];
    return range[0] + (range[1] - range[0]) * Math.sqrt(Math.max(0, v)) / Math.sqrt(max);
  }}

  function color(flow) {{
    var key = Number(flow).toFixed(1);
    return FLOW_COLORS[key] || FALLBACK_COLOR;
  }}

  function tooltip(r) {{
    return r.total_traffic + " trips (" + r.departures + " departures, " + r.arrivals + " arrivals)";
  }}

  function formatTime(minutes) {{
    var h = Math.floor(minutes / 60), m = minutes % 60;
    var suffix = h < 12 ? "AM" : "PM";
    return ((h % 12) || 12) + ":" + String(m).padStart(2, "0") + " " + suffix;
  }}

  function draw(view) {{
    var map = getMap();
    if (!map) return;

    var seen = {{}};
    view.records.forEach(function(r) {{
      seen[r.short_name] = true;
      var style = {{
        radius: radius(r.total_traffic, view.radius_domain_max, view.radius_range),
        color: "white",
        weight: 1,
        fill: true,
        fillColor: color(r.flow),
        fillOpacity: 0.8
      }};
      var c = markers[r.short_name];
      if (!c) {{
        c = L.circleMarker([r.lat, r.lon], style).addTo(map);
        c.bindTooltip(tooltip(r));
        markers[r.short_name] = c;
      }} else {{
        c.setLatLng([r.lat, r.lon]);
        c.setRadius(style.radius);
        c.setStyle(style);
        c.setTooltipContent(tooltip(r));
      }}
    }});

    Object.keys(markers).forEach(function(k) {{
      if (!seen[k]) {{
        markers[k].remove();
        delete markers[k];
      }}
    }});
  }}

  function updateTimeDisplay(t) {{
    var selected = document.getElementById("selected-time");
    var anyTime = document.getElementById("any-time");
    if (t === {ALL_DAY}) {{
      selected.textContent = "";
      anyTime.style.display = "inline";
    }} else {{
      selected.textContent = formatTime(t);
      anyTime.style.display = "none";
    }}
  }}

  function requestView(t) {{
    latest = t;
    fetch({endpoint_json} + "?t=" + t)
      .then(function(resp) {{
        if (!resp.ok) throw new Error("traffic request failed: HTTP " + resp.status);
        return resp.json();
      }})
      .then(function(view) {{
        // drop responses for slider positions the user already left
        if (view.time_filter === latest) draw(view);
      }})
      .catch(function(err) {{
        console.error("bikeflow: could not update station traffic for t=" + t, err);
      }});
  }}

  document.addEventListener("DOMContentLoaded", function() {{
    draw(window.__BIKEFLOW_VIEW__);

    var slider = document.getElementById("time-slider");
    var panel = document.getElementById("time-filter");
    var wrap = document.getElementById("map-wrap");
    if (wrap && panel) wrap.appendChild(panel);
    if (!slider) return;

    slider.addEventListener("input", function() {{
      var t = Number(slider.value);
      updateTimeDisplay(t);
      requestView(t);
    }});
  }});
}})();
</script>
"""
    )
