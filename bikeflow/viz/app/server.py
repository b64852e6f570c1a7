# bikeflow/viz/app/server.py
from __future__ import annotations

from flask import Flask, jsonify, request

from bikeflow.traffic.types import ALL_DAY, MINUTES_PER_DAY
from bikeflow.viz.maps.render import render_map_document

TRAFFIC_ENDPOINT = "/traffic"


class TimeFilterError(ValueError):
    pass


def parse_time_filter(raw) -> int:
    """
    Query-string value -> time filter. Missing/empty means ALL_DAY.
    """
    if raw is None or str(raw).strip() == "":
        return ALL_DAY

    try:
        t = int(str(raw).strip())
    except ValueError:
        raise TimeFilterError(f"t must be an integer, got {raw!r}") from None

    if not (ALL_DAY <= t < MINUTES_PER_DAY):
        raise TimeFilterError(f"t must be in [{ALL_DAY}, {MINUTES_PER_DAY - 1}], got {t}")
    return t


def create_app(
    view_model,
    *,
    title: str | None = None,
    bike_lanes_url: str | None = None,
) -> Flask:
    """
    Routes:
      /          map page (optional ?t=<minute> for the initial slider position)
      /traffic   TrafficView JSON for ?t=<minute>, called by the slider
    """
    app = Flask(__name__)

    @app.errorhandler(TimeFilterError)
    def _bad_time_filter(err):
        return jsonify({"error": str(err)}), 400

    @app.route("/")
    def _index():
        t_cur = parse_time_filter(request.args.get("t"))
        view = view_model.query(t_cur)

        return render_map_document(
            view,
            title=title,
            bike_lanes_url=bike_lanes_url,
            half_width=view_model.half_width,
            endpoint=TRAFFIC_ENDPOINT,
        )

    @app.route(TRAFFIC_ENDPOINT)
    def _traffic():
        t_cur = parse_time_filter(request.args.get("t"))
        return jsonify(view_model.query(t_cur).to_dict())

    return app


def serve_traffic_map(
    view_model,
    *,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = None,
    bike_lanes_url: str | None = None,
):
    if view_model is None:
        raise ValueError("serve_traffic_map requires a ViewModel")

    app = create_app(view_model, title=title, bike_lanes_url=bike_lanes_url)
    app.run(host=host, port=int(port), debug=bool(debug))
