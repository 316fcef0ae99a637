from datetime import datetime

import numpy as np
from flask import Flask, redirect, render_template, request, url_for

import config
from main.models import LOCATIONS, UnknownLocationError, get_location, is_known_location
from main.views import feels_like, metric_cards, weather_status
from workers.scheduler import RefreshScheduler
from workers.station import RefreshInProgressError, WeatherStation
from utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def sample_history(readings, n):
    """Pick ``n`` evenly spaced readings, oldest first, always keeping the newest."""
    total = len(readings)
    if n is None or total <= n:
        return readings
    if n <= 0:
        return []
    if n == 1:
        return readings[-1:]

    indices = np.linspace(0, total - 1, n, dtype=int)
    return [readings[i] for i in indices]


def reading_payload(location_id, reading):
    payload = reading.to_dict()
    payload["location"] = location_id
    payload["status"] = weather_status(reading).label
    return payload


def create_app(station=None):
    app = Flask(__name__)
    app.config["STATION"] = station or WeatherStation()
    station = app.config["STATION"]

    # ERRORS

    @app.errorhandler(UnknownLocationError)
    def unknown_location(error):
        return {"error": str(error)}, 404

    @app.errorhandler(RefreshInProgressError)
    def refresh_in_progress(error):
        return {"error": str(error)}, 409

    # API

    @app.route("/data/locations")
    def locations_data():
        return {"locations": [location.to_dict() for location in LOCATIONS]}

    @app.route("/data/latest")
    def latest_data():
        location_id = request.args.get("location")

        if location_id is None:
            current = station.snapshot()["current"]
            return {
                "readings": {
                    key: reading_payload(key, reading)
                    for key, reading in current.items()
                }
            }

        reading = station.current(location_id)
        if reading is None:
            return {"error": f"No readings found for {location_id}"}, 404
        return reading_payload(location_id, reading)

    @app.route("/data/history")
    def history_data():
        location_id = request.args.get("location", LOCATIONS[0].id)
        data_point_count = request.args.get("n", default=None, type=int)

        readings = sample_history(station.history(location_id), data_point_count)
        return {
            "location": location_id,
            "history": [reading.to_dict() for reading in readings],
        }

    @app.route("/data/refresh", methods=["POST"])
    def refresh_data():
        body = request.get_json(silent=True) or {}
        location_id = body.get("location") or request.form.get("location")

        readings = station.refresh(location_id)
        return {
            "readings": {
                key: reading_payload(key, reading)
                for key, reading in readings.items()
            }
        }

    @app.route("/data/status")
    def status_data():
        last_refresh = station.last_refresh
        return {
            "loading": station.loading,
            "last_refresh": last_refresh.isoformat() if last_refresh else None,
        }

    # PAGES

    @app.route("/")
    def index():
        location_id = request.args.get("location", LOCATIONS[0].id)
        if not is_known_location(location_id):
            logger.warning("Unknown location %r requested, showing %s", location_id, LOCATIONS[0].id)
            location_id = LOCATIONS[0].id

        location = get_location(location_id)
        reading = station.select(location.id)
        status = weather_status(reading)

        return render_template(
            "dashboard.html",
            app_name=config.APP_NAME,
            locations=LOCATIONS,
            location=location,
            reading=reading,
            status=status,
            feels_like=feels_like(reading.temperature),
            cards=metric_cards(reading),
            loading=station.loading,
            refresh_interval=int(config.REFRESH_INTERVAL),
            year=datetime.now().year,
        )

    @app.route("/refresh", methods=["POST"])
    def refresh():
        location_id = request.form.get("location", LOCATIONS[0].id)
        if not is_known_location(location_id):
            logger.warning("Unknown location %r posted, refreshing %s", location_id, LOCATIONS[0].id)
            location_id = LOCATIONS[0].id
        try:
            station.refresh(location_id)
        except RefreshInProgressError:
            logger.info("Manual refresh of %s ignored, refresh already running", location_id)
        return redirect(url_for("index", location=location_id))

    return app


def main():
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)

    app = create_app()
    scheduler = RefreshScheduler(app.config["STATION"])
    scheduler.start()
    try:
        app.run(host=config.HOST, port=config.PORT, threaded=True)
    finally:
        scheduler.stop()


if __name__ == "__main__":
    main()
