from __future__ import annotations

from flask import current_app, jsonify

from . import weather_bp
from .service import get_current_weather


@weather_bp.route("/<city>", methods=["GET"])
def current_weather(city: str):
    record = get_current_weather(city)
    current_app.logger.info(
        "Weather for %s: %.1f°C, %s", record.city, record.temperature, record.description
    )
    return jsonify(record.model_dump(by_alias=True))
