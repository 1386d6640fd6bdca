from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import UTC, datetime
from random import Random
from typing import Any
from urllib.parse import unquote

from weather_app.errors import ValidationError
from weather_app.timestamps import parse_timestamp, utc_timestamp

from .descriptions import pick_description
from .schemas import WeatherRecord, WeatherSample

__all__ = [
    "format_weather_data",
    "get_current_weather",
    "get_mock_weather_data",
    "normalize_city_name",
    "random_in_range",
]

_SEPARATORS = re.compile(r"[\s_-]+")
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

TEMPERATURE_RANGE = (5, 35)
HUMIDITY_RANGE = (0, 100)
WIND_SPEED_RANGE = (0, 15)


def get_current_weather(city: Any, rng: Random | None = None) -> WeatherRecord:
    """Return a formatted mock weather record for ``city``.

    Raises ``ValidationError`` when the name normalizes to nothing.
    """

    normalized = normalize_city_name(city)
    if not normalized:
        raise ValidationError("City parameter is required")
    return format_weather_data(get_mock_weather_data(normalized, rng))


def normalize_city_name(value: Any) -> str:
    """Decode, collapse separators and title-case a raw city name.

    Returns an empty string for non-string input, for malformed percent-escapes
    or when no words remain.
    """

    if not isinstance(value, str):
        return ""
    decoded = _percent_decode(value)
    if decoded is None:
        return ""
    words = [word for word in _SEPARATORS.sub(" ", decoded.strip()).split(" ") if word]
    return " ".join(word.capitalize() for word in words)


def _percent_decode(value: str) -> str | None:
    # Decode until no escapes remain so the result never decodes any further.
    while "%" in value:
        if _MALFORMED_ESCAPE.search(value):
            return None
        try:
            value = unquote(value, errors="strict")
        except UnicodeDecodeError:
            return None
    return value


def random_in_range(
    low: float, high: float, decimals: int = 0, rng: Random | None = None
) -> float | int:
    rng = rng or Random()
    value = rng.random() * (high - low) + low
    factor = 10**decimals
    scaled = round(value * factor)
    if decimals == 0:
        return int(scaled)
    return scaled / factor


def get_mock_weather_data(city: str, rng: Random | None = None) -> WeatherSample:
    """Synthesize one sample: temperature [5, 35] °C, humidity [0, 100] %, wind [0, 15] m/s."""

    rng = rng or Random()
    temperature = random_in_range(*TEMPERATURE_RANGE, decimals=1, rng=rng)
    humidity = random_in_range(*HUMIDITY_RANGE, decimals=0, rng=rng)
    wind_speed = random_in_range(*WIND_SPEED_RANGE, decimals=1, rng=rng)
    return {
        "city": city,
        "temperature": temperature,
        "description": pick_description(temperature, humidity, rng),
        "humidity": humidity,
        "wind_speed": wind_speed,
        "timestamp": datetime.now(UTC),
    }


def format_weather_data(sample: Mapping[str, Any]) -> WeatherRecord:
    """Coerce a raw sample into the published record schema.

    No range checks happen here. Missing or unparseable numbers become NaN and
    a missing or unparseable timestamp becomes the current time.
    """

    wind_speed = sample.get("wind_speed", sample.get("windSpeed"))
    return WeatherRecord(
        city=str(sample.get("city")),
        temperature=_to_number(sample.get("temperature")),
        description=str(sample.get("description")),
        humidity=_whole_to_int(_to_number(sample.get("humidity"))),
        wind_speed=_to_number(wind_speed),
        timestamp=utc_timestamp(parse_timestamp(sample.get("timestamp"))),
    )


def _to_number(value: Any) -> float | int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _whole_to_int(value: float | int) -> float | int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
