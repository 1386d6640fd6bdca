import math
from datetime import UTC, datetime, timedelta
from random import Random

import pytest

from weather_app.errors import ValidationError
from weather_app.weather.schemas import WeatherRecord
from weather_app.weather.service import format_weather_data, get_current_weather

OSLO_TIMESTAMP = "2026-10-18T09:30:00.000Z"


def _assert_recent(timestamp: str) -> None:
    parsed = datetime.fromisoformat(timestamp)
    assert abs(datetime.now(UTC) - parsed) < timedelta(seconds=5)


def test_format_passes_values_through():
    record = format_weather_data(
        {
            "city": "Oslo",
            "temperature": 12.3,
            "description": "light rain",
            "humidity": 77,
            "windSpeed": 3.2,
            "timestamp": OSLO_TIMESTAMP,
        }
    )
    assert record.model_dump(by_alias=True) == {
        "city": "Oslo",
        "temperature": 12.3,
        "description": "light rain",
        "humidity": 77,
        "windSpeed": 3.2,
        "timestamp": OSLO_TIMESTAMP,
    }


def test_format_coerces_types():
    record = format_weather_data(
        {
            "city": 1234,
            "temperature": "21.5",
            "description": None,
            "humidity": "64",
            "wind_speed": True,
            "timestamp": datetime(2026, 1, 2, 3, 4, 5),
        }
    )
    assert record.city == "1234"
    assert record.temperature == 21.5
    assert record.description == "None"
    assert record.humidity == 64
    assert isinstance(record.humidity, int)
    assert record.model_dump(by_alias=True)["humidity"] == 64
    assert record.wind_speed == 1
    assert record.timestamp == "2026-01-02T03:04:05.000Z"


def test_whole_float_humidity_becomes_int():
    record = format_weather_data({"city": "Oslo", "humidity": 71.0})
    assert record.humidity == 71
    assert isinstance(record.humidity, int)
    assert format_weather_data({"city": "Oslo", "humidity": "70.5"}).humidity == 70.5


def test_format_converts_offsets_to_utc():
    record = format_weather_data({"city": "Tokyo", "timestamp": "2026-10-18T18:00:00+09:00"})
    assert record.timestamp == "2026-10-18T09:00:00.000Z"


def test_missing_numbers_become_nan():
    record = format_weather_data(
        {"city": "Lima", "temperature": 20, "description": "clear", "humidity": 50}
    )
    assert isinstance(record.wind_speed, float)
    assert math.isnan(record.wind_speed)
    assert record.temperature == 20


def test_unparseable_number_becomes_nan():
    record = format_weather_data({"city": "Lima", "humidity": "damp"})
    assert math.isnan(record.humidity)


@pytest.mark.parametrize("timestamp", [None, "", "yesterday-ish", 12345])
def test_bad_timestamp_defaults_to_now(timestamp):
    record = format_weather_data({"city": "Quito", "timestamp": timestamp})
    _assert_recent(record.timestamp)


@pytest.mark.parametrize("city", ["", "   ", "%20%20%20", "_-_", None, 42])
def test_blank_city_is_rejected(city):
    with pytest.raises(ValidationError, match="required") as excinfo:
        get_current_weather(city)
    assert excinfo.value.status_code == 400


def test_current_weather_for_valid_city():
    record = get_current_weather("new_york", Random(42))
    assert isinstance(record, WeatherRecord)
    assert record.city == "New York"
    assert 5 <= record.temperature <= 35
    assert 0 <= record.humidity <= 100
    assert 0 <= record.wind_speed <= 15
    assert record.description
    _assert_recent(record.timestamp)


def test_current_weather_without_rng():
    for _ in range(100):
        record = get_current_weather("Berlin")
        assert record.city == "Berlin"
        assert 5 <= record.temperature <= 35
        assert 0 <= record.humidity <= 100
        assert 0 <= record.wind_speed <= 15
