from __future__ import annotations

from datetime import datetime
from typing import TypedDict

from pydantic import BaseModel, ConfigDict, Field


class WeatherSample(TypedDict, total=False):
    city: str
    temperature: float
    description: str
    humidity: int
    wind_speed: float
    timestamp: datetime | str


class WeatherRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city: str = Field(..., description="Normalized city name")
    temperature: float = Field(..., description="Temperature in °C")
    description: str = Field(..., description="Short weather description")
    humidity: int | float = Field(..., description="Relative humidity in %")
    wind_speed: float = Field(..., alias="windSpeed", description="Wind speed in m/s")
    timestamp: str = Field(..., description="ISO-8601 UTC time of generation")
