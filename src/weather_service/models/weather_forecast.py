# src/weather_service/models/weather_forecast.py

import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class WeatherForecast(BaseModel):
    """One day of forecast. Serialized with camelCase keys (lowTemperature, ...)."""

    date: datetime.date
    low_temperature: int
    high_temperature: int
    summary: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
