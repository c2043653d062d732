# src/weather_service/models/units.py

from enum import Enum


class Units(str, Enum):
    """Unit system a caller may ask the forecast to be reported in."""

    metric = "metric"
    imperial = "imperial"
