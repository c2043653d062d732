# src/weather_service/services/forecast_service.py

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Awaitable, Callable, List, Optional

from opentelemetry import trace

from weather_service.models import Units, WeatherForecast

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

PLACEHOLDER_SUMMARY = "placeholder"
PLACEHOLDER_LOW = 0
PLACEHOLDER_HIGH = 100


async def get_weather_forecast(
    city: str,
    units: Optional[Units] = None,
    is_disconnected: Optional[Callable[[], Awaitable[bool]]] = None,
) -> List[WeatherForecast]:
    """
    Return the forecast for `city`.

    No forecast source is wired in yet: every call returns the same single
    placeholder record for today. `units` and `is_disconnected` are accepted
    so callers already pass them, but neither is consulted.
    """
    with tracer.start_as_current_span("service.get_weather_forecast") as span:
        span.set_attribute("weather.city", city)
        span.set_attribute("weather.units", units.value if units else "")

        # TODO: look up a real forecast for `city` and convert it to `units`.
        await asyncio.sleep(0)

        forecast = WeatherForecast(
            date=date.today(),
            low_temperature=PLACEHOLDER_LOW,
            high_temperature=PLACEHOLDER_HIGH,
            summary=PLACEHOLDER_SUMMARY,
        )
        logger.debug("Built placeholder forecast for city=%s", city)
        return [forecast]
