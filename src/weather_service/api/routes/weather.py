# src/weather_service/api/routes/weather.py

from typing import List, Optional

from fastapi import APIRouter, Query, Request
from opentelemetry import trace
import logging

from weather_service.metrics import forecast_requests_total
from weather_service.models import Units, WeatherForecast
from weather_service.services import forecast_service

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

router = APIRouter(tags=["Weather"])


# ----------------------------------------
# GET /weather
# ----------------------------------------
@router.get(
    "/weather",
    response_model=List[WeatherForecast],
    operation_id="GetWeatherForecast",
)
async def get_weather_forecast(
    request: Request,
    city: str = Query(..., description="City to forecast"),
    units: Optional[Units] = Query(default=None, description="Unit system"),
):
    """
    Get the weather forecast for a city.
    """
    units_label = units.value if units else "none"
    forecast_requests_total.labels(units=units_label).inc()
    logger.info("Forecast requested city=%s units=%s", city, units_label)

    with tracer.start_as_current_span("api.get_weather_forecast") as span:
        span.set_attribute("weather.city", city)

        return await forecast_service.get_weather_forecast(
            city,
            units,
            is_disconnected=request.is_disconnected,
        )
