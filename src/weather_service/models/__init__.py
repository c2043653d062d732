from .units import Units
from .weather_forecast import WeatherForecast
