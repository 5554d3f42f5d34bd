"""Open-Meteo weather and geocoding collaborators."""

from .client import FORECAST_URL, GEOCODING_URL, OpenMeteoClient, WeatherFetchError, parse_locations
from .codes import describe_weather_code
from .models import CurrentConditions, Location, Units, WeatherReport

__all__ = [
    "FORECAST_URL",
    "GEOCODING_URL",
    "CurrentConditions",
    "Location",
    "OpenMeteoClient",
    "Units",
    "WeatherFetchError",
    "WeatherReport",
    "describe_weather_code",
    "parse_locations",
]
