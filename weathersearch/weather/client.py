"""Open-Meteo HTTP client for city lookup and current conditions.

Two collaborators share one ``httpx.Client``: ``lookup_suggestions`` runs on
background worker threads and may raise anything, while ``fetch_weather``
runs synchronously from the UI loop and only ever raises
``WeatherFetchError`` with a user-facing message.
"""

from __future__ import annotations

import logging

import httpx

from .models import Location, WeatherReport

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "pressure_msl",
)
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_SUGGESTION_COUNT = 10


class WeatherFetchError(Exception):
    """Submission failure carrying a message meant for the error pane."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def parse_locations(payload: object) -> list[Location]:
    """Extract candidates from a geocoding response, skipping malformed items."""
    if not isinstance(payload, dict):
        raise TypeError("geocoding payload is not an object")
    results = payload.get("results")
    if not isinstance(results, list):
        return []
    locations: list[Location] = []
    for item in results:
        if not isinstance(item, dict):
            continue
        try:
            locations.append(Location.from_payload(item))
        except (KeyError, TypeError, ValueError):
            continue
    return locations


class OpenMeteoClient:
    """Thread-safe wrapper over the geocoding and forecast endpoints."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        suggestion_count: int = DEFAULT_SUGGESTION_COUNT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.suggestion_count = suggestion_count
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=httpx.Timeout(timeout))

    def __enter__(self) -> OpenMeteoClient:
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def _geocode(self, name: str, count: int) -> httpx.Response:
        response = self._http.get(
            GEOCODING_URL,
            params={"name": name, "count": count, "language": "en", "format": "json"},
        )
        response.raise_for_status()
        return response

    def lookup_suggestions(self, query: str) -> list[Location]:
        """Return up to ``suggestion_count`` candidates for ``query``."""
        response = self._geocode(query, self.suggestion_count)
        locations = parse_locations(response.json())
        logger.debug("lookup %r returned %d candidates", query, len(locations))
        return locations

    def fetch_weather(self, city: str) -> WeatherReport:
        """Resolve ``city`` to its best match and fetch current conditions."""
        try:
            geo_response = self._geocode(city, 1)
        except httpx.TimeoutException as exc:
            raise WeatherFetchError("Connection timeout. Check your internet connection.") from exc
        except httpx.ConnectError as exc:
            raise WeatherFetchError(
                "Cannot connect to weather service. Check your internet connection."
            ) from exc
        except httpx.HTTPError as exc:
            raise WeatherFetchError(f"Network error: {exc}") from exc

        try:
            locations = parse_locations(geo_response.json())
        except (TypeError, ValueError) as exc:
            raise WeatherFetchError("Failed to parse location data from weather service.") from exc
        if not locations:
            raise WeatherFetchError(f"'{city}' not found. Try a different city name.")
        location = locations[0]

        try:
            forecast_response = self._http.get(
                FORECAST_URL,
                params={
                    "latitude": location.latitude,
                    "longitude": location.longitude,
                    "current": ",".join(CURRENT_FIELDS),
                    "temperature_unit": "celsius",
                    "wind_speed_unit": "kmh",
                    "precipitation_unit": "mm",
                    "timezone": "auto",
                },
            )
            forecast_response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise WeatherFetchError("Connection timeout while fetching weather data.") from exc
        except httpx.ConnectError as exc:
            raise WeatherFetchError("Cannot connect to weather service.") from exc
        except httpx.HTTPError as exc:
            raise WeatherFetchError(f"Network error: {exc}") from exc

        try:
            payload = forecast_response.json()
            if not isinstance(payload, dict):
                raise TypeError("forecast payload is not an object")
            report = WeatherReport.from_payload(location, payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise WeatherFetchError("Failed to parse weather data from service.") from exc
        logger.info("fetched weather for %r (%s)", city, location.display_name())
        return report
