"""Open-Meteo client tests against an in-process ``httpx.MockTransport``."""

from __future__ import annotations

import unittest

import httpx

from weathersearch.weather import (
    FORECAST_URL,
    GEOCODING_URL,
    Location,
    OpenMeteoClient,
    WeatherFetchError,
    describe_weather_code,
    parse_locations,
)

GEOCODING_PAYLOAD = {
    "results": [
        {"name": "Paris", "latitude": 48.85341, "longitude": 2.3488, "country": "France", "admin1": "Île-de-France"},
        {"name": "Paris", "latitude": 33.66094, "longitude": -95.55551, "country": "United States", "admin1": "Texas"},
    ]
}

FORECAST_PAYLOAD = {
    "current_units": {
        "temperature_2m": "°C",
        "relative_humidity_2m": "%",
        "wind_speed_10m": "km/h",
        "pressure_msl": "hPa",
    },
    "current": {
        "temperature_2m": 18.4,
        "relative_humidity_2m": 62,
        "apparent_temperature": 17.1,
        "precipitation": 0.2,
        "weather_code": 61,
        "wind_speed_10m": 12.0,
        "pressure_msl": 1012.6,
    },
}


def _client(handler) -> tuple[OpenMeteoClient, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    http = httpx.Client(transport=httpx.MockTransport(recording))
    return OpenMeteoClient(http_client=http, suggestion_count=10), seen


def _routes(geocoding=None, forecast=None):
    def handler(request: httpx.Request) -> httpx.Response:
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        if url == GEOCODING_URL:
            return geocoding(request) if callable(geocoding) else httpx.Response(200, json=geocoding)
        if url == FORECAST_URL:
            return forecast(request) if callable(forecast) else httpx.Response(200, json=forecast)
        return httpx.Response(404)

    return handler


class ParseLocationsTests(unittest.TestCase):
    def test_missing_results_means_no_candidates(self) -> None:
        self.assertEqual(parse_locations({"generationtime_ms": 0.5}), [])

    def test_malformed_items_are_skipped(self) -> None:
        payload = {"results": [{"name": "Nowhere"}, "junk", GEOCODING_PAYLOAD["results"][0]]}
        self.assertEqual([loc.name for loc in parse_locations(payload)], ["Paris"])

    def test_non_object_payload_raises(self) -> None:
        with self.assertRaises(TypeError):
            parse_locations([])

    def test_labels(self) -> None:
        location = parse_locations(GEOCODING_PAYLOAD)[1]
        self.assertEqual(location.label(), "Paris, United States")
        self.assertEqual(location.display_name(), "Paris, Texas (United States)")
        self.assertEqual(Location("Oslo", 0.0, 0.0, "Norway").display_name(), "Oslo (Norway)")


class LookupSuggestionsTests(unittest.TestCase):
    def test_lookup_sends_search_parameters(self) -> None:
        client, seen = _client(_routes(geocoding=GEOCODING_PAYLOAD))
        with client:
            results = client.lookup_suggestions("par")

        self.assertEqual(len(results), 2)
        params = seen[0].url.params
        self.assertEqual(params["name"], "par")
        self.assertEqual(params["count"], "10")
        self.assertEqual(params["language"], "en")
        self.assertEqual(params["format"], "json")

    def test_lookup_propagates_http_errors(self) -> None:
        client, _seen = _client(_routes(geocoding=lambda _r: httpx.Response(500)))
        with self.assertRaises(httpx.HTTPStatusError):
            client.lookup_suggestions("par")


class FetchWeatherTests(unittest.TestCase):
    def test_fetch_uses_best_match_coordinates(self) -> None:
        client, seen = _client(_routes(geocoding=GEOCODING_PAYLOAD, forecast=FORECAST_PAYLOAD))
        report = client.fetch_weather("Paris")

        self.assertEqual(report.location.country, "France")
        self.assertEqual(report.current.temperature, 18.4)
        self.assertEqual(report.current.relative_humidity, 62)
        self.assertEqual(report.current.weather_code, 61)
        self.assertEqual(report.units.temperature, "°C")
        self.assertEqual(seen[0].url.params["count"], "1")
        forecast_params = seen[1].url.params
        self.assertEqual(forecast_params["latitude"], "48.85341")
        self.assertEqual(forecast_params["timezone"], "auto")
        self.assertIn("pressure_msl", forecast_params["current"])

    def test_unknown_city_reports_not_found(self) -> None:
        client, _seen = _client(_routes(geocoding={"generationtime_ms": 0.3}))
        with self.assertRaises(WeatherFetchError) as ctx:
            client.fetch_weather("Atlantis")
        self.assertEqual(ctx.exception.message, "'Atlantis' not found. Try a different city name.")

    def test_geocoding_timeout_message(self) -> None:
        def timeout(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client, _seen = _client(_routes(geocoding=timeout))
        with self.assertRaises(WeatherFetchError) as ctx:
            client.fetch_weather("Paris")
        self.assertEqual(ctx.exception.message, "Connection timeout. Check your internet connection.")

    def test_forecast_connect_error_message(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client, _seen = _client(_routes(geocoding=GEOCODING_PAYLOAD, forecast=refuse))
        with self.assertRaises(WeatherFetchError) as ctx:
            client.fetch_weather("Paris")
        self.assertEqual(ctx.exception.message, "Cannot connect to weather service.")

    def test_http_status_error_is_network_error(self) -> None:
        client, _seen = _client(_routes(geocoding=lambda _r: httpx.Response(503)))
        with self.assertRaises(WeatherFetchError) as ctx:
            client.fetch_weather("Paris")
        self.assertTrue(ctx.exception.message.startswith("Network error: "))

    def test_undecodable_location_payload(self) -> None:
        client, _seen = _client(_routes(geocoding=lambda _r: httpx.Response(200, text="<html>")))
        with self.assertRaises(WeatherFetchError) as ctx:
            client.fetch_weather("Paris")
        self.assertEqual(ctx.exception.message, "Failed to parse location data from weather service.")

    def test_incomplete_forecast_payload(self) -> None:
        client, _seen = _client(_routes(geocoding=GEOCODING_PAYLOAD, forecast={"current": {}}))
        with self.assertRaises(WeatherFetchError) as ctx:
            client.fetch_weather("Paris")
        self.assertEqual(ctx.exception.message, "Failed to parse weather data from service.")


class WeatherCodeTests(unittest.TestCase):
    def test_known_and_unknown_codes(self) -> None:
        self.assertEqual(describe_weather_code(0), "Clear sky")
        self.assertEqual(describe_weather_code(99), "Thunderstorm with hail")
        self.assertEqual(describe_weather_code(42), "Unknown")


if __name__ == "__main__":
    unittest.main()
