"""Typed payloads for geocoding candidates and current conditions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """One geocoding candidate."""

    name: str
    latitude: float
    longitude: float
    country: str
    region: str | None = None

    def label(self) -> str:
        """Canonical ``Name, Country`` text used when a suggestion is accepted."""
        return f"{self.name}, {self.country}"

    def display_name(self) -> str:
        region = f", {self.region}" if self.region else ""
        return f"{self.name}{region} ({self.country})"

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> Location:
        """Build from one Open-Meteo geocoding ``results`` item.

        Raises ``KeyError``/``TypeError``/``ValueError`` on malformed items.
        """
        region = payload.get("admin1")
        return cls(
            name=str(payload["name"]),
            latitude=float(payload["latitude"]),  # type: ignore[arg-type]
            longitude=float(payload["longitude"]),  # type: ignore[arg-type]
            country=str(payload["country"]),
            region=str(region) if isinstance(region, str) and region else None,
        )


@dataclass(frozen=True)
class Units:
    temperature: str
    wind_speed: str
    pressure: str


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float
    relative_humidity: int
    apparent_temperature: float
    precipitation: float
    weather_code: int
    wind_speed: float
    pressure: float


@dataclass(frozen=True)
class WeatherReport:
    """Successful submission result shown in the display phase."""

    location: Location
    current: CurrentConditions
    units: Units

    @classmethod
    def from_payload(cls, location: Location, payload: dict[str, object]) -> WeatherReport:
        current = payload["current"]
        units = payload["current_units"]
        if not isinstance(current, dict) or not isinstance(units, dict):
            raise TypeError("forecast payload is missing current conditions")
        return cls(
            location=location,
            current=CurrentConditions(
                temperature=float(current["temperature_2m"]),
                relative_humidity=int(current["relative_humidity_2m"]),
                apparent_temperature=float(current["apparent_temperature"]),
                precipitation=float(current["precipitation"]),
                weather_code=int(current["weather_code"]),
                wind_speed=float(current["wind_speed_10m"]),
                pressure=float(current["pressure_msl"]),
            ),
            units=Units(
                temperature=str(units["temperature_2m"]),
                wind_speed=str(units["wind_speed_10m"]),
                pressure=str(units["pressure_msl"]),
            ),
        )
