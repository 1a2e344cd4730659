"""Weather lookup collaborators producing :class:`WeatherSnapshot` values."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

import requests
from pydantic import BaseModel, ValidationError

from models.weather import WeatherSnapshot
from stylist_app.config import DEFAULT_GEOCODING_BASE_URL, DEFAULT_WEATHER_BASE_URL, StylistConfig
from tools.observability import instrument_tool

LOGGER = logging.getLogger(__name__)

# Open-Meteo WMO weather codes, as (upper bound, condition, description).
_WEATHER_CODES: Tuple[Tuple[int, str, str], ...] = (
    (0, "Clear", "clear sky"),
    (3, "Clouds", "partly cloudy"),
    (48, "Fog", "fog"),
    (57, "Drizzle", "light drizzle"),
    (67, "Rain", "rain"),
    (77, "Snow", "snow"),
    (82, "Rain", "rain showers"),
    (86, "Snow", "snow showers"),
    (99, "Thunderstorm", "thunderstorm"),
)


def describe_weather_code(code: int) -> Tuple[str, str]:
    """Map an Open-Meteo weather code to ``(condition, description)``."""

    if code >= 0:
        for upper_bound, condition, description in _WEATHER_CODES:
            if code <= upper_bound:
                return condition, description
    return "Unknown", "unknown"


class _GeocodingResult(BaseModel):
    latitude: float
    longitude: float
    name: str
    country: Optional[str] = None


class _GeocodingResponse(BaseModel):
    results: List[_GeocodingResult] = []


class _CurrentConditions(BaseModel):
    temperature_2m: float
    relative_humidity_2m: Optional[float] = None
    weather_code: int = -1
    wind_speed_10m: Optional[float] = None


class _ForecastResponse(BaseModel):
    current: _CurrentConditions


class WeatherProvider(ABC):
    """Abstract weather lookup interface."""

    @abstractmethod
    def get_current_weather(self, city: str) -> Optional[WeatherSnapshot]:
        """Return current conditions for ``city`` or ``None`` when unavailable."""


class OpenMeteoProvider(WeatherProvider):
    """Open-Meteo geocoding and current-conditions lookup.

    Network failures, unknown cities and malformed payloads are logged and
    reported as ``None`` so that outfit ranking proceeds without weather.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_WEATHER_BASE_URL,
        geocoding_url: str = DEFAULT_GEOCODING_BASE_URL,
        timeout_seconds: float = 5.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.geocoding_url = geocoding_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_config(cls, config: StylistConfig) -> "OpenMeteoProvider":
        return cls(
            base_url=config.weather_base_url,
            geocoding_url=config.geocoding_base_url,
            timeout_seconds=config.weather_timeout_seconds,
        )

    def _geocode(self, city: str) -> Optional[_GeocodingResult]:
        response = requests.get(
            f"{self.geocoding_url}/search",
            params={"name": city, "count": 1, "language": "en", "format": "json"},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        parsed = _GeocodingResponse.model_validate(response.json())
        return parsed.results[0] if parsed.results else None

    def get_weather_by_coords(self, latitude: float, longitude: float, city: Optional[str] = None) -> Optional[WeatherSnapshot]:
        try:
            response = requests.get(
                f"{self.base_url}/forecast",
                params={
                    "latitude": latitude,
                    "longitude": longitude,
                    "current": "temperature_2m,relative_humidity_2m,weather_code,wind_speed_10m",
                    "timezone": "auto",
                },
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            current = _ForecastResponse.model_validate(response.json()).current
        except requests.RequestException as exc:
            LOGGER.error("Weather API unreachable", exc_info=exc)
            return None
        except ValidationError as exc:
            LOGGER.error("Weather payload schema validation failed", exc_info=exc)
            return None

        condition, description = describe_weather_code(current.weather_code)
        wind_speed = round(current.wind_speed_10m, 1) if current.wind_speed_10m is not None else None
        return WeatherSnapshot(
            temperature=float(round(current.temperature_2m)),
            condition=condition,
            description=description,
            humidity=current.relative_humidity_2m,
            wind_speed=wind_speed,
            city=city or "Current Location",
        )

    @instrument_tool("get_current_weather", summarize=lambda snapshot: snapshot.condition)
    def get_current_weather(self, city: str) -> Optional[WeatherSnapshot]:
        if not city or not city.strip():
            raise ValueError("city is required for weather lookups")
        try:
            location = self._geocode(city.strip())
        except requests.RequestException as exc:
            LOGGER.error("Geocoding API unreachable", exc_info=exc)
            return None
        except ValidationError as exc:
            LOGGER.error("Geocoding payload schema validation failed", exc_info=exc)
            return None
        if location is None:
            LOGGER.warning("City not found for weather lookup")
            return None
        label = f"{location.name}, {location.country}" if location.country else location.name
        return self.get_weather_by_coords(location.latitude, location.longitude, label)


class MockWeatherProvider(WeatherProvider):
    """Offline deterministic provider for tests and local runs."""

    def __init__(self, snapshot: Optional[WeatherSnapshot] = None) -> None:
        self.snapshot = snapshot or WeatherSnapshot(
            temperature=18.0,
            condition="Clear",
            description="clear sky",
            humidity=55.0,
            wind_speed=3.5,
            city="Testville",
        )
        self.calls: List[str] = []

    def get_current_weather(self, city: str) -> Optional[WeatherSnapshot]:
        self.calls.append(city)
        return self.snapshot


__all__ = [
    "WeatherProvider",
    "OpenMeteoProvider",
    "MockWeatherProvider",
    "describe_weather_code",
]
