# Weather lookups: wttr.in for the network, Open-Meteo for the tool-using assistants.
# Date: 2025-06-14
# Version: 0.2.0

import httpx
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Dict, Optional
from urllib.parse import quote

from agent_network.core.config import get_settings
from agent_network.utils.logger import console

# condition, temperature, humidity, wind
WEATHER_FORMAT = "%C+%t+%h+%w"

OPEN_METEO_CURRENT = "temperature_2m,weather_code,wind_speed_10m"

# WMO weather interpretation codes
WEATHER_CODES = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    95: "Thunderstorm",
}


class WeatherLookup(ABC):
    """
    Best-effort weather lookup. fetch() never raises: every failure is
    returned as an apologetic sentence the model can relay to the user.
    """

    @abstractmethod
    async def fetch(self, location: str) -> str:
        ...


class WeatherClient(WeatherLookup):
    """Free-text current conditions from a wttr.in-compatible service."""
    def __init__(self, base_url: str, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, location: str) -> str:
        url = f"{self._base_url}/{quote(location.strip())}"
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.get(url, params={"format": WEATHER_FORMAT})
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            console.error(f"Weather service returned {e.response.status_code} for '{location}'.")
            return f"Weather service error for {location}"
        except httpx.HTTPError as e:
            console.error(f"Weather request failed for '{location}': {e}")
            return f"Unable to fetch weather for {location}"

        summary = response.text.strip()
        if not summary:
            return f"Unable to fetch weather for {location}"
        return summary


class OpenMeteoClient(WeatherLookup):
    """
    Geocodes the location, then reads current conditions from Open-Meteo.
    Answers look like "Paris: Partly cloudy, 18.2°C, Wind: 11.5 km/h".
    """
    def __init__(
        self,
        geocoding_url: str,
        forecast_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._geocoding_url = geocoding_url
        self._forecast_url = forecast_url
        self._timeout = timeout
        self._transport = transport

    async def _locate(self, client: httpx.AsyncClient, location: str) -> Optional[Dict[str, Any]]:
        response = await client.get(self._geocoding_url, params={"name": location, "count": 1})
        if response.is_error:
            return None
        results = response.json().get("results") or []
        return results[0] if results else None

    async def fetch(self, location: str) -> str:
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                place = await self._locate(client, location)
                if place is None:
                    return f"Could not find location: {location}"

                response = await client.get(self._forecast_url, params={
                    "latitude": place["latitude"],
                    "longitude": place["longitude"],
                    "current": OPEN_METEO_CURRENT,
                    "temperature_unit": "celsius",
                })
                if response.is_error:
                    console.error(f"Open-Meteo returned {response.status_code} for '{location}'.")
                    return f"Weather service error for {location}"

                current = response.json()["current"]
                description = WEATHER_CODES.get(current.get("weather_code"), "Unknown conditions")
                return f"{place['name']}: {description}, {current['temperature_2m']}°C, " \
                       f"Wind: {current['wind_speed_10m']} km/h"
        except (httpx.HTTPError, ValueError, KeyError) as e:
            console.error(f"Open-Meteo lookup failed for '{location}': {e!r}")
            return f"Unable to fetch weather for {location}"


@lru_cache
def get_weather_client() -> WeatherClient:
    settings = get_settings()
    return WeatherClient(settings.WEATHER_API_BASE_URL, timeout=settings.WEATHER_TIMEOUT_SECONDS)


@lru_cache
def get_open_meteo_client() -> OpenMeteoClient:
    settings = get_settings()
    return OpenMeteoClient(
        settings.OPEN_METEO_GEOCODING_URL,
        settings.OPEN_METEO_FORECAST_URL,
        timeout=settings.WEATHER_TIMEOUT_SECONDS,
    )
