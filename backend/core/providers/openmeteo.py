"""Open-Meteo current weather provider."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from backend.core.abstractions import NormalizedCoordinate, WeatherSnapshot
from backend.core.providers.base import HttpProvider, ProviderError


class OpenMeteoProvider(HttpProvider):
    name = "open-meteo"
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url

    def params(self, coordinate: NormalizedCoordinate) -> dict:
        return {
            "latitude": coordinate.latitude_param,
            "longitude": coordinate.longitude_param,
            "current_weather": "true",
        }

    def current(self, coordinate: NormalizedCoordinate) -> WeatherSnapshot:
        response = self._request("GET", self.base_url, params=self.params(coordinate))
        data = self._json(response)
        current = data.get("current_weather")
        if not isinstance(current, Mapping):
            self._log.error("No current_weather in response")
            raise ProviderError(f"{self.name}: missing current weather")
        return WeatherSnapshot(
            temperature=self._field(current, "temperature"),
            windspeed=self._field(current, "windspeed"),
            winddirection=self._field(current, "winddirection"),
        )

    def _field(self, current: Mapping[str, Any], key: str) -> Any:
        value = current.get(key)
        if value is None:
            self._log.error("current_weather lacks %s", key)
            raise ProviderError(f"{self.name}: missing {key}")
        return value


__all__ = ["OpenMeteoProvider"]
