"""Nominatim reverse geocoding provider."""
from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Optional

from backend.core.abstractions import LocationRecord, NormalizedCoordinate
from backend.core.providers.base import HttpProvider, ProviderError

DEFAULT_USER_AGENT = "WeatherApp"


class NominatimProvider(HttpProvider):
    """Reverse geocoder; Nominatim's usage policy requires a User-Agent."""

    name = "nominatim"
    base_url = "https://nominatim.openstreetmap.org/reverse"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        if not self.request_config.user_agent:
            self.request_config = replace(self.request_config, user_agent=DEFAULT_USER_AGENT)

    def params(self, coordinate: NormalizedCoordinate) -> dict:
        return {
            "format": "json",
            "lat": coordinate.latitude_param,
            "lon": coordinate.longitude_param,
        }

    def reverse(self, coordinate: NormalizedCoordinate) -> LocationRecord:
        response = self._request("GET", self.base_url, params=self.params(coordinate))
        data = self._json(response)
        address = data.get("address")
        if not isinstance(address, Mapping):
            self._log.error("No address in response: %s", data.get("error", data))
            raise ProviderError(f"{self.name}: missing address")
        return LocationRecord.from_address(address)


__all__ = ["DEFAULT_USER_AGENT", "NominatimProvider"]
