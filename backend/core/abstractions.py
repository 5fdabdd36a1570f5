"""Core abstractions for the coordinate summary domain."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol

UNKNOWN = "Unknown"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A validated latitude/longitude pair."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class NormalizedCoordinate:
    """Coordinate rounded to a fixed precision.

    ``latitude_param`` and ``longitude_param`` keep the fixed-point text form
    (``"52.500"``) that is sent upstream verbatim.
    """

    latitude: float
    longitude: float
    latitude_param: str
    longitude_param: str


@dataclass(frozen=True, slots=True)
class WeatherSnapshot:
    """Current conditions as reported by the weather provider."""

    temperature: float
    windspeed: float
    winddirection: float


@dataclass(frozen=True, slots=True)
class LocationRecord:
    """Address parts returned by the reverse geocoder; every field is optional."""

    suburb: Optional[str] = None
    county: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    town: Optional[str] = None
    village: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_address(cls, address: Mapping[str, Any]) -> "LocationRecord":
        return cls(
            suburb=address.get("suburb"),
            county=address.get("county"),
            region=address.get("region"),
            city=address.get("city"),
            town=address.get("town"),
            village=address.get("village"),
            country=address.get("country"),
        )


@dataclass(frozen=True, slots=True)
class SummaryResponse:
    """Unified payload returned to clients."""

    temp: float
    windspeed: float
    winddirection: float
    country: str = UNKNOWN
    city: str = UNKNOWN
    district: str = UNKNOWN

    def as_dict(self) -> Dict[str, Any]:
        return {
            "temp": self.temp,
            "windspeed": self.windspeed,
            "winddirection": self.winddirection,
            "country": self.country,
            "city": self.city,
            "district": self.district,
        }


class WeatherProvider(Protocol):
    """A data source returning current conditions for a coordinate."""

    name: str

    def current(self, coordinate: NormalizedCoordinate) -> WeatherSnapshot:
        """Fetch the current weather for the provided coordinate."""
        ...


class LocationProvider(Protocol):
    """A reverse geocoder resolving a coordinate to address parts."""

    name: str

    def reverse(self, coordinate: NormalizedCoordinate) -> LocationRecord:
        """Resolve the provided coordinate to a location record."""
        ...
