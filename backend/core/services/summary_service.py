"""Summary service fanning out to the weather and location providers."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional, Sequence

from backend.core.abstractions import (
    UNKNOWN,
    LocationProvider,
    LocationRecord,
    NormalizedCoordinate,
    SummaryResponse,
    WeatherProvider,
    WeatherSnapshot,
)

DISTRICT_FIELDS = ("suburb", "county", "region")
CITY_FIELDS = ("city", "town", "village")
COUNTRY_FIELDS = ("country",)


def first_present(source: Any, fields: Sequence[str], default: str = UNKNOWN) -> str:
    """Return the first non-empty attribute of ``source`` named in ``fields``."""
    for field in fields:
        value = getattr(source, field, None)
        if value:
            return value
    return default


def merge(weather: WeatherSnapshot, location: LocationRecord) -> SummaryResponse:
    return SummaryResponse(
        temp=weather.temperature,
        windspeed=weather.windspeed,
        winddirection=weather.winddirection,
        country=first_present(location, COUNTRY_FIELDS),
        city=first_present(location, CITY_FIELDS),
        district=first_present(location, DISTRICT_FIELDS),
    )


class SummaryService:
    """Fetch weather and location concurrently and reduce them to a summary.

    Both requests are submitted before either result is awaited. A failure of
    either provider fails the whole summary; partial data is never returned.
    """

    def __init__(
        self,
        *,
        weather_provider: WeatherProvider,
        location_provider: LocationProvider,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.weather = weather_provider
        self.location = location_provider
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def summarize(self, coordinate: NormalizedCoordinate) -> SummaryResponse:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="summary") as pool:
            weather_future = pool.submit(self.weather.current, coordinate)
            location_future = pool.submit(self.location.reverse, coordinate)
            weather = weather_future.result()
            location = location_future.result()
        summary = merge(weather, location)
        self._log.debug(
            "Summary for %s,%s: %s",
            coordinate.latitude_param,
            coordinate.longitude_param,
            summary,
        )
        return summary


__all__ = ["SummaryService", "first_present", "merge"]
