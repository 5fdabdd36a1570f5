from __future__ import annotations

import pytest

from backend.app.api import CoordinateSummaryHandler, RequestContext
from backend.core.abstractions import LocationRecord, NormalizedCoordinate, WeatherSnapshot
from backend.core.providers.base import ProviderError, QuotaExceeded
from backend.core.services.summary_service import SummaryService


class _StaticWeather:
    name = "static-weather"

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls = 0

    def current(self, coordinate: NormalizedCoordinate) -> WeatherSnapshot:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return WeatherSnapshot(temperature=12.0, windspeed=3.1, winddirection=90)


class _StaticLocation:
    name = "static-location"

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls = 0

    def reverse(self, coordinate: NormalizedCoordinate) -> LocationRecord:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return LocationRecord(county="Cork", town="Kinsale", country="Ireland")


def make_handler(weather=None, location=None, **kwargs) -> CoordinateSummaryHandler:
    service = SummaryService(
        weather_provider=weather or _StaticWeather(),
        location_provider=location or _StaticLocation(),
    )
    return CoordinateSummaryHandler(service, **kwargs)


def test_handler_returns_summary_with_cache_header() -> None:
    handler = make_handler()
    context = RequestContext(query={"lat": "51.706", "lon": "-8.522"})

    response = handler.handle(context)

    assert response.status_code == 200
    assert response.payload == {
        "temp": 12.0,
        "windspeed": 3.1,
        "winddirection": 90,
        "country": "Ireland",
        "city": "Kinsale",
        "district": "Cork",
    }
    assert response.headers == {"Cache-Control": "public, max-age=60"}
    assert context.headers["Cache-Control"] == "public, max-age=60"


def test_handler_honours_configured_max_age() -> None:
    handler = make_handler(cache_max_age=120)

    response = handler.handle(RequestContext(query={"lat": "0", "lon": "0"}))

    assert response.headers["Cache-Control"] == "public, max-age=120"


@pytest.mark.parametrize("query", [{}, {"lat": "10"}, {"lat": "x", "lon": "1"}, {"lat": "91", "lon": "0"}])
def test_handler_rejects_invalid_input_without_network(query) -> None:
    weather = _StaticWeather()
    location = _StaticLocation()
    handler = make_handler(weather, location)

    response = handler.handle(RequestContext(query=query))

    assert response.status_code == 400
    assert response.payload == {"error": "Invalid or missing coordinates"}
    assert "Cache-Control" not in response.headers
    assert weather.calls == location.calls == 0


def test_handler_maps_provider_error_to_bad_gateway() -> None:
    handler = make_handler(location=_StaticLocation(ProviderError("nominatim: HTTP 500")))

    response = handler.handle(RequestContext(query={"lat": "1", "lon": "1"}))

    assert response.status_code == 502
    assert response.payload == {"error": "Upstream provider request failed"}
    assert "Cache-Control" not in response.headers


def test_handler_maps_quota_to_service_unavailable() -> None:
    handler = make_handler(weather=_StaticWeather(QuotaExceeded("open-meteo: quota exceeded")))

    response = handler.handle(RequestContext(query={"lat": "1", "lon": "1"}))

    assert response.status_code == 503
    assert response.payload == {"error": "Upstream provider unavailable"}


def test_context_normalises_header_names() -> None:
    context = RequestContext(query={})

    context.set_headers(cache_control="no-store", x_request_source="tests")

    assert context.headers == {"Cache-Control": "no-store", "X-Request-Source": "tests"}
