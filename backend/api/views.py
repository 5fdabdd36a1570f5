"""REST API view for the coordinate summary."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.app.api import CoordinateSummaryHandler, RequestContext
from backend.core.providers.base import RequestConfig
from backend.core.providers.nominatim import NominatimProvider
from backend.core.providers.openmeteo import OpenMeteoProvider
from backend.core.services.summary_service import SummaryService


@lru_cache(maxsize=1)
def get_summary_handler() -> CoordinateSummaryHandler:
    timeout = settings.GEOSUMMARY_UPSTREAM_TIMEOUT
    service = SummaryService(
        weather_provider=OpenMeteoProvider(
            base_url=settings.GEOSUMMARY_WEATHER_URL,
            request_config=RequestConfig(timeout=timeout),
        ),
        location_provider=NominatimProvider(
            base_url=settings.GEOSUMMARY_LOCATION_URL,
            request_config=RequestConfig(timeout=timeout, user_agent=settings.GEOSUMMARY_USER_AGENT),
        ),
    )
    return CoordinateSummaryHandler(service, cache_max_age=settings.GEOSUMMARY_CACHE_MAX_AGE)


class CoordinateSummaryView(APIView):
    """Return weather and place names for the requested coordinates."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the summary for ``lat``/``lon`` query parameters."""
        context = RequestContext(query=request.query_params)
        result = get_summary_handler().handle(context)
        return Response(result.payload, status=result.status_code, headers=dict(result.headers))
