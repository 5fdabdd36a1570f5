"""Framework independent surface for the coordinate summary endpoint.

The DRF view, the management command and the tests all go through
:class:`CoordinateSummaryHandler`.  Query parameters and response headers are
reached through an explicitly passed :class:`RequestContext` instead of any
framework globals.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from backend.core.coordinates import (
    COORDINATE_PRECISION,
    INVALID_COORDINATES_MESSAGE,
    InvalidCoordinateError,
    normalize_query,
)
from backend.core.providers.base import ProviderError, QuotaExceeded
from backend.core.services.summary_service import SummaryService

logger = logging.getLogger(__name__)

UPSTREAM_FAILED_MESSAGE = "Upstream provider request failed"
UPSTREAM_UNAVAILABLE_MESSAGE = "Upstream provider unavailable"
DEFAULT_CACHE_MAX_AGE = 60


@dataclass
class Response:
    status_code: int
    payload: Dict[str, Any]
    headers: Mapping[str, str]


@dataclass
class RequestContext:
    """Per-request view on query parameters plus a response header sink."""

    query: Mapping[str, str]
    headers: Dict[str, str] = field(default_factory=dict)

    def param(self, name: str) -> Optional[str]:
        return self.query.get(name)

    def set_headers(self, **headers: str) -> None:
        for name, value in headers.items():
            self.headers[name.replace("_", "-").title()] = value


class CoordinateSummaryHandler:
    """Validate, fan out, merge and respond."""

    def __init__(
        self,
        service: SummaryService,
        *,
        cache_max_age: int = DEFAULT_CACHE_MAX_AGE,
        precision: int = COORDINATE_PRECISION,
    ) -> None:
        self._service = service
        self._cache_max_age = cache_max_age
        self._precision = precision

    def handle(self, context: RequestContext) -> Response:
        try:
            coordinate = normalize_query(context.param("lat"), context.param("lon"), self._precision)
        except InvalidCoordinateError:
            return self._error(context, 400, INVALID_COORDINATES_MESSAGE)

        try:
            summary = self._service.summarize(coordinate)
        except QuotaExceeded as exc:
            logger.debug("Upstream quota exhausted: %s", exc)
            return self._error(context, 503, UPSTREAM_UNAVAILABLE_MESSAGE)
        except ProviderError as exc:
            logger.debug("Upstream request failed: %s", exc)
            return self._error(context, 502, UPSTREAM_FAILED_MESSAGE)

        context.set_headers(cache_control=f"public, max-age={self._cache_max_age}")
        return Response(status_code=200, payload=summary.as_dict(), headers=dict(context.headers))

    def _error(self, context: RequestContext, status_code: int, message: str) -> Response:
        return Response(status_code=status_code, payload={"error": message}, headers=dict(context.headers))
