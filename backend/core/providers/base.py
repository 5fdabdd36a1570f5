from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import Response


class ProviderError(RuntimeError):
    """Base provider error: the upstream request could not produce usable data."""


class QuotaExceeded(ProviderError):
    """Raised when a provider reports a quota/usage limit issue."""


@dataclass
class RequestConfig:
    timeout: float = 10.0
    user_agent: Optional[str] = None


class HttpProvider:
    """Base class adding timeouts and error translation for HTTP providers."""

    name = "http"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text)
            raise QuotaExceeded(f"{self.name}: quota exceeded")
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise ProviderError(f"{self.name}: HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        headers = kwargs.pop("headers", None) or {}
        if self.request_config.user_agent:
            headers.setdefault("User-Agent", self.request_config.user_agent)
        try:
            if self.session is not None:
                response = self.session.request(
                    method, url, headers=headers, timeout=self.request_config.timeout, **kwargs
                )
            else:
                # Short-lived session per call; nothing is pooled across requests.
                with requests.Session() as session:
                    response = session.request(
                        method, url, headers=headers, timeout=self.request_config.timeout, **kwargs
                    )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise ProviderError(f"{self.name}: timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise ProviderError(f"{self.name}: request failed") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise ProviderError(f"{self.name}: invalid json") from exc
        if not isinstance(data, dict):
            self._log.error("Unexpected payload type: %s", type(data).__name__)
            raise ProviderError(f"{self.name}: unexpected payload")
        return data


__all__ = ["HttpProvider", "ProviderError", "QuotaExceeded", "RequestConfig"]
