"""
Météo-France API client.

One GET per call, no retries, no caching. Each method builds its URL with
:mod:`meteofrance_client.url`, checks the status code and decodes the body
into the matching model.

Example::

    from meteofrance_client import MeteoFranceClient

    client = MeteoFranceClient(token="...")
    paris = client.search_places("Paris")[0]
    forecast = client.get_forecast(paris.lat, paris.lon)
"""

from __future__ import annotations

import logging
import re
from typing import Any

import requests

from meteofrance_client.config import get_settings
from meteofrance_client.errors import DecodeError, HTTPStatusError, TransportError
from meteofrance_client.models import (
    ForecastResponse,
    ForecastResponseV2,
    Place,
    RainResponse,
    decode,
)
from meteofrance_client.services.http import create_session
from meteofrance_client.url import (
    Language,
    build_forecast_url,
    build_forecast_v2_url,
    build_places_search_url,
    build_rain_url,
)

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"token=[^&]*")


def redact(url: str) -> str:
    """Hide the access token in a URL before it is logged or reported."""
    return _TOKEN_RE.sub("token=***", url)


class MeteoFranceClient:
    """
    Client for the Météo-France mobile API.

    Args:
        token: Access token. Defaults to ``Settings.api_token``.
        base_url: API root. Defaults to ``Settings.api_url``.
        timeout: Per-request timeout in seconds. Defaults to ``Settings.timeout``.
        lang: Default language for description fields.
        session: Pre-built session (tests, custom adapters).

    All methods raise :class:`~meteofrance_client.errors.TransportError`,
    :class:`~meteofrance_client.errors.HTTPStatusError` or
    :class:`~meteofrance_client.errors.DecodeError`.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        lang: Language | str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        settings = get_settings()
        self.token = settings.api_token if token is None else token
        self.base_url = base_url or settings.api_url
        self.timeout = settings.timeout if timeout is None else timeout
        self.lang = Language(lang or settings.lang)
        self.session = session or create_session(timeout=self.timeout)

    @classmethod
    def with_token(cls, token: str) -> MeteoFranceClient:
        return cls(token)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    def get_forecast(
        self, lat: float, lon: float, lang: Language | str | None = None
    ) -> ForecastResponse:
        """Retrieve the weather forecast at a given location."""
        url = build_forecast_url(lat, lon, lang or self.lang, self.token, self.base_url)
        result: ForecastResponse = self._get(url, ForecastResponse)
        return result

    def get_forecast_v2(
        self, lat: float, lon: float, lang: Language | str | None = None
    ) -> ForecastResponseV2:
        """Retrieve the weather forecast at a given location (v2 API)."""
        url = build_forecast_v2_url(lat, lon, lang or self.lang, self.token, self.base_url)
        result: ForecastResponseV2 = self._get(url, ForecastResponseV2)
        return result

    def get_rain(
        self, lat: float, lon: float, lang: Language | str | None = None
    ) -> RainResponse:
        """Retrieve the rain forecast for the next hour at a given location."""
        url = build_rain_url(lat, lon, lang or self.lang, self.token, self.base_url)
        result: RainResponse = self._get(url, RainResponse)
        return result

    def search_places(
        self, query: str, lat: float | None = None, lon: float | None = None
    ) -> list[Place]:
        """
        Search places (cities) by name.

        Pass GPS coordinates to favour places around that location. An
        unknown name yields an empty list, not an error.
        """
        url = build_places_search_url(query, lat, lon, self.token, self.base_url)
        result: list[Place] = self._get(url, list[Place])
        return result

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _get(self, url: str, target: Any) -> Any:
        safe_url = redact(url)
        logger.debug("GET %s", safe_url)
        try:
            resp = self.session.get(url, timeout=self.timeout, allow_redirects=False)
        except requests.RequestException as exc:
            logger.debug("GET %s failed: %s", safe_url, exc)
            raise TransportError(f"Request to {safe_url} failed: {exc}") from exc

        if not 200 <= resp.status_code <= 299:
            logger.debug("GET %s returned %s", safe_url, resp.status_code)
            raise HTTPStatusError(resp.status_code, resp.reason or "", safe_url)

        try:
            return decode(target, resp.content)
        except DecodeError as exc:
            logger.debug("GET %s: undecodable body at %r", safe_url, exc.path)
            raise
