"""
Request URL builders.

The API expects plain GET requests with every parameter in the query
string, the access token included. These functions only build strings;
they never touch the network and never validate coordinate ranges.

Parameters are always emitted in the same order: ``token``, ``lat``,
``lon``, ``lang``, ``q`` (each only where the endpoint takes it).

Example::

    >>> build_rain_url(48.85, 2.35, token="abc", base_url="https://example.com")
    'https://example.com/rain?token=abc&lat=48.85&lon=2.35&lang=fr'
"""

from __future__ import annotations

from urllib.parse import quote, urlencode

from meteofrance_client.config import get_settings
from meteofrance_client.language import Language

FORECAST_PATH = "/forecast"
FORECAST_V2_PATH = "/v2/forecast"
RAIN_PATH = "/rain"
PLACES_PATH = "/places"


def _resolve_token(token: str | None) -> str:
    return get_settings().api_token if token is None else token


def _build(path: str, params: list[tuple[str, str | float]], base_url: str | None) -> str:
    base = (base_url or get_settings().api_url).rstrip("/")
    # quote (not quote_plus) with no safe characters: spaces become %20
    return f"{base}{path}?{urlencode(params, quote_via=quote)}"


def _located(
    path: str,
    lat: float,
    lon: float,
    lang: Language | str | None,
    token: str | None,
    base_url: str | None,
) -> str:
    language = Language.default() if lang is None else Language(lang)
    params: list[tuple[str, str | float]] = [
        ("token", _resolve_token(token)),
        ("lat", float(lat)),
        ("lon", float(lon)),
        ("lang", language.value),
    ]
    return _build(path, params, base_url)


def build_forecast_url(
    lat: float,
    lon: float,
    lang: Language | str | None = None,
    token: str | None = None,
    base_url: str | None = None,
) -> str:
    """Build the URL for the weather forecast at a given location."""
    return _located(FORECAST_PATH, lat, lon, lang, token, base_url)


def build_forecast_v2_url(
    lat: float,
    lon: float,
    lang: Language | str | None = None,
    token: str | None = None,
    base_url: str | None = None,
) -> str:
    """Build the URL for the weather forecast at a given location (v2 API)."""
    return _located(FORECAST_V2_PATH, lat, lon, lang, token, base_url)


def build_rain_url(
    lat: float,
    lon: float,
    lang: Language | str | None = None,
    token: str | None = None,
    base_url: str | None = None,
) -> str:
    """Build the URL for the next-hour rain forecast at a given location."""
    return _located(RAIN_PATH, lat, lon, lang, token, base_url)


def build_places_search_url(
    query: str,
    lat: float | None = None,
    lon: float | None = None,
    token: str | None = None,
    base_url: str | None = None,
) -> str:
    """
    Build the URL for searching places (cities) by name.

    Pass coordinates to rank results by proximity. Each coordinate is
    emitted only when given; a missing one is left out of the query string
    entirely rather than sent empty.
    """
    params: list[tuple[str, str | float]] = [("token", _resolve_token(token))]
    if lat is not None:
        params.append(("lat", float(lat)))
    if lon is not None:
        params.append(("lon", float(lon)))
    params.append(("q", query))
    return _build(PLACES_PATH, params, base_url)
