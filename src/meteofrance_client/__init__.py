"""
meteofrance-client - a Python client for Météo-France's mobile weather API.

Architecture::

    url.py        Pure URL builders (token, lat, lon, lang, q)
    models/       Pydantic response models + decode()
    client.py     MeteoFranceClient: GET, status check, decode
    services/     Shared HTTP session (default timeout, no retries)
    config.py     Settings from METEOFRANCE_* env vars / .env
    errors.py     TransportError, HTTPStatusError, DecodeError
    cli.py        ``meteofrance`` command

Data flow: url → services.http session → status check → models.decode
"""

__version__ = "0.1.0"

from meteofrance_client.client import MeteoFranceClient
from meteofrance_client.config import Settings, get_settings
from meteofrance_client.errors import (
    DecodeError,
    HTTPStatusError,
    MeteoFranceError,
    TransportError,
)
from meteofrance_client.models import (
    ForecastResponse,
    ForecastResponseV2,
    Place,
    RainResponse,
    RainSnowLimit,
)
from meteofrance_client.url import (
    Language,
    build_forecast_url,
    build_forecast_v2_url,
    build_places_search_url,
    build_rain_url,
)

__all__ = [
    "DecodeError",
    "ForecastResponse",
    "ForecastResponseV2",
    "HTTPStatusError",
    "Language",
    "MeteoFranceClient",
    "MeteoFranceError",
    "Place",
    "RainResponse",
    "RainSnowLimit",
    "Settings",
    "TransportError",
    "__version__",
    "build_forecast_url",
    "build_forecast_v2_url",
    "build_places_search_url",
    "build_rain_url",
    "get_settings",
]
