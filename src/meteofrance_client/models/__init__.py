"""
Response models.

Pydantic models mirroring the JSON of each endpoint. Modelling is not
exhaustive: fields we do not map are ignored, and anything the API may omit
is optional.

    place.py        Place (``/places`` results, embedded in v1 responses)
    forecast.py     ``/forecast`` (v1)
    forecast_v2.py  ``/v2/forecast``
    rain.py         ``/rain``
    base.py         ApiModel, RainSnowLimit, decode()
"""

from meteofrance_client.models.base import NOT_APPLICABLE, ApiModel, RainSnowLimit, decode
from meteofrance_client.models.forecast import ForecastResponse
from meteofrance_client.models.forecast_v2 import ForecastResponse as ForecastResponseV2
from meteofrance_client.models.place import Place
from meteofrance_client.models.rain import RainResponse

__all__ = [
    "NOT_APPLICABLE",
    "ApiModel",
    "ForecastResponse",
    "ForecastResponseV2",
    "Place",
    "RainResponse",
    "RainSnowLimit",
    "decode",
]
