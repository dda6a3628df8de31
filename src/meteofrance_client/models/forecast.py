"""
Forecast response, v1 API (``/forecast``).

Timestamps are epoch seconds. Every measurement is optional: the API drops
fields depending on the location (overseas territories, mountains, sea) and
on how far ahead the entry is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import AliasChoices, Field

from meteofrance_client.models.base import ApiModel, RainSnowLimit, utc_timestamp
from meteofrance_client.models.place import Place

if TYPE_CHECKING:
    from datetime import datetime

# =============================================================================
# Building blocks
# =============================================================================


class TemperatureDaily(ApiModel):
    min: float | None = None
    max: float | None = None
    sea: float | None = None


class Humidity(ApiModel):
    min: int | None = None
    max: int | None = None


class Weather(ApiModel):
    """Weather pictogram code and its human-readable description."""

    icon: str | None = None
    desc: str | None = None


class RiseSet(ApiModel):
    rise: int | None = None
    set: int | None = None


class Temperature(ApiModel):
    value: float | None = None
    windchill: float | None = None


class Wind(ApiModel):
    # The wire also carries an ``icon`` code; it is not exposed.
    speed: float | None = None
    gust: float | None = None
    direction: int | None = None


class Precipitation(ApiModel):
    """Accumulated precipitation (mm) over 1, 3 and 6 hour windows."""

    one_hour: float | None = Field(default=None, alias="1h")
    three_hours: float | None = Field(default=None, alias="3h")
    six_hours: float | None = Field(default=None, alias="6h")


# =============================================================================
# Entries
# =============================================================================


class DailyForecast(ApiModel):
    """Forecast summary for one day."""

    dt: int
    temp: TemperatureDaily | None = Field(default=None, alias="T")
    humidity: Humidity | None = None
    uv: int | None = None
    weather_12h: Weather | None = Field(default=None, alias="weather12H")
    sun: RiseSet | None = None

    @property
    def time(self) -> datetime:
        return utc_timestamp(self.dt)


class Forecast(ApiModel):
    """Hourly (then 3-hourly, then 6-hourly) forecast entry."""

    dt: int
    temp: Temperature | None = Field(default=None, alias="T")
    humidity: int | None = None
    sea_level: float | None = None
    wind: Wind | None = None
    rain: Precipitation | None = None
    snow: Precipitation | None = None
    iso0: RainSnowLimit | None = None
    rain_snow_limit: RainSnowLimit | None = Field(
        default=None, validation_alias=AliasChoices("rain snow limit", "rain_snow_limit")
    )
    clouds: int | None = None
    weather: Weather | None = None

    @property
    def time(self) -> datetime:
        return utc_timestamp(self.dt)


class ProbabilityForecast(ApiModel):
    """Hazard probabilities (%) for one time bucket."""

    dt: int
    rain: Precipitation | None = None
    snow: Precipitation | None = None
    freezing: float | None = None

    @property
    def time(self) -> datetime:
        return utc_timestamp(self.dt)


# =============================================================================
# Response
# =============================================================================


class ForecastResponse(ApiModel):
    """Result of ``/forecast``: daily, hourly and hazard forecasts for a place."""

    position: Place
    updated_on: int
    daily_forecast: tuple[DailyForecast, ...]
    forecast: tuple[Forecast, ...]
    # Not served outside metropolitan France.
    probability_forecast: tuple[ProbabilityForecast, ...] = ()

    @property
    def updated_at(self) -> datetime:
        return utc_timestamp(self.updated_on)
