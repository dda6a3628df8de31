"""
Forecast response, v2 API (``/v2/forecast``).

A GeoJSON ``Feature``: the location sits in ``geometry`` and everything
else in ``properties``. Compared to v1, fields are flat, units are metric
and times are ISO-8601 strings (kept verbatim).
"""

from __future__ import annotations

from pydantic import AliasChoices, Field

from meteofrance_client.models.base import ApiModel, RainSnowLimit


class Geometry(ApiModel):
    """GeoJSON point. Coordinates are ``[lon, lat]``."""

    geometry_type: str | None = Field(default=None, alias="type")
    coordinates: tuple[float, ...] = ()

    @property
    def lon(self) -> float | None:
        return self.coordinates[0] if len(self.coordinates) > 0 else None

    @property
    def lat(self) -> float | None:
        return self.coordinates[1] if len(self.coordinates) > 1 else None


class DailyForecast(ApiModel):
    """Forecast summary for one day."""

    time: str
    temp_min: float | None = Field(default=None, alias="T_min")
    temp_max: float | None = Field(default=None, alias="T_max")
    temp_sea: float | None = Field(default=None, alias="T_sea")
    relative_humidity_min: int | None = None
    relative_humidity_max: int | None = None
    total_precipitation_24h: float | None = None
    uv_index: int | None = None
    daily_weather_description: str | None = None
    sunrise_time: str | None = None
    sunset_time: str | None = None


class Forecast(ApiModel):
    """Hourly (then coarser) forecast entry."""

    # ``wind_icon`` and ``weather_icon`` are on the wire but not exposed.
    time: str
    temperature: float | None = Field(default=None, alias="T")
    windchill: float | None = Field(default=None, alias="T_windchill")
    relative_humidity: int | None = None
    sea_level_pressure: float | None = Field(default=None, alias="P_sea")
    wind_speed: float | None = None
    wind_speed_gust: float | None = None
    wind_direction: int | None = None
    rain_1h: float | None = None
    rain_3h: float | None = None
    rain_6h: float | None = None
    rain_12h: float | None = None
    rain_24h: float | None = None
    snow_1h: float | None = None
    snow_3h: float | None = None
    snow_6h: float | None = None
    snow_12h: float | None = None
    snow_24h: float | None = None
    iso0: RainSnowLimit | None = None
    rain_snow_limit: RainSnowLimit | None = Field(
        default=None, validation_alias=AliasChoices("rain_snow_limit", "rain snow limit")
    )
    total_cloud_cover: int | None = None
    weather_description: str | None = None


class ProbabilityForecast(ApiModel):
    """Hazard probabilities (%) for one time bucket."""

    time: str
    rain_hazard_3h: float | None = None
    rain_hazard_6h: float | None = None
    snow_hazard_3h: float | None = None
    snow_hazard_6h: float | None = None
    freezing_hazard: float | None = None
    storm_hazard: float | None = None


class Properties(ApiModel):
    """Place identity plus the three forecast sequences."""

    altitude: int | None = None
    name: str
    country: str
    french_department: str | None = None
    rain_product_available: int | None = None
    timezone: str | None = None
    insee: str | None = None
    #: Confidence index of the forecast bulletin.
    bulletin_cote: int | None = None
    daily_forecast: tuple[DailyForecast, ...]
    forecast: tuple[Forecast, ...]
    probability_forecast: tuple[ProbabilityForecast, ...] = ()


class ForecastResponse(ApiModel):
    """Result of ``/v2/forecast``."""

    update_time: str
    location_type: str | None = Field(default=None, alias="type")
    geometry: Geometry
    properties: Properties
