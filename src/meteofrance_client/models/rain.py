"""Next-hour rain forecast (``/rain``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from meteofrance_client.models.base import ApiModel, utc_timestamp
from meteofrance_client.models.place import Place

if TYPE_CHECKING:
    from datetime import datetime


class RainForecast(ApiModel):
    """Rain intensity for one 5 to 10 minute slot."""

    dt: int
    rain: int | None = None  # intensity code, 1 (dry) to 4 (heavy)
    desc: str | None = None

    @property
    def time(self) -> datetime:
        return utc_timestamp(self.dt)


class RainResponse(ApiModel):
    """Result of ``/rain``."""

    position: Place
    updated_on: int
    quality: int | None = None
    forecast: tuple[RainForecast, ...] = ()

    @property
    def updated_at(self) -> datetime:
        return utc_timestamp(self.updated_on)

    @property
    def will_rain(self) -> bool:
        """True when any slot in the next hour has an intensity above dry."""
        return any(entry.rain is not None and entry.rain > 1 for entry in self.forecast)
