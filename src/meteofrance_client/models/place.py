"""Place: a named location with administrative metadata."""

from __future__ import annotations

from meteofrance_client.models.base import ApiModel


class Place(ApiModel):
    """
    A location, as returned by ``/places`` and embedded in v1 responses.

    ``lat``/``lon`` are expected in [-90, 90] and [-180, 180]; the API does
    not enforce this and neither do we.
    """

    lat: float
    lon: float
    alti: int | None = None
    name: str
    country: str
    dept: str | None = None
    rain_product_available: int | None = None
    timezone: str | None = None
    insee: str | None = None

    @property
    def has_rain_forecast(self) -> bool:
        """Whether ``/rain`` serves next-hour data for this place."""
        return bool(self.rain_product_available)

    def __str__(self) -> str:
        if self.dept:
            return f"{self.name} ({self.dept}) - {self.country}"
        return f"{self.name} - {self.country}"
