"""Shared model configuration and JSON decoding."""

from __future__ import annotations

from datetime import UTC, datetime
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError, model_validator

from meteofrance_client.errors import DecodeError

T = TypeVar("T")

#: Marker the API sends in place of an altitude when there is none.
NOT_APPLICABLE = "Non pertinent"


class ApiModel(BaseModel):
    """
    Base for every response model.

    Instances are immutable. Unknown wire fields are ignored so the API can
    add fields without breaking decoding. Fields are populated by their wire
    alias (``T``, ``1h``) or by their Python name.
    """

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
    }


class RainSnowLimit(ApiModel):
    """
    An altitude (metres) that is sometimes replaced by a free string.

    The same position in the payload may hold ``1250`` or ``"Non pertinent"``.
    Exactly one of ``altitude`` and ``text`` is set.
    """

    altitude: int | None = None
    text: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, bool):
            return {"text": str(data).lower()}
        if isinstance(data, int | float):
            return _altitude_or_text(data, str(data))
        if isinstance(data, str):
            value = data.strip()
            try:
                number = float(value)
            except ValueError:
                return {"text": value}
            return _altitude_or_text(number, value)
        return data

    @property
    def not_applicable(self) -> bool:
        return self.text is not None and self.text.casefold() == NOT_APPLICABLE.casefold()

    def __str__(self) -> str:
        if self.altitude is not None:
            return f"{self.altitude} m"
        return self.text or ""


def _altitude_or_text(number: float, raw: str) -> dict[str, Any]:
    # inf and nan have no altitude; keep what was sent
    try:
        return {"altitude": round(number)}
    except (ValueError, OverflowError):
        return {"text": raw}


def utc_timestamp(seconds: int) -> datetime:
    """Epoch seconds → timezone-aware UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=UTC)


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode(target: type[T] | Any, payload: bytes | str) -> T:
    """
    Decode a JSON payload into ``target`` (a model class or e.g. ``list[Place]``).

    Raises:
        DecodeError: The payload is not JSON or does not fit the schema.
            ``path`` names the first offending field using wire names.
    """
    try:
        result: T = _adapter(target).validate_json(payload)
    except ValidationError as exc:
        raise _to_decode_error(exc) from exc
    return result


def _to_decode_error(exc: ValidationError) -> DecodeError:
    errors = exc.errors(include_url=False)
    first = errors[0]
    path = ".".join(str(part) for part in first["loc"])
    message = first["msg"]
    if len(errors) > 1:
        message += f" (+{len(errors) - 1} more)"
    return DecodeError(message, path=path, fragment=first.get("input"))
