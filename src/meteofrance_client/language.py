"""Language selector for the description fields of a response."""

from __future__ import annotations

from enum import StrEnum


class Language(StrEnum):
    """Language used for the description fields of a response."""

    FRENCH = "fr"
    ENGLISH = "en"

    @classmethod
    def default(cls) -> Language:
        return cls.FRENCH
