"""Shared fixtures."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from meteofrance_client.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from default settings, whatever the shell exports."""
    for key in list(os.environ):
        if key.startswith("METEOFRANCE_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
