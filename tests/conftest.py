"""Shared pytest fixtures for the wikiterms test-suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from wikiterms.core.settings import load_settings

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    """Rebuild cached settings around each test so env overrides never leak."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


@pytest.fixture  # type: ignore[misc]
def fixtures_dir() -> Path:
    """Directory holding the canonical JSON documents."""
    return FIXTURES
