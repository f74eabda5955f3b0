"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from observation_finder.config import Settings, get_settings
from observation_finder.schemas import Coordinate, Observation


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def make_observation() -> Callable[..., Observation]:
    """Factory for observations; pass lat/lon to give it a coordinate."""

    def _make(
        obs_id: int,
        lat: float | None = None,
        lon: float | None = None,
        **fields: Any,
    ) -> Observation:
        coordinate = None
        if lat is not None and lon is not None:
            coordinate = Coordinate(latitude=lat, longitude=lon)
        return Observation(id=obs_id, coordinate=coordinate, **fields)

    return _make
