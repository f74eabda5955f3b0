"""
Device geolocation as an async capability.

The core never talks to a GPS or browser API directly. Callers hand in a
:class:`Geolocator`; it either returns a Coordinate or raises
:class:`~observation_finder.exceptions.GeolocationError` (permission denied,
no fix, ...). Both outcomes are normal: without a position, location search
is simply unavailable.
"""

from __future__ import annotations

from typing import Protocol

from observation_finder.config import Settings, get_settings
from observation_finder.exceptions import GeolocationError
from observation_finder.schemas import Coordinate


class Geolocator(Protocol):
    async def locate(self) -> Coordinate:
        """Current position. Raises GeolocationError when unavailable."""
        ...


class FixedGeolocator:
    """Geolocator with a known answer: a fixed position, or always unavailable."""

    def __init__(self, coordinate: Coordinate | None = None, reason: str = "Position unavailable") -> None:
        self.coordinate = coordinate
        self.reason = reason

    async def locate(self) -> Coordinate:
        if self.coordinate is None:
            raise GeolocationError(self.reason)
        return self.coordinate


async def resolve_origin(geolocator: Geolocator) -> Coordinate | None:
    """Current position, or None if the geolocator can't provide one."""
    try:
        return await geolocator.locate()
    except GeolocationError:
        return None


async def initial_map_center(geolocator: Geolocator, settings: Settings | None = None) -> Coordinate:
    """Where to centre a location picker: the user's position, else the configured default."""
    position = await resolve_origin(geolocator)
    if position is not None:
        return position
    settings = settings or get_settings()
    return Coordinate(latitude=settings.default_lat, longitude=settings.default_lon)
