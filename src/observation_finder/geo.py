"""Geographic helpers: search bounding boxes and great-circle distance.

Pure functions, no I/O. Inputs are WGS84 decimal degrees.
"""

from __future__ import annotations

import math

from observation_finder.schemas import BoundingBox, Coordinate

EARTH_RADIUS_M = 6_371_000.0
METERS_PER_DEGREE = 111_111.0  # approx. length of one degree of latitude


def bounding_box(center: Coordinate, radius_meters: float) -> BoundingBox:
    """
    Box enclosing a circle of ``radius_meters`` around ``center``.

    Uses a flat-earth approximation. The longitude delta grows without bound
    as latitude approaches the poles, and boxes crossing the antimeridian are
    not wrapped; such boxes are returned as-is rather than rejected.

    Raises:
        ValueError: if ``radius_meters`` is not positive.
    """
    if radius_meters <= 0:
        raise ValueError(f"radius_meters must be positive, got {radius_meters}")

    lat_delta = radius_meters / METERS_PER_DEGREE
    lng_delta = radius_meters / (METERS_PER_DEGREE * math.cos(math.radians(center.latitude)))

    return BoundingBox(
        swlat=center.latitude - lat_delta,
        swlng=center.longitude - lng_delta,
        nelat=center.latitude + lat_delta,
        nelng=center.longitude + lng_delta,
    )


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two points in metres (haversine)."""
    rlat1, rlon1 = math.radians(a.latitude), math.radians(a.longitude)
    rlat2, rlon2 = math.radians(b.latitude), math.radians(b.longitude)

    dlat = rlat2 - rlat1
    dlon = rlon2 - rlon1

    h = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h a hair outside [0, 1] for antipodal points.
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_M * c
