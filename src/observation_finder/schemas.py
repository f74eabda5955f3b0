"""
Domain models for observation finder.

Pydantic models for data from the remote API and for search state.
These define the canonical schema - datasources normalize API responses to these.
"""

from __future__ import annotations

import math
from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

#: Page size always requested from the remote API.
PER_PAGE = 200

# =============================================================================
# Geographic
# =============================================================================


class Coordinate(BaseModel):
    """A WGS84 point in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class BoundingBox(BaseModel):
    """SW/NE lat-lon bounding box.

    Built by :func:`observation_finder.geo.bounding_box`; bounds are not
    range-checked because boxes near the poles or the antimeridian may
    legitimately spill past them.
    """

    model_config = ConfigDict(frozen=True)

    swlat: float
    swlng: float
    nelat: float
    nelng: float

    def as_query_params(self) -> dict[str, str]:
        """Return the box as remote API query parameters (decimal strings)."""
        return {
            "swlat": f"{self.swlat:.6f}",
            "swlng": f"{self.swlng:.6f}",
            "nelat": f"{self.nelat:.6f}",
            "nelng": f"{self.nelng:.6f}",
        }


# =============================================================================
# Observations
# =============================================================================


class QualityGrade(StrEnum):
    """Observation verification level."""

    RESEARCH = "research"
    NEEDS_ID = "needs_id"
    CASUAL = "casual"


class Photo(BaseModel):
    """One photo attached to an observation."""

    model_config = ConfigDict(frozen=True)

    id: int
    attribution: str = ""
    license_code: str | None = None
    thumb_url: str | None = None
    small_url: str | None = None
    medium_url: str | None = None
    large_url: str | None = None
    square_url: str | None = None


class Observation(BaseModel):
    """A single observation record.

    ``distance_meters`` is only populated by the ranker when the search has an
    origin; it stays None otherwise.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    species_guess: str | None = None
    observed_on: date | None = None
    description: str | None = None
    uri: str | None = None
    place_guess: str | None = None
    coordinate: Coordinate | None = None
    quality_grade: QualityGrade = QualityGrade.CASUAL
    photos: tuple[Photo, ...] = ()
    distance_meters: float | None = None

    @property
    def primary_photo(self) -> Photo | None:
        """First photo, shown as the main image."""
        return self.photos[0] if self.photos else None

    @property
    def display_name(self) -> str:
        return self.species_guess or "Unknown species"


# =============================================================================
# Search
# =============================================================================


class SearchFilter(BaseModel):
    """What the user asked for: a username, a location, or both."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    username: str | None = None
    location: Coordinate | None = None
    radius_meters: float = Field(default=1000.0, gt=0)

    @field_validator("username")
    @classmethod
    def blank_username_is_none(cls, value: str | None) -> str | None:
        return value or None

    @property
    def is_empty(self) -> bool:
        return self.username is None and self.location is None


class SearchQuery(BaseModel):
    """One remote request: filter criteria plus the page to fetch.

    ``origin`` is used for ranking only and never sent to the API.
    """

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    bounding_box: BoundingBox | None = None
    origin: Coordinate | None = None
    page: int = Field(default=1, ge=1)


class SearchResult(BaseModel):
    """One page of observations plus pagination metadata."""

    model_config = ConfigDict(frozen=True)

    observations: list[Observation] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=1)

    @property
    def per_page(self) -> int:
        return PER_PAGE

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.per_page)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1
