"""Observation response parsing."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from observation_finder.exceptions import ParseError
from observation_finder.schemas import Coordinate, Observation, Photo, QualityGrade

# =============================================================================
# Field helpers
# =============================================================================


def _parse_coordinate(record: dict[str, Any]) -> Coordinate | None:
    """Build a Coordinate from ``latitude``/``longitude``. None if missing or invalid.

    The API sends these as numbers or numeric strings, and as null or ""
    for observations with hidden or unknown locations.
    """
    lat = record.get("latitude")
    lon = record.get("longitude")
    if lat in (None, "") or lon in (None, ""):
        return None

    try:
        return Coordinate(latitude=float(lat), longitude=float(lon))
    except (TypeError, ValueError):
        # ValidationError is a ValueError: covers out-of-range values too
        return None


def _parse_quality_grade(value: Any) -> QualityGrade:
    try:
        return QualityGrade(value)
    except ValueError:
        return QualityGrade.CASUAL


def _parse_photo(photo: dict[str, Any]) -> Photo:
    return Photo(
        id=photo["id"],
        attribution=photo.get("attribution") or "",
        license_code=photo.get("license_code"),
        thumb_url=photo.get("thumb_url") or photo.get("square_url"),
        small_url=photo.get("small_url"),
        medium_url=photo.get("medium_url"),
        large_url=photo.get("large_url"),
        square_url=photo.get("square_url"),
    )


# =============================================================================
# Records
# =============================================================================


def parse_observation(record: dict[str, Any]) -> Observation:
    """
    Parse a single observation record.

    Raises:
        ParseError: if the record is not an object, has no ``id``, or holds
            values of the wrong type.
    """
    if not isinstance(record, dict):
        raise ParseError(f"Expected observation object, got {type(record).__name__}")

    photos = record.get("photos") or []
    if not isinstance(photos, list):
        raise ParseError(f"Observation {record.get('id')}: 'photos' is not a list")

    try:
        return Observation(
            id=record["id"],
            species_guess=record.get("species_guess"),
            observed_on=record.get("observed_on") or None,
            description=record.get("description"),
            uri=record.get("uri"),
            place_guess=record.get("place_guess"),
            coordinate=_parse_coordinate(record),
            quality_grade=_parse_quality_grade(record.get("quality_grade")),
            photos=tuple(_parse_photo(p) for p in photos),
        )
    except KeyError as e:
        raise ParseError(f"Observation record missing field {e}") from e
    except (TypeError, ValidationError) as e:
        raise ParseError(f"Invalid observation record {record.get('id')}: {e}") from e


def parse_observations(body: Any) -> list[Observation]:
    """
    Parse a decoded response body into observations, keeping server order.

    Accepts either a bare JSON array or an object with a ``results`` array.
    """
    if isinstance(body, dict) and "results" in body:
        body = body["results"]
    if not isinstance(body, list):
        raise ParseError(f"Expected a list of observations, got {type(body).__name__}")
    return [parse_observation(record) for record in body]
