"""Plain-text rendering of search results."""

from __future__ import annotations

from observation_finder.schemas import Observation, SearchResult


def format_distance(meters: float) -> str:
    """Human-friendly distance: ``"850m"`` below 1 km, ``"1.2km"`` above."""
    if meters < 1000:
        return f"{round(meters)}m"
    return f"{meters / 1000:.1f}km"


def render_observation(obs: Observation) -> str:
    """Multi-line summary of one observation."""
    lines = [obs.display_name]
    if obs.observed_on is not None:
        lines.append(f"  Observed on: {obs.observed_on.isoformat()}")
    if obs.place_guess:
        lines.append(f"  Location: {obs.place_guess}")
    if obs.distance_meters is not None:
        lines.append(f"  Distance: {format_distance(obs.distance_meters)}")
    if obs.description:
        lines.append(f"  {obs.description}")
    photo = obs.primary_photo
    if photo is not None:
        lines.append(f"  Photo: {photo.medium_url or photo.thumb_url} ({photo.attribution})")
        if len(obs.photos) > 1:
            lines.append(f"  +{len(obs.photos) - 1} more photos")
    if obs.uri:
        lines.append(f"  {obs.uri}")
    return "\n".join(lines)


def render_result(result: SearchResult) -> str:
    """Header line plus every observation, separated by blank lines."""
    if not result.observations:
        return "No observations found."

    header = f"Showing {len(result.observations)} of {result.total_count} observations"
    if result.total_pages > 1:
        header += f" (Page {result.page} of {result.total_pages})"

    blocks = [header] + [render_observation(obs) for obs in result.observations]
    return "\n\n".join(blocks)
