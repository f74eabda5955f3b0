"""Distance ranking of search results."""

from __future__ import annotations

from collections.abc import Sequence

from observation_finder.geo import distance_meters
from observation_finder.schemas import Coordinate, Observation


def annotate_distances(observations: Sequence[Observation], origin: Coordinate) -> list[Observation]:
    """Return copies of ``observations`` with ``distance_meters`` filled in.

    Observations without a coordinate are passed through without a distance.
    """
    annotated: list[Observation] = []
    for obs in observations:
        if obs.coordinate is None:
            annotated.append(obs.model_copy(update={"distance_meters": None}))
        else:
            distance = distance_meters(origin, obs.coordinate)
            annotated.append(obs.model_copy(update={"distance_meters": distance}))
    return annotated


def rank(observations: Sequence[Observation], origin: Coordinate | None = None) -> list[Observation]:
    """
    Order observations by distance from ``origin``, nearest first.

    Without an origin the input order is kept and nothing is annotated.
    Entries with no distance sort after all entries that have one. The sort
    is stable, so ties and distance-less entries keep their input order.

    Always returns a new list; the input sequence is not modified.
    """
    if origin is None:
        return list(observations)

    annotated = annotate_distances(observations, origin)
    return sorted(
        annotated,
        key=lambda obs: (
            obs.distance_meters is None,
            obs.distance_meters if obs.distance_meters is not None else 0.0,
        ),
    )
