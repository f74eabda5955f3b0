"""iNaturalist observation data source.

Searches observations by username and/or bounding box, one page at a time.

Public API:
  - client: ObservationClient, build_params, observations_path, parse_total_count
  - observations: parse_observation, parse_observations
"""

from observation_finder.datasources.inaturalist.client import (
    TOTAL_ENTRIES_HEADER,
    ObservationClient,
    build_params,
    observations_path,
    parse_total_count,
)
from observation_finder.datasources.inaturalist.observations import (
    parse_observation,
    parse_observations,
)

__all__ = [
    "TOTAL_ENTRIES_HEADER",
    "ObservationClient",
    "build_params",
    "observations_path",
    "parse_observation",
    "parse_observations",
    "parse_total_count",
]
