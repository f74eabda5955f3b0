"""Observation Finder - search iNaturalist observations by user and/or place.

Architecture::

    geo.py         Bounding boxes and great-circle distance (pure functions)
    datasources/   Remote API clients (iNaturalist observation search)
    ranking.py     Distance annotation and nearest-first ordering
    session.py     Pagination state; one logical cursor per search
    geolocation.py Device position as an async capability
    renderers/     Pure data -> text for the CLI
    services/      Shared utilities (async HTTP client factory)

Data flow: SearchFilter -> session (query) -> datasource (fetch) -> ranking -> session state
"""

__version__ = "0.1.0"

from observation_finder.config import Settings
from observation_finder.schemas import Coordinate, Observation, SearchFilter, SearchResult
from observation_finder.session import SearchSession

__all__ = [
    "Coordinate",
    "Observation",
    "SearchFilter",
    "SearchResult",
    "SearchSession",
    "Settings",
    "__version__",
]
