"""
Search session: one logical cursor over paginated search results.

A session remembers the last successful filter so later pages are fetched
with the same username/location context, and tracks the server-reported
total so page numbers can be range-checked before hitting the network.

Concurrency policy: newest request wins. Each ``search``/``go_to_page`` call
takes a ticket; if another call starts before its response arrives, the
response is dropped without touching session state and the stale call
raises :class:`~observation_finder.exceptions.SupersededError`.

Page changes only apply to a settled search: while a new search is pending,
``go_to_page`` raises NoActiveSearchError instead of superseding it. A failed
new search clears the displayed results; a failed page change keeps them.
"""

from __future__ import annotations

import logging
import math
from typing import Protocol

from observation_finder.config import Settings, get_settings
from observation_finder.exceptions import (
    InvalidFilterError,
    NoActiveSearchError,
    ObservationSearchError,
    PageOutOfRangeError,
    SupersededError,
)
from observation_finder.geo import bounding_box
from observation_finder.ranking import rank
from observation_finder.schemas import PER_PAGE, SearchFilter, SearchQuery, SearchResult

logger = logging.getLogger(__name__)


class ObservationFetcher(Protocol):
    """Anything that can fetch one page of results (``ObservationClient`` in production)."""

    async def fetch(self, query: SearchQuery) -> SearchResult: ...


# =============================================================================
# Query building
# =============================================================================


def validate_filter(search_filter: SearchFilter, settings: Settings) -> None:
    """Raise InvalidFilterError if the filter can't be searched."""
    if search_filter.is_empty:
        raise InvalidFilterError("Enter a username and/or select a location to search")

    if search_filter.location is not None:
        radius = search_filter.radius_meters
        if not settings.min_radius_m <= radius <= settings.max_radius_m:
            raise InvalidFilterError(
                f"Search radius {radius:g}m is outside "
                f"{settings.min_radius_m:g}-{settings.max_radius_m:g}m"
            )


def build_query(search_filter: SearchFilter, page: int = 1) -> SearchQuery:
    """Turn a filter into a remote query for ``page``.

    A location becomes both the bounding box (filtering) and the origin
    (ranking).
    """
    bbox = None
    if search_filter.location is not None:
        bbox = bounding_box(search_filter.location, search_filter.radius_meters)
    return SearchQuery(
        username=search_filter.username,
        bounding_box=bbox,
        origin=search_filter.location,
        page=page,
    )


# =============================================================================
# Session
# =============================================================================


class SearchSession:
    """Pagination state for one user's search."""

    def __init__(self, client: ObservationFetcher, settings: Settings | None = None) -> None:
        self._client = client
        self._settings = settings or get_settings()

        self._filter: SearchFilter | None = None
        self._page = 1
        self._total_count = 0
        self._result: SearchResult | None = None

        self._generation = 0
        self._in_flight = 0
        self._pending_search: int | None = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def filter(self) -> SearchFilter | None:
        """Filter of the last successful search."""
        return self._filter

    @property
    def page(self) -> int:
        return self._page

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def total_pages(self) -> int:
        return math.ceil(self._total_count / PER_PAGE)

    @property
    def result(self) -> SearchResult | None:
        """Currently displayed page, or None before the first successful search."""
        return self._result

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def search(self, search_filter: SearchFilter) -> SearchResult:
        """
        Start a new search at page 1.

        Raises:
            InvalidFilterError: no username and no location, or radius out of range.
            RemoteError, ParseError: fetch failed; results are cleared and
                there is no active search until the next successful one.
            SupersededError: a newer request started before this one finished.
        """
        validate_filter(search_filter, self._settings)
        return await self._run(search_filter, build_query(search_filter, page=1), new_search=True)

    async def go_to_page(self, page: int) -> SearchResult:
        """
        Re-run the active search for ``page``.

        Raises:
            NoActiveSearchError: no search has succeeded yet, or a new search is
                still in progress.
            PageOutOfRangeError: ``page`` is below 1 or past the last page.
            RemoteError, ParseError: fetch failed; previous page is kept.
            SupersededError: a newer request started before this one finished.
        """
        if self._pending_search is not None:
            raise NoActiveSearchError("A new search is still in progress")
        if self._filter is None:
            raise NoActiveSearchError()

        # An empty result still has a (blank) page 1 that can be refreshed.
        last_page = max(self.total_pages, 1)
        if page < 1 or page > last_page:
            raise PageOutOfRangeError(page, last_page)

        return await self._run(self._filter, build_query(self._filter, page=page))

    async def next_page(self) -> SearchResult:
        return await self.go_to_page(self._page + 1)

    async def previous_page(self) -> SearchResult:
        return await self.go_to_page(self._page - 1)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _run(
        self, search_filter: SearchFilter, query: SearchQuery, *, new_search: bool = False
    ) -> SearchResult:
        self._generation += 1
        ticket = self._generation
        if new_search:
            self._pending_search = ticket
        self._in_flight += 1
        logger.debug("Request #%d: page %d for %s", ticket, query.page, search_filter)

        try:
            fetched = await self._client.fetch(query)
        except ObservationSearchError as e:
            if ticket != self._generation:
                raise SupersededError() from e
            if new_search:
                self._clear()
            raise
        finally:
            self._in_flight -= 1
            if self._pending_search == ticket:
                self._pending_search = None

        if ticket != self._generation:
            logger.debug("Discarding response #%d (latest is #%d)", ticket, self._generation)
            raise SupersededError()

        result = SearchResult(
            observations=rank(fetched.observations, query.origin),
            total_count=fetched.total_count,
            page=query.page,
        )
        self._filter = search_filter
        self._page = query.page
        self._total_count = result.total_count
        self._result = result
        return result

    def _clear(self) -> None:
        self._filter = None
        self._page = 1
        self._total_count = 0
        self._result = None
