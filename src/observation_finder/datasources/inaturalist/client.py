"""
iNaturalist observations client.

Async HTTP client for the iNaturalist observation search endpoints:
``/observations/{username}.json`` for one user's observations and
``/observations.json`` for everyone's. Both accept the same
``swlat/swlng/nelat/nelng`` bounding-box parameters.

The total number of matches is reported in the ``X-Total-Entries`` header,
independent of page size.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from observation_finder.datasources.inaturalist.observations import parse_observations
from observation_finder.exceptions import ParseError, RemoteError
from observation_finder.schemas import PER_PAGE, SearchQuery, SearchResult
from observation_finder.services.http import create_client

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
TOTAL_ENTRIES_HEADER = "X-Total-Entries"


# ---------------------------------------------------------------------------
# Request building
# ---------------------------------------------------------------------------


def observations_path(username: str | None) -> str:
    """User-scoped path when a username is given, generic path otherwise."""
    if username:
        return f"/observations/{quote(username, safe='')}.json"
    return "/observations.json"


def build_params(query: SearchQuery) -> dict[str, str]:
    """Query parameters for one page of ``query``. Always requests 200 per page."""
    params: dict[str, str] = {}
    if query.bounding_box is not None:
        params.update(query.bounding_box.as_query_params())
    params["page"] = str(query.page)
    params["per_page"] = str(PER_PAGE)
    return params


def parse_total_count(headers: Mapping[str, str]) -> int:
    """Read the total match count header. 0 when absent or not a number."""
    raw = headers.get(TOTAL_ENTRIES_HEADER)
    if raw is None:
        return 0
    try:
        total = int(raw.strip())
    except ValueError:
        return 0
    return max(total, 0)


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class ObservationClient:
    """Fetches pages of observations from the remote API.

    Pass an existing ``httpx.AsyncClient`` to share a connection pool (or to
    inject a mock transport); otherwise one is created and closed by
    :meth:`aclose` / ``async with``.
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else create_client()

    async def __aenter__(self) -> ObservationClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def fetch(self, query: SearchQuery) -> SearchResult:
        """
        Fetch one page of observations matching ``query``.

        The returned observations are in server order and carry no distance;
        ranking is the caller's job.

        Raises:
            RemoteError: non-2xx status, or no response at all (``status_code`` None).
            ParseError: body is not JSON, or not a list of observation records.
        """
        path = observations_path(query.username)
        params = build_params(query)
        logger.debug("GET %s params=%s", path, params)

        try:
            resp = await self._http.get(path, params=params)
        except httpx.TransportError as e:
            raise RemoteError(None, f"Request to {path} failed: {e}") from e

        if not resp.is_success:
            raise RemoteError(resp.status_code)

        try:
            body: Any = resp.json()
        except ValueError as e:
            raise ParseError(f"Response body is not valid JSON: {e}") from e

        observations = parse_observations(body)
        total = parse_total_count(resp.headers)
        logger.debug("Fetched %d observations (page %d, %d total)", len(observations), query.page, total)

        return SearchResult(observations=observations, total_count=total, page=query.page)
