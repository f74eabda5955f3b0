"""
Shared async HTTP client factory.

Provides a pre-configured ``httpx.AsyncClient`` with the project User-Agent,
a default timeout and the remote API base URL. There is no retry
layer: failed requests surface to the caller.

Usage::

    from observation_finder.services.http import create_client

    async with create_client() as client:
        resp = await client.get("/observations.json", params={"page": 1})
"""

from __future__ import annotations

import httpx

from observation_finder import __version__
from observation_finder.config import get_settings

USER_AGENT = f"observation-finder/{__version__}"


def create_client(
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build an ``httpx.AsyncClient`` for the observations API.

    Args:
        base_url: API root (defaults to ``Settings.api_base_url``).
        timeout: Default timeout in seconds (defaults to ``Settings.request_timeout``).
        transport: Custom transport, e.g. ``httpx.MockTransport`` in tests.
    """
    settings = get_settings()
    return httpx.AsyncClient(
        base_url=base_url or settings.api_base_url,
        timeout=timeout if timeout is not None else settings.request_timeout,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        transport=transport,
    )
