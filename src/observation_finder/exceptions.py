"""Typed errors raised by the observation search core.

All of these are recoverable: they propagate to the caller (CLI or UI),
which decides how to present them.
"""

from __future__ import annotations


class ObservationSearchError(Exception):
    """Base class for every error raised by observation_finder."""


class InvalidFilterError(ObservationSearchError):
    """Raised when a search filter has nothing to search for or a bad radius."""


class RemoteError(ObservationSearchError):
    """Raised when the remote API answers with a non-success status.

    ``status_code`` is None when the request never got a response
    (connection refused, timeout, ...).
    """

    def __init__(self, status_code: int | None, message: str | None = None) -> None:
        self.status_code = status_code
        if message is None:
            message = f"HTTP error! status: {status_code}"
        super().__init__(message)


class ParseError(ObservationSearchError):
    """Raised when the response body is not the JSON shape we expect."""


class PageOutOfRangeError(ObservationSearchError):
    """Raised when a page number falls outside the current result set."""

    def __init__(self, page: int, total_pages: int) -> None:
        self.page = page
        self.total_pages = total_pages
        super().__init__(f"Page {page} is out of range (1-{total_pages})")


class NoActiveSearchError(ObservationSearchError):
    """Raised when paging is requested with no settled, successful search."""

    def __init__(self, message: str = "No active search: run a search before changing pages") -> None:
        super().__init__(message)


class SupersededError(ObservationSearchError):
    """Raised by a request whose response arrived after a newer request started.

    The stale response is discarded and session state is left untouched.
    """

    def __init__(self) -> None:
        super().__init__("Request was superseded by a newer search")


class GeolocationError(ObservationSearchError):
    """Raised by a geolocation provider when permission is denied or no fix exists."""
