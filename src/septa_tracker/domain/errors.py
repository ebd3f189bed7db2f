"""Errors raised by feed clients.

Every fetch either returns decoded data or raises a ``FeedError``
subclass. Callers catch these at the point where they issued the fetch
and fall back to an empty or previously known value.
"""


class FeedError(Exception):
    """Base class for feed fetch failures."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class InvalidURLError(FeedError):
    """The request URL could not be built or is malformed."""


class NoDataError(FeedError):
    """The server answered successfully with an empty body."""


class DecodingError(FeedError):
    """The payload does not match the expected schema."""


class TransportError(FeedError):
    """Network failure, timeout, or a non-200 response."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message, url)
        self.status_code = status_code
