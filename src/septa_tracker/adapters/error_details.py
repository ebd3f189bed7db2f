"""Mapping of fetch failures to loggable error details."""

import re

from septa_tracker.domain.errors import (
    DecodingError,
    FeedError,
    InvalidURLError,
    NoDataError,
    TransportError,
)
from septa_tracker.domain.models.error_details import ErrorDetails

_STATUS_REASONS = {
    429: "Rate limit exceeded",
    502: "Bad gateway (server error)",
    503: "Service unavailable",
    504: "Gateway timeout",
}


def extract_error_details(error: Exception) -> ErrorDetails:
    """Extract HTTP status code and error reason from exception."""
    kind = type(error).__name__
    url = error.url if isinstance(error, FeedError) else None

    if isinstance(error, InvalidURLError):
        return ErrorDetails(reason="Invalid URL", kind=kind, url=url)
    if isinstance(error, NoDataError):
        return ErrorDetails(reason="Empty response", kind=kind, url=url)
    if isinstance(error, DecodingError):
        return ErrorDetails(reason="Unexpected payload", kind=kind, url=url)

    status_code = error.status_code if isinstance(error, TransportError) else None
    if status_code is None:
        # Format: "... returned status 502 ..."
        status_match = re.search(r"status (\d{3})", str(error))
        status_code = int(status_match.group(1)) if status_match else None

    if status_code in _STATUS_REASONS:
        reason = _STATUS_REASONS[status_code]
    elif status_code is not None:
        reason = f"HTTP {status_code}"
    elif isinstance(error, TransportError):
        reason = "Network error"
    else:
        reason = "Unknown error"

    return ErrorDetails(status_code=status_code, reason=reason, kind=kind, url=url)
