"""Utility for logging API requests when SEPTA_LOG_REQUESTS is enabled."""

import logging
import os

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via SEPTA_LOG_REQUESTS environment variable."""
    return os.getenv("SEPTA_LOG_REQUESTS", "").lower() == "true"


def log_api_request(method: str, url: str, elapsed_seconds: float | None = None) -> None:
    """Log API request details if SEPTA_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Full request URL including the query string.
        elapsed_seconds: Request duration, if known.
    """
    if not should_log_requests():
        return

    timing = f" ({elapsed_seconds:.2f}s)" if elapsed_seconds is not None else ""
    logger.info(f"API Request: {method} {url}{timing}")
