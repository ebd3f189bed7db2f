"""HTTP client for SEPTA API requests."""

import asyncio
import logging
import time
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode, urlsplit

import aiohttp

from septa_tracker.adapters.api_request_logger import log_api_request
from septa_tracker.adapters.septa_api.constants import DEFAULT_HEADERS
from septa_tracker.domain.errors import InvalidURLError, NoDataError, TransportError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def build_url(url: str, params: dict[str, str | int] | None = None) -> str:
    """Build a request URL, percent-encoding query values.

    Spaces are encoded as ``%20`` so station names such as
    "30th Street Station" survive the round trip.

    Raises:
        InvalidURLError: If the URL has no http(s) scheme or no host.
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURLError(f"Malformed URL {url!r}: {e}", url=url) from e
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidURLError(f"Malformed URL {url!r}", url=url)
    if not params:
        return url
    query = urlencode(params, quote_via=quote)
    separator = "&" if parts.query else "?"
    return f"{url}{separator}{query}"


class SeptaHttpClient:
    """Thin GET client mapping every failure onto the feed error taxonomy."""

    def __init__(self, session: "ClientSession", timeout_seconds: float = 10) -> None:
        """Initialize with a shared aiohttp session.

        Args:
            session: Session used for all requests.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def get(self, url: str, params: dict[str, str | int] | None = None) -> bytes:
        """GET a URL and return the raw body.

        Raises:
            InvalidURLError: If the URL cannot be built.
            TransportError: On network errors, timeouts or non-200 responses.
            NoDataError: If the response body is empty.
        """
        full_url = build_url(url, params)
        started = time.monotonic()

        try:
            async with self._session.get(
                full_url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    response_text = await response.text()
                    raise TransportError(
                        f"SEPTA API returned status {response.status} for {full_url}: "
                        f"{response_text[:200]}",
                        url=full_url,
                        status_code=response.status,
                    )
                body = await response.read()
        except aiohttp.InvalidURL as e:
            raise InvalidURLError(f"Malformed URL {full_url!r}", url=full_url) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(
                f"Request to {full_url} failed: {type(e).__name__}: {e}", url=full_url
            ) from e
        finally:
            log_api_request("GET", full_url, time.monotonic() - started)

        if not body or not body.strip():
            raise NoDataError(f"Empty response from {full_url}", url=full_url)

        logger.debug(f"Fetched {len(body)} bytes from {full_url}")
        return body
