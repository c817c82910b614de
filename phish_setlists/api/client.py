"""
Phish.net API gateway module.

This module is the single point of contact with the remote service: it
builds request URLs, issues asynchronous HTTP calls through httpx, and
decodes the JSON envelopes into typed records.
"""

import logging
import time
from typing import Any, Callable, List, Optional, TypeVar

import httpx

from ..config import ConfigError, Env
from ..constants import DEFAULT_BASE_URL, SETLIST_BY_DATE_PATH, SHOWS_BY_YEAR_PATH
from ..models import SetlistItem, ShowSummary
from ..utils.logging import log_request_failure, log_request_success
from ..utils.validation import is_valid_show_date, is_valid_year
from .decoding import decode_setlist, decode_show_list
from .errors import DecodeError, PhishNetError, TransportError

logger = logging.getLogger(__name__)

E = TypeVar("E")


class PhishNetGateway:
    """
    Asynchronous client for the Phish.net v5 setlist endpoints.

    The gateway holds no state between calls beyond its configuration. When
    no ``client`` is injected, every call opens and closes its own
    ``httpx.AsyncClient``; an injected client is used as-is and never closed
    by the gateway.

    Args:
        api_key: Phish.net API key, attached to each request as ``apikey``
        base_url: API base URL
        client: Optional shared ``httpx.AsyncClient``
        timeout: Optional timeout in seconds for gateway-owned clients;
            httpx's default applies when unset

    Raises:
        ConfigError: If the API key is missing or blank, or the base URL is
            not http(s)
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        if not api_key or not api_key.strip():
            raise ConfigError("Phish.net API key is not configured (set PHISHNET_API_KEY)")
        if not (base_url or "").startswith(("http://", "https://")):
            raise ConfigError(f"Base URL must start with http:// or https://: {base_url!r}")

        self._api_key = api_key.strip()
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._timeout = timeout

    @classmethod
    def from_env(
        cls,
        env: Optional[Env] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "PhishNetGateway":
        """Create a gateway from loaded configuration (``Env.current()`` by default)."""
        if env is None:
            env = Env.current()
        gateway = cls(
            api_key=env.PHISHNET_API_KEY,
            base_url=env.PHISHNET_BASE_URL,
            client=client,
            timeout=env.PHISHNET_TIMEOUT,
        )
        logger.debug(f"Phish.net gateway initialized for {gateway.base_url}")
        return gateway

    async def fetch_shows_for_year(self, year: str) -> List[ShowSummary]:
        """
        Fetch every show summary for a year.

        Args:
            year: Four-digit year, e.g. "2025"

        Returns:
            Show summaries in API delivery order (empty if ``data`` is absent)

        Raises:
            ConfigError: If the year is not four digits
            TransportError: On network failure or a non-2xx response
            DecodeError: If the body is not a JSON object
        """
        if not is_valid_year(year):
            raise ConfigError(f"Year must be four digits, got {year!r}")

        envelope = await self._fetch_envelope(
            SHOWS_BY_YEAR_PATH.format(year=year), decode_show_list
        )
        return envelope.data

    async def fetch_setlist_for_date(self, date: str) -> List[SetlistItem]:
        """
        Fetch the setlist for one show date.

        Args:
            date: Show date as YYYY-MM-DD with zero-padded month and day

        Returns:
            Setlist items in API delivery order

        Raises:
            ConfigError: If the date is not YYYY-MM-DD
            TransportError: On network failure or a non-2xx response
            DecodeError: If the envelope or an item has the wrong shape
        """
        if not is_valid_show_date(date):
            raise ConfigError(f"Date must be YYYY-MM-DD, got {date!r}")

        envelope = await self._fetch_envelope(
            SETLIST_BY_DATE_PATH.format(date=date), decode_setlist
        )
        return envelope.data

    async def _fetch_envelope(self, path: str, decoder: Callable[[Any], E]) -> E:
        """Request ``path``, map failures to typed errors, and decode the body."""
        start_time = time.time()
        try:
            response = await self._get(path)
            payload = self._parse_body(path, response)
            envelope = decoder(payload)
        except (PhishNetError, ConfigError) as e:
            log_request_failure(
                endpoint=path,
                duration=time.time() - start_time,
                error_kind=type(e).__name__,
                error_message=str(e),
                status_code=getattr(e, "status_code", None),
                logger=logger,
            )
            raise

        log_request_success(
            endpoint=path,
            duration=time.time() - start_time,
            record_count=len(envelope.data),
            skipped_records=getattr(envelope, "skipped_records", 0),
            logger=logger,
        )
        return envelope

    async def _get(self, path: str) -> httpx.Response:
        url = f"{self.base_url}/{path}"
        params = {"apikey": self._api_key}
        logger.debug(f"GET {self.base_url}/{path}")

        try:
            if self._client is not None:
                return await self._client.get(url, params=params)

            client_kwargs = {}
            if self._timeout is not None:
                client_kwargs["timeout"] = self._timeout
            async with httpx.AsyncClient(**client_kwargs) as client:
                return await client.get(url, params=params)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise ConfigError(f"Malformed request URL for {path}: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {path} failed: {type(e).__name__}: {e}") from e

    def _parse_body(self, path: str, response: httpx.Response) -> Any:
        if not response.is_success:
            raise TransportError(
                f"HTTP {response.status_code} from {path}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(
                f"Non-JSON response from {path}: {response.text[:200]!r}"
            ) from e

        # Phish.net signals some failures (e.g. a rejected key) with HTTP 200
        if isinstance(payload, dict) and payload.get("error"):
            message = payload.get("error_message") or "unknown error"
            raise TransportError(
                f"Phish.net reported an error for {path}: {message}",
                status_code=response.status_code,
            )

        return payload
