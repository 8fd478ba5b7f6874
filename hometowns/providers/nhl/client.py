"""NHL web API HTTP client.

Handles raw HTTP requests to the schedule and roster endpoints, routed
through a relay that takes the target URL as a query parameter.
No data transformation - just fetch, cache and return JSON.

No retries: a failed request surfaces immediately as a FetchError and the
caller decides what to do.
"""

import logging
from urllib.parse import quote

import httpx

from hometowns.core.exceptions import DataFormatError, HttpStatusError, NetworkError
from hometowns.providers.nhl.constants import DEFAULT_RELAY_URL, NHL_API_BASE, REQUEST_HEADERS
from hometowns.utilities.cache import FetchCache, make_cache_key
from hometowns.utilities.season import validate_season

logger = logging.getLogger(__name__)

SCHEDULE_CACHE_KEY = "schedules"


def relay_url_for(target_url: str, relay_url: str = DEFAULT_RELAY_URL) -> str:
    """Wrap a target URL in the relay URL.

    An empty relay means the target is requested directly.
    """
    if not relay_url:
        return target_url
    return relay_url + quote(target_url, safe="")


class NHLClient:
    """Low-level async NHL API client.

    Responses are cached in the given FetchCache under "schedules" and
    "roster-<TEAM>". The httpx client is created lazily; pass http_client to
    share one (it is then left open on close).

    Usage:
        async with NHLClient(FetchCache()) as client:
            data = await client.get_schedule_now()
    """

    def __init__(
        self,
        cache: FetchCache,
        relay_url: str = DEFAULT_RELAY_URL,
        base_url: str = NHL_API_BASE,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._cache = cache
        self._relay_url = relay_url
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def cache(self) -> FetchCache:
        return self._cache

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def _request(self, url: str, cache_key: str) -> dict:
        """Make a single GET through the relay and decode the JSON body.

        Raises:
            NetworkError: Transport failure
            HttpStatusError: Non-2xx response
            DataFormatError: Body is not valid JSON
        """
        proxy_url = relay_url_for(url, self._relay_url)
        try:
            response = await self._get_client().get(proxy_url, headers=REQUEST_HEADERS)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning("[NHL] HTTP %d for %s", status_code, url)
            raise HttpStatusError(
                f"HTTP error {status_code} fetching {url}",
                status_code=status_code,
                url=url,
                cache_key=cache_key,
            ) from e
        except httpx.RequestError as e:
            logger.warning("[NHL] Request failed for %s: %s", url, e)
            raise NetworkError(
                f"Network error fetching {url}: {e}", url=url, cache_key=cache_key
            ) from e

        logger.debug("[FETCH] %s -> %d", url, response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise DataFormatError(f"Invalid JSON from {url}: {e}") from e

    async def get_schedule_now(self, force_fresh: bool = False) -> dict:
        """Fetch the current game week schedule.

        Returns:
            Raw decoded response
        """
        url = f"{self._base_url}/schedule/now"
        return await self._cache.get_or_fetch(
            SCHEDULE_CACHE_KEY,
            lambda: self._request(url, SCHEDULE_CACHE_KEY),
            force_fresh=force_fresh,
        )

    async def get_roster(self, team_code: str, season: str, force_fresh: bool = False) -> dict:
        """Fetch a team's roster for a season.

        Args:
            team_code: Team abbreviation (e.g., 'TOR')
            season: Season string (e.g., '20242025')

        Returns:
            Raw decoded response
        """
        validate_season(season)
        url = f"{self._base_url}/roster/{team_code}/{season}"
        cache_key = make_cache_key("roster", team_code)
        return await self._cache.get_or_fetch(
            cache_key,
            lambda: self._request(url, cache_key),
            force_fresh=force_fresh,
        )

    async def aclose(self) -> None:
        """Close the HTTP client if we created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "NHLClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
