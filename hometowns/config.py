"""Application configuration.

Configuration via environment variables:
    HOMETOWNS_API_BASE: NHL web API base URL (default: https://api-web.nhle.com/v1)
    HOMETOWNS_RELAY_URL: Relay prefix the target URL is appended to, URL-encoded
        (default: https://api.allorigins.win/raw?url=). Empty string disables.
    HOMETOWNS_SEASON: Season string, e.g. 20242025 (default: derived from today)
    HOMETOWNS_CACHE_TTL: Cache freshness window in seconds (default: 300)
    HOMETOWNS_TIMEOUT: HTTP request timeout in seconds (default: 10)
    HOMETOWNS_LOG_LEVEL: Logging level (default: INFO)
    HOMETOWNS_HOST / HOMETOWNS_PORT: Bind address (default: 127.0.0.1 / 8000)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from hometowns.providers.nhl.constants import DEFAULT_RELAY_URL, NHL_API_BASE
from hometowns.utilities.cache import CACHE_DURATION
from hometowns.utilities.season import current_season, validate_season


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    api_base: str = NHL_API_BASE
    relay_url: str = DEFAULT_RELAY_URL
    season: str = ""
    cache_ttl: float = CACHE_DURATION
    timeout: float = 10.0
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def resolved_season(self) -> str:
        """Configured season, or the current one when unset."""
        return validate_season(self.season) if self.season else current_season()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Raises:
            ValueError: If a numeric variable or the season is malformed
        """
        env = os.environ if environ is None else environ
        season = env.get("HOMETOWNS_SEASON", "").strip()
        if season:
            validate_season(season)

        return cls(
            api_base=env.get("HOMETOWNS_API_BASE", NHL_API_BASE).rstrip("/"),
            relay_url=env.get("HOMETOWNS_RELAY_URL", DEFAULT_RELAY_URL),
            season=season,
            cache_ttl=float(env.get("HOMETOWNS_CACHE_TTL", CACHE_DURATION)),
            timeout=float(env.get("HOMETOWNS_TIMEOUT", 10.0)),
            log_level=env.get("HOMETOWNS_LOG_LEVEL", "INFO").upper(),
            host=env.get("HOMETOWNS_HOST", "127.0.0.1"),
            port=int(env.get("HOMETOWNS_PORT", 8000)),
        )
