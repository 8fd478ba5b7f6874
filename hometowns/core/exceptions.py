"""Exception hierarchy.

Every layer wraps failures with context (URL, cache key, team) and re-raises.
Only the loader turns them into user-facing state.
"""


class HometownsError(Exception):
    """Base exception for all hometowns errors."""

    pass


class FetchError(HometownsError):
    """Raised when a request to the upstream API fails."""

    def __init__(self, message: str, url: str | None = None, cache_key: str | None = None):
        super().__init__(message)
        self.url = url
        self.cache_key = cache_key


class NetworkError(FetchError):
    """Transport-level failure (DNS, connection refused, timeout)."""

    pass


class HttpStatusError(FetchError):
    """Upstream answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        url: str | None = None,
        cache_key: str | None = None,
    ):
        super().__init__(message, url=url, cache_key=cache_key)
        self.status_code = status_code


class DataFormatError(HometownsError):
    """Response body is not JSON or is missing the expected shape."""

    pass


class AggregationError(HometownsError):
    """A roster fetch failed during the fan-out; no partial results."""

    def __init__(self, message: str, team: str | None = None):
        super().__init__(message)
        self.team = team


class InvalidTransitionError(HometownsError):
    """Loader asked to move between states it cannot move between."""

    pass
