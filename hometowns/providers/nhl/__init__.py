"""NHL web API provider.

Usage:
    from hometowns.providers.nhl import NHLClient, NHLProvider

    async with NHLClient(FetchCache()) as client:
        provider = NHLProvider(client)
        games = await provider.fetch_schedule_now()
"""

from hometowns.providers.nhl.client import NHLClient, relay_url_for
from hometowns.providers.nhl.provider import NHLProvider

__all__ = ["NHLClient", "NHLProvider", "relay_url_for"]
