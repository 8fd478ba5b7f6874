"""Region aggregation pipeline.

Turns today's games into players grouped by birth state/province:
extract teams -> fetch rosters concurrently -> group and sort.
"""

import asyncio
import logging
from collections.abc import Iterable

from hometowns.core import AggregationError, Game, Player, RegionGroups
from hometowns.providers.nhl import NHLProvider
from hometowns.utilities.sorting import region_sort_key

logger = logging.getLogger(__name__)


def extract_teams(games: Iterable[Game]) -> set[str]:
    """Collect the unique home and away team abbreviations."""
    teams: set[str] = set()
    for game in games:
        teams.add(game.away_team)
        teams.add(game.home_team)
    return teams


async def fetch_all_rosters(
    provider: NHLProvider,
    teams: Iterable[str],
    season: str,
    force_fresh: bool = False,
) -> list[Player]:
    """Fetch every team's roster concurrently and flatten the players.

    All fetches are issued at once and all are awaited before the result is
    judged. Players come out in team input order regardless of which request
    finished first.

    Args:
        provider: NHL provider
        teams: Team abbreviations, in the order results should appear
        season: Season string (e.g., '20242025')
        force_fresh: Bypass the cache for every roster

    Returns:
        All players from all teams

    Raises:
        AggregationError: If any roster fetch failed (first failing team in
            input order); no partial list is returned
    """
    team_list = list(teams)
    results = await asyncio.gather(
        *(provider.fetch_roster(team, season, force_fresh=force_fresh) for team in team_list),
        return_exceptions=True,
    )

    players: list[Player] = []
    for team, result in zip(team_list, results, strict=True):
        if isinstance(result, BaseException) and not isinstance(result, Exception):
            raise result
        if isinstance(result, Exception):
            logger.warning("[ROSTERS] Fetch failed for %s: %s", team, result)
            raise AggregationError(
                f"Failed to fetch team rosters: {result}", team=team
            ) from result
        players.extend(result)

    logger.info("[ROSTERS] Fetched %d players from %d teams", len(players), len(team_list))
    return players


def group_by_region(players: Iterable[Player]) -> RegionGroups:
    """Bucket players by region, sorted by region label.

    Players without a birth state/province land under "International".
    Order within a bucket follows input order.
    """
    grouped: RegionGroups = {}
    for player in players:
        grouped.setdefault(player.region, []).append(player)

    return {region: grouped[region] for region in sorted(grouped, key=region_sort_key)}
