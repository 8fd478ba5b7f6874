"""Top-level load cycle.

Drives schedule -> teams -> rosters -> regions -> render and owns the
IDLE -> LOADING -> SUCCESS | ERROR state machine. This is the only place
errors are turned into something the user sees.
"""

import asyncio
import logging

from hometowns.core import HometownsError, InvalidTransitionError, Renderer
from hometowns.providers.nhl import NHLProvider

from .load_status import LoadState, LoadStatus
from .regions import extract_teams, fetch_all_rosters, group_by_region

logger = logging.getLogger(__name__)


class HometownLoader:
    """Runs load cycles and reports them to a Renderer.

    Cycles never overlap: a second caller waits for the running cycle to
    settle, then starts its own. There is no cancellation or automatic retry.
    """

    def __init__(self, provider: NHLProvider, renderer: Renderer, season: str):
        self._provider = provider
        self._renderer = renderer
        self._season = season
        self._status = LoadStatus()
        self._lock = asyncio.Lock()

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def season(self) -> str:
        return self._season

    async def load(self, force_fresh: bool = False) -> LoadStatus:
        """Run one full load cycle.

        Args:
            force_fresh: Bypass the cache for the schedule and every roster

        Returns:
            The settled status (SUCCESS or ERROR)
        """
        async with self._lock:
            return await self._run_cycle(force_fresh)

    async def retry(self) -> LoadStatus:
        """Start a new cycle after a failed one.

        Raises:
            InvalidTransitionError: If the last cycle did not fail
        """
        async with self._lock:
            if self._status.state is not LoadState.ERROR:
                raise InvalidTransitionError(
                    f"Retry is only possible after an error (state: {self._status.state.value})"
                )
            logger.info("[LOADER] Retrying after error: %s", self._status.error)
            return await self._run_cycle(force_fresh=False)

    async def _run_cycle(self, force_fresh: bool) -> LoadStatus:
        self._status.start()
        self._renderer.show_loading()

        try:
            games = await self._provider.fetch_schedule_now(force_fresh=force_fresh)
            teams = sorted(extract_teams(games))
            logger.info("[LOADER] %d games today, %d teams", len(games), len(teams))

            players = await fetch_all_rosters(
                self._provider, teams, self._season, force_fresh=force_fresh
            )
            regions = group_by_region(players)
        except HometownsError as e:
            logger.error("[LOADER] Load failed: %s", e)
            self._status.fail(str(e))
            self._renderer.show_error(str(e))
            return self._status
        except Exception as e:
            logger.exception("[LOADER] Unexpected failure during load")
            self._status.fail(f"Unexpected error: {e}")
            self._renderer.show_error(self._status.error)
            raise

        self._status.succeed(regions, team_count=len(teams))
        self._renderer.show_regions(regions)
        logger.info("[LOADER] %s", self._status.message)
        return self._status
