"""NHL data provider.

Fetches data via NHLClient and normalizes it into Game and Player
dataclasses. Shape problems in the payload raise DataFormatError.
"""

import logging

from hometowns.core import DataFormatError, FetchError, Game, Player
from hometowns.providers.nhl.client import SCHEDULE_CACHE_KEY, NHLClient
from hometowns.providers.nhl.constants import NHL_LOGO_URL, ROSTER_GROUPS
from hometowns.utilities.cache import make_cache_key

logger = logging.getLogger(__name__)


def _localized(value) -> str | None:
    """Read a plain or localized ({"default": ...}) string field."""
    if isinstance(value, dict):
        value = value.get("default")
    if value is None:
        return None
    return str(value)


def _parse_number(value) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class NHLProvider:
    """Schedule and roster access in our dataclass format."""

    def __init__(self, client: NHLClient):
        self._client = client

    @property
    def name(self) -> str:
        return "nhl"

    @property
    def client(self) -> NHLClient:
        return self._client

    async def fetch_schedule_now(self, force_fresh: bool = False) -> list[Game]:
        """Get games for the first day of the current game week.

        Raises:
            FetchError: Request failed
            DataFormatError: No usable gameWeek entry in the response
        """
        try:
            data = await self._client.get_schedule_now(force_fresh=force_fresh)
        except FetchError as e:
            raise type(e)(f"Failed to fetch schedule: {e}", **_fetch_context(e)) from e

        try:
            parsed = self._parse_schedule(data)
        except DataFormatError:
            # Drop the bad body so a retry refetches instead of re-reading it
            self._client.cache.invalidate(SCHEDULE_CACHE_KEY)
            raise

        logger.debug("[NHL] Schedule has %d games", len(parsed))
        return parsed

    async def fetch_roster(
        self, team_code: str, season: str, force_fresh: bool = False
    ) -> list[Player]:
        """Get all players on a team's roster.

        Returns forwards, then defensemen, then goalies.

        Raises:
            FetchError: Request failed
            DataFormatError: Roster payload malformed
        """
        try:
            data = await self._client.get_roster(team_code, season, force_fresh=force_fresh)
        except FetchError as e:
            raise type(e)(
                f"Failed to fetch roster for {team_code}: {e}", **_fetch_context(e)
            ) from e

        try:
            players = self._parse_roster(data, team_code)
        except DataFormatError:
            self._client.cache.invalidate(make_cache_key("roster", team_code))
            raise

        logger.debug("[NHL] Roster %s/%s has %d players", team_code, season, len(players))
        return players

    def _parse_schedule(self, data) -> list[Game]:
        """Parse the first gameWeek entry into Game dataclasses."""
        game_week = data.get("gameWeek") if isinstance(data, dict) else None
        if not isinstance(game_week, list) or not game_week or not isinstance(game_week[0], dict):
            logger.error("[NHL] Invalid schedule data structure: %r", data)
            raise DataFormatError("Invalid schedule data format")

        games = game_week[0].get("games") or []
        if not isinstance(games, list):
            logger.error("[NHL] Invalid games list in schedule: %r", games)
            raise DataFormatError("Invalid schedule data format")
        return [self._parse_game(game) for game in games]

    def _parse_roster(self, data, team_code: str) -> list[Player]:
        """Parse roster groups into Player dataclasses, forwards first."""
        if not isinstance(data, dict):
            raise DataFormatError(f"Invalid roster data format for {team_code}")

        players = []
        for group in ROSTER_GROUPS:
            entries = data.get(group)
            if entries is None:
                continue
            if not isinstance(entries, list):
                raise DataFormatError(f"Invalid '{group}' list in roster for {team_code}")
            players.extend(self._parse_player(entry, team_code) for entry in entries)
        return players

    def _parse_game(self, game: dict) -> Game:
        """Parse schedule game data into Game dataclass."""
        try:
            home = _localized(game["homeTeam"]["abbrev"])
            away = _localized(game["awayTeam"]["abbrev"])
        except (KeyError, TypeError) as e:
            raise DataFormatError(f"Game is missing team abbreviations: {e}") from e
        if not home or not away:
            raise DataFormatError("Game is missing team abbreviations")

        game_id = game.get("id")
        return Game(
            home_team=home,
            away_team=away,
            game_id=str(game_id) if game_id is not None else None,
            start_time_utc=game.get("startTimeUTC"),
        )

    def _parse_player(self, entry: dict, team_code: str) -> Player:
        """Parse roster entry into Player dataclass.

        Falls back to the requested team code and its logo asset when the
        payload does not carry team branding.
        """
        if not isinstance(entry, dict):
            raise DataFormatError(f"Invalid player entry in roster for {team_code}")

        team_abbrev = _localized(entry.get("teamAbbrev")) or team_code
        return Player(
            first_name=_localized(entry.get("firstName")) or "",
            last_name=_localized(entry.get("lastName")) or "",
            birth_city=_localized(entry.get("birthCity")) or "",
            birth_state_province=_localized(entry.get("birthStateProvince")) or None,
            birth_country=_localized(entry.get("birthCountry")) or "",
            team_abbrev=team_abbrev,
            team_logo=_localized(entry.get("teamLogo")) or NHL_LOGO_URL.format(abbrev=team_abbrev),
            number=_parse_number(entry.get("number", entry.get("sweaterNumber"))),
            position=_localized(entry.get("position") or entry.get("positionCode")),
        )


def _fetch_context(error: FetchError) -> dict:
    """Constructor kwargs that carry a FetchError's context forward."""
    context = {"url": error.url, "cache_key": error.cache_key}
    status_code = getattr(error, "status_code", None)
    if status_code is not None:
        context["status_code"] = status_code
    return context
