"""Tests for the region aggregation pipeline."""

import asyncio

import pytest

from hometowns.consumers import extract_teams, fetch_all_rosters, group_by_region
from hometowns.core import AggregationError, Game, HttpStatusError, Player
from hometowns.utilities.sorting import region_sort_key
from tests.conftest import SEASON


def make_player(name: str, state: str | None = None, team: str = "TOR") -> Player:
    return Player(
        first_name=name,
        last_name="",
        birth_city="City",
        birth_country="CAN",
        team_abbrev=team,
        birth_state_province=state,
    )


class StubProvider:
    """Provider whose roster fetches are controlled per team."""

    def __init__(self, rosters: dict[str, list[Player]], delays: dict[str, float] | None = None):
        self.rosters = rosters
        self.delays = delays or {}
        self.failures: dict[str, Exception] = {}
        self.started: list[str] = []
        self.finished: list[str] = []

    async def fetch_roster(self, team, season, force_fresh=False):
        self.started.append(team)
        await asyncio.sleep(self.delays.get(team, 0))
        self.finished.append(team)
        if team in self.failures:
            raise self.failures[team]
        return self.rosters[team]


class TestExtractTeams:
    def test_empty_games(self):
        assert extract_teams([]) == set()

    def test_unique_home_and_away(self):
        games = [Game(home_team="A", away_team="B"), Game(home_team="B", away_team="C")]
        assert extract_teams(games) == {"A", "B", "C"}

    def test_dedupe_is_exact_match(self):
        games = [Game(home_team="tor", away_team="TOR")]
        assert extract_teams(games) == {"tor", "TOR"}


class TestGroupByRegion:
    def test_international_for_missing_region(self):
        x = make_player("X", "ON")
        y = make_player("Y")

        grouped = group_by_region([x, y])

        assert grouped == {"International": [y], "ON": [x]}
        assert list(grouped) == ["International", "ON"]

    def test_empty_state_is_international(self):
        player = make_player("Z", "")
        assert list(group_by_region([player])) == ["International"]

    def test_stable_within_bucket(self):
        players = [make_player(n, "QC") for n in ("c", "a", "b")]
        assert [p.first_name for p in group_by_region(players)["QC"]] == ["c", "a", "b"]

    def test_regions_sorted(self):
        players = [make_player("1", s) for s in ("ON", "AB", "MN", "BC")]
        assert list(group_by_region(players)) == ["AB", "BC", "MN", "ON"]

    def test_sort_ignores_case_and_accents(self):
        players = [make_player("1", s) for s in ("Ontario", "Québec", "alberta", "Quebec City")]
        assert list(group_by_region(players)) == ["alberta", "Ontario", "Québec", "Quebec City"]

    def test_empty_input(self):
        assert group_by_region([]) == {}


class TestRegionSortKey:
    def test_accented_label_sorts_with_plain(self):
        assert region_sort_key("Québec")[0] == region_sort_key("Quebec")[0]

    def test_international_before_on(self):
        assert region_sort_key("International") < region_sort_key("ON")


@pytest.mark.asyncio
class TestFetchAllRosters:
    async def test_fetches_are_concurrent(self):
        """Each fetch waits for all others to start; sequential fetching would hang."""
        teams = ["A", "B", "C"]
        all_started = asyncio.Event()
        started: list[str] = []

        class BarrierProvider:
            async def fetch_roster(self, team, season, force_fresh=False):
                started.append(team)
                if len(started) == len(teams):
                    all_started.set()
                await all_started.wait()
                return [make_player(team.lower())]

        players = await asyncio.wait_for(
            fetch_all_rosters(BarrierProvider(), teams, SEASON), timeout=2
        )

        assert [p.first_name for p in players] == ["a", "b", "c"]

    async def test_order_follows_input_not_completion(self):
        provider = StubProvider(
            {"SLOW": [make_player("s1"), make_player("s2")], "FAST": [make_player("f1")]},
            delays={"SLOW": 0.05, "FAST": 0},
        )

        players = await fetch_all_rosters(provider, ["SLOW", "FAST"], SEASON)

        assert provider.finished == ["FAST", "SLOW"]
        assert [p.first_name for p in players] == ["s1", "s2", "f1"]

    async def test_one_failure_fails_all(self):
        provider = StubProvider({"A": [make_player("a")], "B": [], "C": [make_player("c")]})
        provider.failures["B"] = HttpStatusError("HTTP error 500", status_code=500)

        with pytest.raises(AggregationError, match="Failed to fetch team rosters") as exc_info:
            await fetch_all_rosters(provider, ["A", "B", "C"], SEASON)

        assert exc_info.value.team == "B"
        assert isinstance(exc_info.value.__cause__, HttpStatusError)
        # All fetches settled before the join failed
        assert sorted(provider.finished) == ["A", "B", "C"]

    async def test_first_failure_in_input_order_is_reported(self):
        provider = StubProvider({}, delays={"A": 0.02, "B": 0})
        provider.failures["A"] = HttpStatusError("a down", status_code=502)
        provider.failures["B"] = HttpStatusError("b down", status_code=503)

        with pytest.raises(AggregationError) as exc_info:
            await fetch_all_rosters(provider, ["A", "B"], SEASON)

        assert exc_info.value.team == "A"

    async def test_no_teams(self):
        assert await fetch_all_rosters(StubProvider({}), [], SEASON) == []

    async def test_with_real_provider(self, provider):
        players = await fetch_all_rosters(provider, ["MTL", "TOR"], SEASON)
        assert [p.name for p in players] == ["Nick Suzuki", "Auston Matthews"]
