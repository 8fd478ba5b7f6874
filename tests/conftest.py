"""Shared test fixtures: fake clock, canned NHL payloads, mock transport."""

import json
from collections.abc import Callable

import httpx
import pytest

from hometowns.core import Renderer
from hometowns.providers.nhl import NHLClient, NHLProvider
from hometowns.utilities.cache import FetchCache

API_BASE = "https://api.test/v1"
SEASON = "20242025"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingRenderer(Renderer):
    """Renderer that records every call in order."""

    def __init__(self):
        self.calls: list[tuple] = []

    def show_loading(self) -> None:
        self.calls.append(("loading",))

    def show_regions(self, regions) -> None:
        self.calls.append(("regions", regions))

    def show_error(self, message: str) -> None:
        self.calls.append(("error", message))


def player_entry(first, last, city, country, state=None, team="TOR", number=None, position="C"):
    entry = {
        "firstName": {"default": first},
        "lastName": {"default": last},
        "birthCity": {"default": city},
        "birthCountry": country,
        "teamAbbrev": team,
        "teamLogo": f"https://logos.test/{team}.svg",
        "number": number,
        "position": position,
    }
    if state is not None:
        entry["birthStateProvince"] = {"default": state}
    return entry


def schedule_payload(*matchups: tuple[str, str]) -> dict:
    """Schedule body with one game per (home, away) pair on the first day."""
    games = [
        {"id": 2024020000 + i, "homeTeam": {"abbrev": home}, "awayTeam": {"abbrev": away}}
        for i, (home, away) in enumerate(matchups)
    ]
    return {"gameWeek": [{"date": "2024-10-15", "games": games}, {"games": []}]}


def roster_payload(forwards=(), defensemen=(), goalies=()) -> dict:
    return {
        "forwards": list(forwards),
        "defensemen": list(defensemen),
        "goalies": list(goalies),
    }


class FakeNHLApi:
    """Routes mock transport requests to canned payloads and counts them.

    Requests are made directly against API_BASE (no relay) unless a test
    builds its own client.
    """

    def __init__(self, schedule: dict | None = None, rosters: dict[str, dict] | None = None):
        self.schedule = schedule if schedule is not None else schedule_payload()
        self.rosters = rosters or {}
        self.failures: dict[str, int] = {}
        self.requests: list[str] = []

    def count(self, fragment: str) -> int:
        return sum(1 for url in self.requests if fragment in url)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        path = request.url.path

        for fragment, status_code in self.failures.items():
            if fragment in path:
                return httpx.Response(status_code, json={"error": "boom"})

        if path.endswith("/schedule/now"):
            return httpx.Response(200, content=json.dumps(self.schedule))
        if "/roster/" in path:
            team = path.split("/roster/")[1].split("/")[0]
            if team in self.rosters:
                return httpx.Response(200, json=self.rosters[team])
        return httpx.Response(404, json={"error": "not found"})


def make_client(
    handler: Callable[[httpx.Request], httpx.Response],
    cache: FetchCache | None = None,
    relay_url: str = "",
) -> NHLClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return NHLClient(
        cache or FetchCache(),
        relay_url=relay_url,
        base_url=API_BASE,
        http_client=http_client,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_api() -> FakeNHLApi:
    return FakeNHLApi(
        schedule=schedule_payload(("TOR", "MTL")),
        rosters={
            "TOR": roster_payload(
                forwards=[player_entry("Auston", "Matthews", "San Ramon", "USA", "CA", "TOR", 34)]
            ),
            "MTL": roster_payload(
                forwards=[player_entry("Nick", "Suzuki", "London", "CAN", "ON", "MTL", 14)]
            ),
        },
    )


@pytest.fixture
def provider(fake_api, clock) -> NHLProvider:
    return NHLProvider(make_client(fake_api, cache=FetchCache(clock=clock)))
