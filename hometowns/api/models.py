"""Pydantic models for API responses."""

from pydantic import BaseModel, ConfigDict

from hometowns.core import Player, RegionGroups


class PlayerResponse(BaseModel):
    """A player as shown in a region bucket."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    hometown: str
    team_abbrev: str
    team_logo: str | None = None
    number: int | None = None
    position: str | None = None

    @classmethod
    def from_player(cls, player: Player) -> "PlayerResponse":
        return cls.model_validate(player)


class RegionResponse(BaseModel):
    """One region and its players."""

    region: str
    count: int
    players: list[PlayerResponse]


class RegionsResponse(BaseModel):
    """Players grouped by region, regions in display order."""

    season: str
    region_count: int
    player_count: int
    regions: list[RegionResponse]

    @classmethod
    def from_groups(cls, season: str, groups: RegionGroups) -> "RegionsResponse":
        regions = [
            RegionResponse(
                region=region,
                count=len(players),
                players=[PlayerResponse.from_player(p) for p in players],
            )
            for region, players in groups.items()
        ]
        return cls(
            season=season,
            region_count=len(regions),
            player_count=sum(r.count for r in regions),
            regions=regions,
        )


class CacheStatsResponse(BaseModel):
    entries: int
    hits: int
    misses: int
    ttl_seconds: float
    ages: dict[str, float]


class StatusResponse(BaseModel):
    """Loader state plus cache statistics."""

    state: str
    in_progress: bool
    message: str
    error: str | None
    started_at: str | None
    completed_at: str | None
    team_count: int
    player_count: int
    region_count: int
    season: str
    cache: CacheStatsResponse
