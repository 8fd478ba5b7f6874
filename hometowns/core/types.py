"""Core data types.

Normalized dataclasses produced by the NHL provider and consumed by the
region aggregation pipeline. Provider-specific JSON never leaks past here.
"""

from dataclasses import dataclass

# Label used for players without a birth state/province
INTERNATIONAL = "International"


@dataclass(frozen=True)
class Game:
    """A scheduled game between two teams (by abbreviation)."""

    home_team: str
    away_team: str
    game_id: str | None = None
    start_time_utc: str | None = None


@dataclass(frozen=True)
class Player:
    """A rostered player with birth location and team branding."""

    first_name: str
    last_name: str
    birth_city: str
    birth_country: str
    team_abbrev: str
    birth_state_province: str | None = None
    team_logo: str | None = None
    number: int | None = None
    position: str | None = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def hometown(self) -> str:
        """City, state/province and country, skipping empty parts."""
        parts = [self.birth_city, self.birth_state_province, self.birth_country]
        return ", ".join(p for p in parts if p)

    @property
    def region(self) -> str:
        """Birth state/province, or INTERNATIONAL when missing."""
        return self.birth_state_province or INTERNATIONAL


# Region label -> players, ordered by region label
RegionGroups = dict[str, list[Player]]
