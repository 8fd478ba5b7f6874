"""Load cycle status tracking.

One LoadStatus per HometownLoader; the loader is the only writer.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from hometowns.core import RegionGroups


class LoadState(str, Enum):
    """Loader states: IDLE -> LOADING -> SUCCESS | ERROR."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class LoadStatus:
    """Current load cycle status."""

    state: LoadState = LoadState.IDLE
    message: str = ""
    error: str | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    team_count: int = 0
    player_count: int = 0
    regions: RegionGroups = field(default_factory=dict)

    @property
    def in_progress(self) -> bool:
        return self.state is LoadState.LOADING

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict (without the player data)."""
        return {
            "state": self.state.value,
            "in_progress": self.in_progress,
            "message": self.message,
            "error": self.error,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "team_count": self.team_count,
            "player_count": self.player_count,
            "region_count": len(self.regions),
        }

    def start(self) -> None:
        """Enter LOADING, discarding the previous outcome."""
        self.state = LoadState.LOADING
        self.message = "Loading today's players..."
        self.error = None
        self.started_at = datetime.now(UTC)
        self.completed_at = None
        self.team_count = 0
        self.player_count = 0
        self.regions = {}

    def succeed(self, regions: RegionGroups, team_count: int) -> None:
        self.state = LoadState.SUCCESS
        self.regions = regions
        self.team_count = team_count
        self.player_count = sum(len(players) for players in regions.values())
        self.message = (
            f"{self.player_count} players from {team_count} teams in {len(regions)} regions"
        )
        self.completed_at = datetime.now(UTC)

    def fail(self, error: str) -> None:
        self.state = LoadState.ERROR
        self.error = error
        self.message = f"Error: {error}"
        self.regions = {}
        self.completed_at = datetime.now(UTC)
