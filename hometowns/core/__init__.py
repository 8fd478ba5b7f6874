"""Core types and interfaces."""

from hometowns.core.exceptions import (
    AggregationError,
    DataFormatError,
    FetchError,
    HometownsError,
    HttpStatusError,
    InvalidTransitionError,
    NetworkError,
)
from hometowns.core.interfaces import Renderer
from hometowns.core.types import INTERNATIONAL, Game, Player, RegionGroups

__all__ = [
    "AggregationError",
    "DataFormatError",
    "FetchError",
    "Game",
    "HometownsError",
    "HttpStatusError",
    "INTERNATIONAL",
    "InvalidTransitionError",
    "NetworkError",
    "Player",
    "RegionGroups",
    "Renderer",
]
