"""Consumers: the aggregation pipeline and the load cycle that drives it."""

from .load_status import LoadState, LoadStatus
from .loader import HometownLoader
from .regions import extract_teams, fetch_all_rosters, group_by_region

__all__ = [
    "HometownLoader",
    "LoadState",
    "LoadStatus",
    "extract_teams",
    "fetch_all_rosters",
    "group_by_region",
]
