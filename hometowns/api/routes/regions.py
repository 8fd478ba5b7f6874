"""Region data API endpoints.

Provides JSON access to the grouped players:
- GET /regions - Load (cache permitting) and return players by region
- POST /regions/refresh - Reload bypassing the cache
- POST /regions/retry - Retry after a failed load
- GET /status - Loader state and cache statistics
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from hometowns.api.models import RegionsResponse, StatusResponse
from hometowns.consumers import HometownLoader, LoadState, LoadStatus
from hometowns.core import InvalidTransitionError
from hometowns.utilities.cache import FetchCache

from . import get_cache, get_loader

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(loader: HometownLoader, result: LoadStatus) -> RegionsResponse:
    if result.state is LoadState.ERROR:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error)
    return RegionsResponse.from_groups(loader.season, result.regions)


@router.get("/regions", response_model=RegionsResponse)
async def get_regions(loader: HometownLoader = Depends(get_loader)) -> RegionsResponse:
    """Get today's players grouped by birth state/province."""
    result = await loader.load()
    return _to_response(loader, result)


@router.post("/regions/refresh", response_model=RegionsResponse)
async def refresh_regions(loader: HometownLoader = Depends(get_loader)) -> RegionsResponse:
    """Reload schedule and rosters from upstream, ignoring cached responses."""
    result = await loader.load(force_fresh=True)
    return _to_response(loader, result)


@router.post("/regions/retry", response_model=RegionsResponse)
async def retry_regions(loader: HometownLoader = Depends(get_loader)) -> RegionsResponse:
    """Retry after a failed load.

    Returns 409 if the last load did not fail.
    """
    try:
        result = await loader.retry()
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return _to_response(loader, result)


@router.get("/status", response_model=StatusResponse)
async def get_status(
    loader: HometownLoader = Depends(get_loader),
    cache: FetchCache = Depends(get_cache),
) -> dict:
    """Get loader state and cache statistics."""
    return {**loader.status.to_dict(), "season": loader.season, "cache": cache.stats()}
