"""HTML page endpoints.

- GET / - Load today's players and render the page
- POST /retry - Retry after a failed load (plain load otherwise)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from hometowns.api.renderers import HtmlRenderer
from hometowns.consumers import HometownLoader, LoadState

from . import get_loader, get_renderer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    loader: HometownLoader = Depends(get_loader),
    renderer: HtmlRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Render players grouped by region (or the error page)."""
    await loader.load()
    return HTMLResponse(renderer.markup)


@router.post("/retry", response_class=HTMLResponse)
async def retry(
    loader: HometownLoader = Depends(get_loader),
    renderer: HtmlRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Retry button target.

    The button is only shown on the error page, but a stale form post after
    another request already recovered just runs a normal load.
    """
    if loader.status.state is LoadState.ERROR:
        await loader.retry()
    else:
        await loader.load()
    return HTMLResponse(renderer.markup)
