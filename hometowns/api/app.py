"""FastAPI application factory.

Wires one cache, client, provider, renderer and loader per app instance and
keeps them on app.state for the routes.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from hometowns import __version__
from hometowns.api.renderers import HtmlRenderer
from hometowns.api.routes import page, regions
from hometowns.config import Settings
from hometowns.consumers import HometownLoader
from hometowns.providers.nhl import NHLClient, NHLProvider
from hometowns.utilities.cache import FetchCache

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Create the application.

    Args:
        settings: Runtime settings (default: from environment)
        http_client: Optional shared httpx client (left open on shutdown)
    """
    settings = settings or Settings.from_env()
    season = settings.resolved_season

    cache = FetchCache(ttl_seconds=settings.cache_ttl)
    client = NHLClient(
        cache,
        relay_url=settings.relay_url,
        base_url=settings.api_base,
        timeout=settings.timeout,
        http_client=http_client,
    )
    renderer = HtmlRenderer(retry_action="/retry")
    loader = HometownLoader(NHLProvider(client), renderer, season)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("[APP] Serving season %s via %s", season, settings.relay_url or "direct")
        yield
        await client.aclose()

    app = FastAPI(title="Hometowns", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.cache = cache
    app.state.client = client
    app.state.renderer = renderer
    app.state.loader = loader

    app.include_router(page.router)
    app.include_router(regions.router, prefix="/api")
    return app
