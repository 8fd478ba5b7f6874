"""API route modules."""

from fastapi import Request

from hometowns.api.renderers import HtmlRenderer
from hometowns.consumers import HometownLoader
from hometowns.utilities.cache import FetchCache


def get_loader(request: Request) -> HometownLoader:
    return request.app.state.loader


def get_renderer(request: Request) -> HtmlRenderer:
    return request.app.state.renderer


def get_cache(request: Request) -> FetchCache:
    return request.app.state.cache
