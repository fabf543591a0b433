"""FastAPI dependencies exposing the collaborators stored on ``app.state``."""

from fastapi import Request

from moviedash.config import Settings
from moviedash.services.cache import ResponseCache
from moviedash.services.radarr_client import RadarrClient
from moviedash.services.renderer import PageRenderer


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_radarr_client(request: Request) -> RadarrClient:
    return request.app.state.radarr_client


def get_response_cache(request: Request) -> ResponseCache:
    return request.app.state.response_cache


def get_page_renderer(request: Request) -> PageRenderer:
    return request.app.state.page_renderer
