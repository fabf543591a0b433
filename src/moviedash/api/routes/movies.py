"""Dashboard page endpoint."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from moviedash.api.deps import get_page_renderer, get_radarr_client, get_response_cache
from moviedash.exceptions import MoviedashError
from moviedash.services.cache import ResponseCache
from moviedash.services.movie_feed import load_movies
from moviedash.services.radarr_client import RadarrClient
from moviedash.services.renderer import PageRenderer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def movies_page(
    request: Request,
    client: RadarrClient = Depends(get_radarr_client),
    cache: ResponseCache = Depends(get_response_cache),
    renderer: PageRenderer = Depends(get_page_renderer),
) -> Response:
    """
    Render Radarr's movies, newest releases first.

    Any failure aborts the request with an empty 500 response; the cause
    is only written to the log.
    """
    try:
        movies = await load_movies(client, cache)
        html = renderer.render(movies, request.headers.get("host", ""))
    except MoviedashError as e:
        logger.error(f"Movie page failed: {e}")
        return Response(status_code=500)

    return HTMLResponse(html)
