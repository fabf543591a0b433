"""Cache-backed loading of the sorted Radarr movie list."""

import logging

from moviedash.exceptions import CacheTypeError
from moviedash.schemas.movie import Movie, decode_movies
from moviedash.services.cache import ResponseCache
from moviedash.services.radarr_client import RadarrClient
from moviedash.services.ranking import sort_movies

logger = logging.getLogger(__name__)


async def load_movies(client: RadarrClient, cache: ResponseCache) -> list[Movie]:
    """
    Return Radarr's movies in dashboard order.

    Serves from the cached response body when it is still fresh; otherwise
    fetches from Radarr and caches the body once it has decoded successfully.

    Raises:
        UpstreamError: Radarr could not be fetched
        DecodeError: The body (fresh or cached) is not a movie list
        CacheTypeError: The cache held something other than bytes
    """
    cached = cache.get()
    if cached is None:
        logger.info("Movie cache miss, fetching from Radarr")
        raw = await client.fetch_movies()
        movies = decode_movies(raw)
        cache.set(raw)
    elif isinstance(cached, bytes):
        movies = decode_movies(cached)
    else:
        raise CacheTypeError(f"Cached movie list is {type(cached).__name__}, expected bytes")

    logger.info(f"Loaded {len(movies)} movies")
    return sort_movies(movies)
