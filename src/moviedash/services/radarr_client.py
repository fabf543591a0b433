"""Radarr API client for fetching the movie library."""

import logging

import httpx

from moviedash.config import settings
from moviedash.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class RadarrClient:
    """Client for a single Radarr instance."""

    MOVIES_PATH = "/api/v3/movie"

    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        api_key: str | None = None,
    ) -> None:
        """
        Initialize Radarr client.

        Args:
            host: Radarr host name (uses settings if not provided)
            port: Radarr port (uses settings if not provided)
            api_key: Radarr API key (uses settings if not provided)
        """
        self.host = host or settings.radarr_host
        self.port = port or settings.radarr_port
        self.api_key = api_key or settings.radarr_key

    @property
    def movies_url(self) -> str:
        return f"http://{self.host}:{self.port}{self.MOVIES_PATH}"

    async def fetch_movies(self) -> bytes:
        """
        Fetch the raw movie list.

        Returns:
            Response body exactly as sent by Radarr

        Raises:
            UpstreamError: On network failure, non-2xx status or an unreadable body
        """
        logger.info(f"Fetching movies from {self.movies_url}")
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.movies_url, params={"apikey": self.api_key})
                response.raise_for_status()
                return response.content
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"Radarr returned HTTP {e.response.status_code} for {self.movies_url}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Radarr request to {self.movies_url} failed: {e}") from e
