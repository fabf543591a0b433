"""FastAPI application entry point."""

import argparse
import logging
import sys

import uvicorn
from fastapi import FastAPI

from moviedash import __version__
from moviedash.api.routes import icons, movies
from moviedash.config import Settings, settings
from moviedash.exceptions import ConfigError
from moviedash.services.cache import ResponseCache
from moviedash.services.radarr_client import RadarrClient
from moviedash.services.renderer import PageRenderer

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    client: RadarrClient | None = None,
    cache: ResponseCache | None = None,
    renderer: PageRenderer | None = None,
) -> FastAPI:
    """
    Build the dashboard application.

    Collaborators not supplied are constructed from the settings, so tests
    can pass fakes for any of them.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Moviedash",
        description="Upcoming and available movies from Radarr",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = app_settings
    app.state.radarr_client = client or RadarrClient(
        host=app_settings.radarr_host,
        port=app_settings.radarr_port,
        api_key=app_settings.radarr_key,
    )
    app.state.response_cache = cache or ResponseCache(ttl_seconds=app_settings.cache_ttl_seconds)
    app.state.page_renderer = renderer or PageRenderer(app_settings.templates_dir)

    # Include routers
    app.include_router(icons.router)
    app.include_router(movies.router)

    return app


def parse_args(argv: list[str] | None = None, defaults: Settings | None = None) -> Settings:
    """
    Apply command line flags on top of the environment settings.

    Raises:
        ConfigError: If no Radarr API key was given by flag or environment
    """
    defaults = defaults or settings
    parser = argparse.ArgumentParser(description="Serve a dashboard of Radarr movies.")
    parser.add_argument("--radarr-host", default=defaults.radarr_host, help="Radarr host")
    parser.add_argument("--radarr-port", type=int, default=defaults.radarr_port, help="Radarr port")
    parser.add_argument("--radarr-key", default=defaults.radarr_key, help="Radarr key")
    parser.add_argument("--serve-host", default=defaults.serve_host, help="Serve host")
    parser.add_argument("--serve-port", type=int, default=defaults.serve_port, help="Serve port")
    args = parser.parse_args(argv)

    if not args.radarr_key:
        raise ConfigError("radarr-key is required")

    return defaults.model_copy(update=vars(args))


def main() -> None:
    try:
        app_settings = parse_args()
    except ConfigError as e:
        print(e)
        sys.exit(1)

    logging.basicConfig(level=app_settings.log_level, format="%(levelname)s %(name)s %(message)s")

    app = create_app(app_settings)
    logger.info(f"Listening on {app_settings.serve_host}:{app_settings.serve_port}")
    uvicorn.run(app, host=app_settings.serve_host, port=app_settings.serve_port)


if __name__ == "__main__":
    main()
