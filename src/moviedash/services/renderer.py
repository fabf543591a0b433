"""HTML rendering of the dashboard page."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from fastapi.templating import Jinja2Templates

from moviedash.exceptions import RenderError
from moviedash.schemas.movie import Movie
from moviedash.services.presentation import MovieCard, build_card

PAGE_TEMPLATE = "movies.html"


@dataclass
class PageData:
    """Everything the page template needs for one request."""

    movies: list[MovieCard]
    shows: str


def shows_host(host: str) -> str:
    """Host of the companion TV dashboard: first "movies" becomes "shows"."""
    return host.replace("movies", "shows", 1)


class PageRenderer:
    """Renders sorted movies into the dashboard HTML."""

    def __init__(self, templates_dir: Path) -> None:
        self.templates = Jinja2Templates(directory=str(templates_dir))

    def build_page(self, movies: Sequence[Movie], host: str) -> PageData:
        return PageData(movies=[build_card(movie) for movie in movies], shows=shows_host(host))

    def render(self, movies: Sequence[Movie], host: str) -> str:
        """
        Render the dashboard page.

        Args:
            movies: Movies in display order
            host: Host header of the incoming request

        Returns:
            Complete HTML document

        Raises:
            RenderError: If deriving display values or executing the template fails
        """
        try:
            page = self.build_page(movies, host)
            template = self.templates.get_template(PAGE_TEMPLATE)
            return template.render(movies=page.movies, shows=page.shows)
        except Exception as e:
            raise RenderError(f"Failed to render {PAGE_TEMPLATE}: {e}") from e
