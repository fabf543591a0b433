"""Display values derived from a movie for the dashboard page."""

from dataclasses import dataclass
from datetime import datetime
from urllib.parse import urlencode

from moviedash.schemas.movie import Movie

IMAGE_PROXY_URL = "https://images.weserv.nl/"
POSTER_PLACEHOLDER_URL = "https://critics.io/img/movies/poster-placeholder.png"
POSTER_HEIGHT = 400
POSTER_QUALITY = 100

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class MovieCard:
    """A movie together with everything the template prints for it."""

    movie: Movie
    poster_url: str
    display_date: str
    imdb_rating: str
    rotten_tomatoes_rating: str
    trending: str

    @property
    def title(self) -> str:
        return self.movie.title


def poster_url(movie: Movie) -> str:
    """
    Resized WebP poster for a movie, served through the weserv image proxy.

    Uses the first image whose cover type is "poster". Falls back to a fixed
    placeholder when Radarr has no poster.
    """
    for image in movie.images:
        if image.cover_type == "poster":
            query = urlencode(
                {
                    "url": image.remote_url,
                    "output": "webp",
                    "h": POSTER_HEIGHT,
                    "q": POSTER_QUALITY,
                }
            )
            return f"{IMAGE_PROXY_URL}?{query}"
    return POSTER_PLACEHOLDER_URL


def format_release_date(value: datetime) -> str:
    """Format as "5 Mar 2024": unpadded day, English month abbreviation."""
    return f"{value.day} {MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


def display_date(movie: Movie) -> str:
    # Digital release wins over physical release
    if movie.digital_release_epoch > 0:
        return format_release_date(movie.digital_release)
    if movie.physical_release_epoch > 0:
        return format_release_date(movie.physical_release)
    return "Unknown"


def imdb_rating(movie: Movie) -> str:
    """IMDB rating on a 0-100 scale, e.g. 7.4 -> "74" (round half to even)."""
    return f"{movie.ratings.imdb.value * 10:.0f}"


def rotten_tomatoes_rating(movie: Movie) -> str:
    return str(movie.ratings.rotten_tomatoes.value)


def trending(movie: Movie) -> str:
    """Popularity truncated to an integer with thousands separators."""
    return f"{int(movie.popularity):,d}"


def build_card(movie: Movie) -> MovieCard:
    return MovieCard(
        movie=movie,
        poster_url=poster_url(movie),
        display_date=display_date(movie),
        imdb_rating=imdb_rating(movie),
        rotten_tomatoes_rating=rotten_tomatoes_rating(movie),
        trending=trending(movie),
    )
