"""Ordering of the movie list shown on the dashboard."""

from collections.abc import Iterable

from moviedash.schemas.movie import Movie


def movie_sort_key(movie: Movie) -> tuple[int, int, bool, str]:
    """
    Composite sort key, most significant first.

    - Newest digital release first (no release counts as epoch 0, so it sinks)
    - Newest physical release first, same rule
    - Movies with a file before movies without
    - Sort title, ascending
    """
    return (
        -movie.digital_release_epoch,
        -movie.physical_release_epoch,
        not movie.has_file,
        movie.sort_title,
    )


def sort_movies(movies: Iterable[Movie]) -> list[Movie]:
    """Return a new list of movies in dashboard order."""
    return sorted(movies, key=movie_sort_key)
