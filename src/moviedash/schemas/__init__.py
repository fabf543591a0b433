"""Pydantic schemas for the Radarr movie payload."""

from moviedash.schemas.movie import (
    IntRating,
    Movie,
    MovieCollection,
    MovieFile,
    MovieImage,
    Rating,
    Ratings,
    decode_movies,
)

__all__ = [
    "IntRating",
    "Movie",
    "MovieCollection",
    "MovieFile",
    "MovieImage",
    "Rating",
    "Ratings",
    "decode_movies",
]
