"""Pydantic schemas for movies returned by Radarr's ``/api/v3/movie`` endpoint.

Every field carries a zero default so that partial payloads decode cleanly;
unknown keys are ignored. Explicit JSON ``null`` values are treated the same
as missing keys. Values are never coerced: a string where a number or
boolean is expected is an error, and timestamps must be full RFC 3339
strings.
"""

import math
import re
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

from moviedash.exceptions import DecodeError


class RadarrModel(BaseModel):
    """Base schema: camelCase keys, immutable, nulls fall back to defaults."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        strict=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$", re.IGNORECASE
)


def require_rfc3339(value: Any) -> Any:
    """Accept datetimes, or strings carrying a full date, time and offset."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and RFC3339_PATTERN.match(value):
        return value
    raise ValueError(f"expected an RFC 3339 timestamp, got {value!r}")


Timestamp = Annotated[datetime, BeforeValidator(require_rfc3339)]


class Language(RadarrModel):
    id: int = 0
    name: str = ""


class AlternateTitle(RadarrModel):
    source_type: str = ""
    movie_metadata_id: int = 0
    title: str = ""
    id: int = 0


class MovieImage(RadarrModel):
    """Artwork reference; ``cover_type`` is e.g. "poster" or "fanart"."""

    cover_type: str = ""
    url: str = ""
    remote_url: str = ""


class Rating(RadarrModel):
    votes: int = 0
    value: float = 0.0
    type: str = ""


class IntRating(RadarrModel):
    """Rating whose value is a whole number, e.g. a Rotten Tomatoes percentage."""

    votes: int = 0
    value: int = 0
    type: str = ""


class Ratings(RadarrModel):
    imdb: Rating = Field(default_factory=Rating)
    tmdb: Rating = Field(default_factory=Rating)
    metacritic: IntRating = Field(default_factory=IntRating)
    rotten_tomatoes: IntRating = Field(default_factory=IntRating)


class QualityInfo(RadarrModel):
    id: int = 0
    name: str = ""
    source: str = ""
    resolution: int = 0
    modifier: str = ""


class Revision(RadarrModel):
    version: int = 0
    real: int = 0
    is_repack: bool = False


class Quality(RadarrModel):
    quality: QualityInfo = Field(default_factory=QualityInfo)
    revision: Revision = Field(default_factory=Revision)


class MediaInfo(RadarrModel):
    audio_bitrate: int = 0
    audio_channels: float = 0.0
    audio_codec: str = ""
    audio_languages: str = ""
    audio_stream_count: int = 0
    video_bit_depth: int = 0
    video_bitrate: int = 0
    video_codec: str = ""
    video_fps: float = 0.0
    video_dynamic_range: str = ""
    video_dynamic_range_type: str = ""
    resolution: str = ""
    run_time: str = ""
    scan_type: str = ""
    subtitles: str = ""


class MovieFile(RadarrModel):
    """The file Radarr has on disk for a movie, if any."""

    movie_id: int = 0
    relative_path: str = ""
    path: str = ""
    size: int = 0
    date_added: Timestamp | None = None
    release_group: str = ""
    edition: str = ""
    languages: list[Language] = Field(default_factory=list)
    quality: Quality = Field(default_factory=Quality)
    custom_format_score: int = 0
    indexer_flags: int = 0
    media_info: MediaInfo = Field(default_factory=MediaInfo)
    quality_cutoff_not_met: bool = False
    id: int = 0
    scene_name: str = ""
    original_file_path: str = ""


class MovieCollection(RadarrModel):
    title: str = ""
    tmdb_id: int = 0


class MovieStatistics(RadarrModel):
    movie_file_count: int = 0
    size_on_disk: int = 0
    release_groups: list[str] = Field(default_factory=list)


class Movie(RadarrModel):
    """A single movie as tracked by Radarr."""

    id: int = 0
    title: str = ""
    original_title: str = ""
    original_language: Language = Field(default_factory=Language)
    alternate_titles: list[AlternateTitle] = Field(default_factory=list)
    secondary_year: int = 0
    secondary_year_source_id: int = 0
    sort_title: str = ""
    size_on_disk: int = 0
    status: str = ""
    overview: str = ""
    in_cinemas: Timestamp | None = None
    physical_release: Timestamp | None = None
    digital_release: Timestamp | None = None
    images: list[MovieImage] = Field(default_factory=list)
    website: str = ""
    year: int = 0
    you_tube_trailer_id: str = ""
    studio: str = ""
    path: str = ""
    quality_profile_id: int = 0
    has_file: bool = False
    movie_file_id: int = 0
    monitored: bool = False
    minimum_availability: str = ""
    is_available: bool = False
    folder_name: str = ""
    runtime: int = 0
    clean_title: str = ""
    imdb_id: str = ""
    tmdb_id: int = 0
    title_slug: str = ""
    root_folder_path: str = ""
    certification: str = ""
    genres: list[str] = Field(default_factory=list)
    tags: list[Any] = Field(default_factory=list)
    added: Timestamp | None = None
    ratings: Ratings = Field(default_factory=Ratings)
    movie_file: MovieFile = Field(default_factory=MovieFile)
    collection: MovieCollection = Field(default_factory=MovieCollection)
    popularity: float = 0.0
    statistics: MovieStatistics = Field(default_factory=MovieStatistics)

    @property
    def digital_release_epoch(self) -> int:
        return epoch_seconds(self.digital_release)

    @property
    def physical_release_epoch(self) -> int:
        return epoch_seconds(self.physical_release)


def epoch_seconds(value: datetime | None) -> int:
    """Unix seconds for a release timestamp; an absent release counts as 0."""
    if value is None:
        return 0
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return math.floor(value.timestamp())


_movie_list = TypeAdapter(list[Movie])


def decode_movies(raw: bytes) -> list[Movie]:
    """
    Decode a raw Radarr response body into movies.

    Args:
        raw: JSON array as returned by ``/api/v3/movie``

    Returns:
        One Movie per array element, in upstream order

    Raises:
        DecodeError: If the body is not valid JSON or not an array of movie objects
    """
    try:
        return _movie_list.validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"Invalid Radarr movie payload: {e}") from e
