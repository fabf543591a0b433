"""Shared test fixtures."""

import json
from typing import Any

import pytest
from fastapi import FastAPI

from moviedash.config import Settings
from moviedash.exceptions import UpstreamError
from moviedash.main import create_app
from moviedash.services.cache import ResponseCache


class FakeClock:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRadarrClient:
    """Stand-in for RadarrClient that returns a canned body and counts calls."""

    def __init__(self, body: bytes = b"[]", error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.calls = 0

    async def fetch_movies(self) -> bytes:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.body


def movie_payload(**overrides: Any) -> dict[str, Any]:
    """A trimmed-down Radarr movie object."""
    payload: dict[str, Any] = {
        "id": 1,
        "title": "Dune: Part Two",
        "sortTitle": "dune part two",
        "hasFile": True,
        "digitalRelease": "2024-04-16T00:00:00Z",
        "physicalRelease": "2024-05-14T00:00:00Z",
        "imdbId": "tt15239678",
        "tmdbId": 693134,
        "popularity": 12345.9,
        "images": [
            {
                "coverType": "poster",
                "url": "/MediaCover/1/poster.jpg",
                "remoteUrl": "https://image.tmdb.org/t/p/original/poster.jpg",
            }
        ],
        "ratings": {
            "imdb": {"votes": 500000, "value": 8.5, "type": "user"},
            "tmdb": {"votes": 5000, "value": 8.2, "type": "user"},
            "rottenTomatoes": {"votes": 0, "value": 92, "type": "user"},
        },
    }
    payload.update(overrides)
    return payload


def encode(*movies: dict[str, Any]) -> bytes:
    return json.dumps(list(movies)).encode()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_client() -> FakeRadarrClient:
    return FakeRadarrClient(body=encode(movie_payload()))


@pytest.fixture
def test_settings() -> Settings:
    return Settings(radarr_key="test-key")


@pytest.fixture
def test_app(test_settings: Settings, fake_client: FakeRadarrClient, clock: FakeClock) -> FastAPI:
    """Dashboard app wired to a fake Radarr client and a fake-clock cache."""
    return create_app(
        test_settings,
        client=fake_client,  # type: ignore[arg-type]
        cache=ResponseCache(ttl_seconds=3600, clock=clock),
    )


@pytest.fixture
def failing_client() -> FakeRadarrClient:
    return FakeRadarrClient(error=UpstreamError("Radarr request failed: Connection refused"))
