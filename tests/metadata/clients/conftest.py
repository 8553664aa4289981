"""Shared fixtures for AniList client tests."""

import pytest

from anilistkit.metadata.clients.anilist import AniListClient
from anilistkit.metadata.settings import Settings

API_URL = "https://graphql.anilist.co"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer environment and .env file."""
    return Settings(
        _env_file=None,
        ANILIST_API_URL=API_URL,
        ANILIST_SITE_URL="https://anilist.co",
        ANILIST_ACCESS_TOKEN=None,
        ANILIST_PER_PAGE=20,
        ANILIST_RAISE_ON_GRAPHQL_ERRORS=False,
    )


@pytest.fixture
def client(settings: Settings) -> AniListClient:
    return AniListClient(settings=settings)
