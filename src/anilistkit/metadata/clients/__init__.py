"""Client implementations for metadata providers."""

from anilistkit.metadata.clients.anilist import (
    AniListClient,
    AuthenticatedAniListClient,
)

__all__ = ["AniListClient", "AuthenticatedAniListClient"]
