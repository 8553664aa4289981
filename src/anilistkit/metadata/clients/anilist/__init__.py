"""AniList GraphQL client for anime and manga metadata.

This module provides access to the AniList GraphQL API for title lookups,
user lists and progress tracking.
"""

from anilistkit.metadata.clients.anilist.client import (
    AniListClient,
    AuthenticatedAniListClient,
)
from anilistkit.metadata.clients.anilist.transport import (
    GraphQLResponseError,
    send_request,
)

__all__ = [
    "AniListClient",
    "AuthenticatedAniListClient",
    "GraphQLResponseError",
    "send_request",
]
