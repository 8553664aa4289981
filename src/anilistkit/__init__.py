# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""anilistkit - AniList GraphQL client for anime and manga tracking."""

from anilistkit.__about__ import __version__
from anilistkit.metadata.clients.anilist import (
    AniListClient,
    AuthenticatedAniListClient,
)
from anilistkit.metadata.models import AnilistItem, MediaType, Update

__all__ = [
    "__version__",
    "AniListClient",
    "AuthenticatedAniListClient",
    "AnilistItem",
    "MediaType",
    "Update",
]
