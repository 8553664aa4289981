"""AniList GraphQL client implementation.

This module provides the AniList client used for title search, ID lookup,
follower enumeration, list updates and progress tracking. Every call goes
through :func:`send_request`; the authenticated client only differs by the
bearer token it passes along.
"""

from datetime import date
from typing import Any

import httpx

from anilistkit.metadata.base import MediaLookupClient
from anilistkit.metadata.clients.anilist import queries
from anilistkit.metadata.clients.anilist.responses import (
    GraphQLResponse,
    Media,
    MediaListEntry,
    PageData,
    ResponseData,
)
from anilistkit.metadata.clients.anilist.transport import send_request
from anilistkit.metadata.models import AnilistItem, MediaType, Update
from anilistkit.metadata.season import compute_season, season_offsets
from anilistkit.metadata.settings import Settings
from anilistkit.utils.debug import debug


def _media_type_of(media: Media) -> MediaType:
    """Media kind reported by the server; ANIME when absent or unknown."""
    if media.type == MediaType.MANGA.value:
        return MediaType.MANGA
    return MediaType.ANIME


class AniListClient(MediaLookupClient):
    """Client for the public (unauthenticated) AniList GraphQL API.

    Args:
        settings: Optional Settings; loaded from the environment otherwise.
        http_client: Optional httpx.Client reused for every request.
    """

    access_token: str | None = None

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize AniList client."""
        self.settings = settings or Settings()
        self.api_url = self.settings.ANILIST_API_URL
        self.site_url = self.settings.ANILIST_SITE_URL.rstrip("/")
        self.http_client = http_client

    # ------------------------------------------------------------------
    # Lookup interface
    # ------------------------------------------------------------------

    def search(
        self, title: str, first_episode_date: date | None = None
    ) -> AnilistItem:
        """Search for an anime by title and optional first-episode date."""
        return self.find_item(title, first_episode_date)

    def details(self, media_id: int) -> AnilistItem:
        """Fetch a media entry by AniList ID."""
        return self.get_item_by_id(media_id)

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def find_item(
        self,
        title: str,
        first_episode_date: date | None = None,
        offset: int = 0,
    ) -> AnilistItem:
        """Find the best-matching anime for *title*.

        Without a date, a plain title search is made. With a date, the
        season of that date (shifted by *offset*) is searched first; if
        nothing matches and the date falls in a season-start or season-end
        month, one more search is made in the previous or next season.

        Args:
            title: The anime title to search for.
            first_episode_date: Optional airing date of the first episode.
            offset: Season adjustment applied to the first attempt.

        Returns:
            The matched AnilistItem, or an empty AnilistItem if nothing
            matched.
        """
        if first_episode_date is None:
            media = self._query_media(queries.SEARCH_QUERY, {"title": title})
            return self._to_item(media)

        for season_offset in season_offsets(first_episode_date, offset):
            guess = compute_season(first_episode_date, season_offset)
            debug(
                f"Searching '{title}' in {guess.season.value} {guess.year} "
                f"(offset {season_offset})"
            )
            media = self._query_media(
                queries.SEARCH_WITH_SEASON_QUERY,
                {
                    "title": title,
                    "season": guess.season.value,
                    "seasonYear": guess.year,
                },
            )
            item = self._to_item(media)
            if item.found:
                return item

        return AnilistItem()

    def get_item_by_id(self, media_id: int) -> AnilistItem:
        """Fetch an AnilistItem directly by AniList media ID."""
        media = self._query_media(queries.DETAILS_QUERY, {"id": media_id})
        return self._to_item(media)

    def get_following_names(self, username: str) -> list[str]:
        """Return the names of every user *username* follows.

        The user ID is resolved first, then the following list is paged
        through until the server reports no further page. Any failed request
        aborts the whole call.
        """
        data = self._data(queries.USER_QUERY, {"name": username})
        user_id = data.user.id if data.user else 0
        if not user_id:
            debug(f"AniList user '{username}' not found")
            return []

        names: list[str] = []
        page = 1
        has_next_page = True
        while has_next_page:
            debug(f"Fetching following page {page} for user {user_id}")
            page_data = self._data(
                queries.FOLLOWING_QUERY,
                {
                    "id": user_id,
                    "page": page,
                    "perPage": self.settings.ANILIST_PER_PAGE,
                },
            ).page or PageData()
            names.extend(user.name for user in page_data.users or [])
            has_next_page = page_data.page_info.has_next_page
            page += 1

        return names

    def get_updates(
        self, username: str, media_type: MediaType | str
    ) -> list[Update]:
        """Return every list entry of *username* for the given media kind.

        Args:
            username: AniList user name.
            media_type: ``MediaType.ANIME`` / ``"ANIME"`` or
                ``MediaType.MANGA`` / ``"MANGA"``.

        Returns:
            One Update per list entry, in server order.

        Raises:
            InvalidMediaTypeError: For any other media kind, before any
                request is made.
        """
        kind = MediaType.parse(media_type)
        data = self._data(
            queries.UPDATES_QUERY, {"userName": username, "type": kind.value}
        )
        collection = data.media_list_collection
        if collection is None:
            return []

        return [
            self._to_update(username, kind, entry)
            for media_list in collection.lists or []
            for entry in media_list.entries or []
        ]

    def get_progress(self, username: str, media_id: int) -> int:
        """Return *username*'s progress on *media_id*, or 0 when absent."""
        data = self._data(
            queries.PROGRESS_QUERY, {"userName": username, "mediaId": media_id}
        )
        if data.media_list is None:
            return 0
        return data.media_list.progress or 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _request(self, query: str, variables: dict[str, Any]) -> GraphQLResponse:
        return send_request(
            query,
            variables,
            self.access_token,
            api_url=self.api_url,
            client=self.http_client,
            raise_on_graphql_errors=self.settings.ANILIST_RAISE_ON_GRAPHQL_ERRORS,
        )

    def _data(self, query: str, variables: dict[str, Any]) -> ResponseData:
        return self._request(query, variables).data or ResponseData()

    def _query_media(self, query: str, variables: dict[str, Any]) -> Media | None:
        return self._data(query, variables).media

    def _media_url(self, media_type: MediaType, media_id: int) -> str:
        return f"{self.site_url}/{media_type.url_segment}/{media_id}"

    def _to_item(self, media: Media | None) -> AnilistItem:
        """Map a Media object to an AnilistItem (empty when no match)."""
        if media is None or not media.id:
            return AnilistItem()
        return AnilistItem(
            id=media.id,
            url=self._media_url(_media_type_of(media), media.id),
            score=media.average_score,
            episodes=media.episodes,
            title=media.display_title or None,
            cover_url=media.cover_image.extra_large,
        )

    def _to_update(
        self, username: str, media_type: MediaType, entry: MediaListEntry
    ) -> Update:
        """Flatten a list entry; counters depend on the media kind."""
        media = entry.media
        fields: dict[str, Any] = {
            "user_name": username,
            "media_id": entry.media_id,
            "title": media.title.english or media.title.romaji or "",
            "url": self._media_url(media_type, entry.media_id),
            "cover_url": media.cover_image.extra_large,
            "status": entry.status,
            "updated_time": entry.updated_at or 0,
            "score": entry.score,
            "progress": entry.progress,
            "media_type": media_type,
        }
        if media_type is MediaType.ANIME:
            fields["total_episodes"] = media.episodes
        else:
            fields["progress_volumes"] = entry.progress_volumes
            fields["total_volumes"] = media.volumes
            fields["total_chapters"] = media.chapters
        return Update(**fields)


class AuthenticatedAniListClient(AniListClient):
    """AniList client that sends an OAuth bearer token with every request.

    Args:
        access_token: OAuth access token; falls back to
            ``Settings.ANILIST_ACCESS_TOKEN``.
        settings: Optional Settings.
        http_client: Optional httpx.Client reused for every request.

    Raises:
        MissingAccessTokenError: If no token is given or configured.
    """

    def __init__(
        self,
        access_token: str | None = None,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client and resolve its access token."""
        super().__init__(settings=settings, http_client=http_client)
        self.access_token = access_token or self.settings.require_token()

    def update_progress(self, media_id: int, progress: int, status: str) -> None:
        """Save *progress* and *status* on the authenticated user's list entry.

        Args:
            media_id: AniList media ID.
            progress: Episodes watched or chapters read.
            status: A MediaListStatus value such as ``"CURRENT"`` or
                ``"COMPLETED"``; passed through unvalidated.

        Raises:
            httpx.HTTPStatusError: If the server rejects the mutation.
        """
        self._request(
            queries.UPDATE_PROGRESS_MUTATION,
            {"mediaId": media_id, "progress": progress, "status": status},
        )
