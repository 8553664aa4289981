"""Data models for AniList lookups and list tracking.

This module defines the immutable result records returned by the AniList
client, plus the small enums used to build queries.
- AnilistItem is the result of a title search or ID lookup.
- Update is one entry of a user's anime or manga list.
- SeasonGuess is the (season, year) pair used to refine title searches.

Design:
- Optional counters (progress, episode/volume/chapter totals) are ``int | None``
  so that "no data" stays distinguishable from zero.
- An empty AnilistItem (id 0) is the not-found value; callers check ``found``.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict


class InvalidMediaTypeError(ValueError):
    """Raised when a media kind other than ANIME or MANGA is requested."""

    def __init__(self, value: object) -> None:
        """Initialize the error with the rejected value."""
        super().__init__(
            f"invalid media type provided: {value!r}. "
            f"Accepts only {MediaType.ANIME.value} or {MediaType.MANGA.value}"
        )
        self.value = value


class MediaType(str, Enum):
    """Media kinds accepted by list queries."""

    ANIME = "ANIME"
    MANGA = "MANGA"

    @classmethod
    def parse(cls, value: "MediaType | str") -> "MediaType":
        """Validate *value* and return the matching MediaType.

        Args:
            value: A MediaType, or exactly ``"ANIME"`` or ``"MANGA"``.

        Returns:
            The corresponding MediaType.

        Raises:
            InvalidMediaTypeError: If value is anything else.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidMediaTypeError(value) from None

    @property
    def url_segment(self) -> str:
        """Path segment used in anilist.co detail URLs."""
        return self.value.lower()


class Season(str, Enum):
    """Airing seasons in calendar order."""

    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    FALL = "FALL"


class SeasonGuess(BaseModel):
    """A season label and year used as a search refinement."""

    model_config = ConfigDict(frozen=True)

    season: Season
    year: int


class AnilistItem(BaseModel):
    """A matched media entry.

    The default instance (id 0, empty url) means nothing matched.
    """

    model_config = ConfigDict(frozen=True)

    id: int = 0
    url: str = ""
    score: int | None = None  # averageScore, 0-100
    episodes: int | None = None
    title: str | None = None
    cover_url: str | None = None

    @property
    def found(self) -> bool:
        """Whether this item refers to an actual media entry."""
        return self.id != 0


class Update(BaseModel):
    """One user's list entry for a media item."""

    model_config = ConfigDict(frozen=True)

    user_name: str
    media_id: int
    title: str
    url: str
    cover_url: str | None = None
    status: str | None = None
    updated_time: int = 0  # unix seconds
    score: int | None = None
    progress: int | None = None
    progress_volumes: int | None = None
    total_episodes: int | None = None
    total_volumes: int | None = None
    total_chapters: int | None = None
    media_type: MediaType

    @property
    def updated_at(self) -> datetime | None:
        """Last update as an aware UTC datetime, or None if never set."""
        if not self.updated_time:
            return None
        return datetime.fromtimestamp(self.updated_time, tz=timezone.utc)
