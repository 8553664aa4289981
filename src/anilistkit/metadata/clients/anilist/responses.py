"""Typed view of AniList GraphQL response bodies.

The models mirror the shape of the fields requested in ``queries.py``. Field
aliases follow the upstream camelCase names; unknown fields are ignored and
every nullable value defaults to None so partial payloads still validate.
"""

from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MediaTitle(_Model):
    romaji: str | None = None
    english: str | None = None
    native: str | None = None


class CoverImage(_Model):
    extra_large: str | None = Field(None, alias="extraLarge")


class Media(_Model):
    """A ``Media`` object (anime or manga)."""

    id: int = 0
    type: str | None = None
    average_score: int | None = Field(None, alias="averageScore")
    title: MediaTitle = Field(default_factory=MediaTitle)
    cover_image: CoverImage = Field(default_factory=CoverImage, alias="coverImage")
    episodes: int | None = None
    chapters: int | None = None
    volumes: int | None = None

    @property
    def display_title(self) -> str:
        """English title, falling back to romaji, then native."""
        return (
            self.title.english or self.title.romaji or self.title.native or ""
        )


class MediaList(_Model):
    progress: int | None = None


class MediaListEntry(_Model):
    """One entry of a ``MediaListCollection`` list."""

    media_id: int = Field(0, alias="mediaId")
    score: int | None = None
    progress: int | None = None
    progress_volumes: int | None = Field(None, alias="progressVolumes")
    status: str | None = None
    updated_at: int | None = Field(None, alias="updatedAt")
    media: Media = Field(default_factory=Media)


class MediaListGroup(_Model):
    entries: list[MediaListEntry] | None = None


class MediaListCollection(_Model):
    lists: list[MediaListGroup] | None = None


class UserInfo(_Model):
    id: int = 0


class PageInfo(_Model):
    has_next_page: bool = Field(False, alias="hasNextPage")


class FollowedUser(_Model):
    name: str


class PageData(_Model):
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")
    users: list[FollowedUser] | None = None


class SavedMediaListEntry(_Model):
    id: int = 0
    progress: int | None = None
    status: str | None = None


class ResponseData(_Model):
    """The ``data`` member; exactly one field is set per query."""

    media: Media | None = Field(None, alias="Media")
    media_list: MediaList | None = Field(None, alias="MediaList")
    media_list_collection: MediaListCollection | None = Field(
        None, alias="MediaListCollection"
    )
    user: UserInfo | None = Field(None, alias="User")
    page: PageData | None = Field(None, alias="Page")
    saved_entry: SavedMediaListEntry | None = Field(None, alias="SaveMediaListEntry")


class GraphQLError(_Model):
    message: str = ""
    status: int | None = None


class GraphQLResponse(_Model):
    """Top-level GraphQL envelope: ``data`` plus optional ``errors``."""

    data: ResponseData | None = None
    errors: list[GraphQLError] | None = None
