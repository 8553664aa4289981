"""GraphQL documents sent to the AniList API."""

_MEDIA_FIELDS = """
    id
    type
    title {
      romaji
      english
      native
    }
    coverImage {
      extraLarge
    }
    episodes
    chapters
    volumes
    averageScore
"""

SEARCH_WITH_SEASON_QUERY = (
    """
query SearchMediaBySeason($title: String, $season: MediaSeason, $seasonYear: Int) {
  Media(type: ANIME, search: $title, season: $season, seasonYear: $seasonYear) {"""
    + _MEDIA_FIELDS
    + """  }
}
"""
)

SEARCH_QUERY = (
    """
query SearchMedia($title: String) {
  Media(type: ANIME, search: $title) {"""
    + _MEDIA_FIELDS
    + """  }
}
"""
)

DETAILS_QUERY = (
    """
query MediaById($id: Int) {
  Media(id: $id) {"""
    + _MEDIA_FIELDS
    + """  }
}
"""
)

USER_QUERY = """
query UserId($name: String) {
  User(name: $name) {
    id
  }
}
"""

FOLLOWING_QUERY = """
query FollowingPage($id: Int!, $page: Int, $perPage: Int) {
  Page(page: $page, perPage: $perPage) {
    pageInfo {
      hasNextPage
    }
    users: following(userId: $id) {
      name
    }
  }
}
"""

UPDATES_QUERY = """
query MediaListUpdates($userName: String, $type: MediaType) {
  MediaListCollection(userName: $userName, type: $type) {
    lists {
      entries {
        mediaId
        media {
          title {
            english
            romaji
          }
          coverImage {
            extraLarge
          }
          episodes
          chapters
          volumes
        }
        score(format: POINT_100)
        progress
        progressVolumes
        status
        updatedAt
      }
    }
  }
}
"""

PROGRESS_QUERY = """
query MediaListProgress($userName: String, $mediaId: Int) {
  MediaList(userName: $userName, mediaId: $mediaId) {
    progress
  }
}
"""

UPDATE_PROGRESS_MUTATION = """
mutation SaveProgress($mediaId: Int, $progress: Int, $status: MediaListStatus) {
  SaveMediaListEntry(mediaId: $mediaId, progress: $progress, status: $status) {
    id
    progress
    status
  }
}
"""
