# WARNING: This settings loader is for LOCAL DEVELOPMENT ONLY.
# Never commit your .env file or share your access token.
# Ensure .env is listed in .gitignore!

"""Settings loader for the AniList client.

Loads the endpoint, detail-page base URL and optional OAuth access token from
environment variables or .env file.

Recognised .env keys:
- ANILIST_API_URL (optional, GraphQL endpoint)
- ANILIST_SITE_URL (optional, base of detail-page URLs)
- ANILIST_ACCESS_TOKEN (optional, required for progress updates)
- ANILIST_PER_PAGE (optional, follower page size)
- ANILIST_RAISE_ON_GRAPHQL_ERRORS (optional, see transport)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class MissingAccessTokenError(Exception):
    """Raised when an authenticated call is attempted without an access token."""

    def __init__(self, key: str = "ANILIST_ACCESS_TOKEN") -> None:
        """Initialize the error with the missing key name."""
        super().__init__(
            f"Missing required access token: {key}\n"
            "Create one at https://anilist.co/settings/developer and export it "
            "or pass it explicitly."
        )
        self.key = key


class Settings(BaseSettings):
    """Settings for the AniList GraphQL client."""

    ANILIST_API_URL: str = "https://graphql.anilist.co"
    ANILIST_SITE_URL: str = "https://anilist.co"
    ANILIST_ACCESS_TOKEN: str | None = None
    ANILIST_PER_PAGE: int = 20
    ANILIST_RAISE_ON_GRAPHQL_ERRORS: bool = False

    model_config = SettingsConfigDict(extra="allow", env_file=".env")

    def require_token(self) -> str:
        """Return the access token, raising MissingAccessTokenError if unset."""
        if not self.ANILIST_ACCESS_TOKEN:
            raise MissingAccessTokenError()
        return self.ANILIST_ACCESS_TOKEN
