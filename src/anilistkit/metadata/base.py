"""Base abstraction for media lookup clients.

Defines the lookup interface (title search and ID lookup) implemented by the
AniList client. Used for dependency injection and testability, e.g. the CLI
only relies on this contract for its ``search`` and ``lookup`` commands.
"""

from abc import ABC, abstractmethod
from datetime import date

from anilistkit.metadata.models import AnilistItem


class MediaLookupClient(ABC):
    """Abstract base class for media lookup clients."""

    @abstractmethod
    def search(
        self, title: str, first_episode_date: date | None = None
    ) -> AnilistItem:
        """Search for the best-matching media by title and optional air date.

        Args:
            title: The title to search for.
            first_episode_date: Optional approximate airing date of the first
                episode, used to narrow results.

        Returns:
            The matched AnilistItem, or an empty one if nothing matched.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError

    @abstractmethod
    def details(self, media_id: int) -> AnilistItem:
        """Fetch a media entry by its provider ID.

        Args:
            media_id: The unique ID in the provider's system.

        Returns:
            The AnilistItem, or an empty one if the ID does not resolve.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError
