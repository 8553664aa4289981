"""Season inference for title searches.

AniList tags every anime with the season and year it premiered. When only an
approximate first-episode date is known, the nominal season of that date is
tried first. Premieres close to a season boundary are often tagged with the
neighbouring season, so a single retry is made one season earlier (for
season-start months) or one season later (for season-end months).
"""

from datetime import date

from anilistkit.metadata.models import Season, SeasonGuess

SEASONS: tuple[Season, ...] = (
    Season.WINTER,
    Season.SPRING,
    Season.SUMMER,
    Season.FALL,
)
BEGINNING_SEASON_MONTHS: frozenset[int] = frozenset({1, 4, 7, 10})
END_SEASON_MONTHS: frozenset[int] = frozenset({3, 6, 9, 12})


def compute_season(first_episode_date: date, offset: int = 0) -> SeasonGuess:
    """Return the season label and year for *first_episode_date*.

    Args:
        first_episode_date: Approximate airing date of the first episode.
        offset: Season adjustment step, one of -1, 0 or +1.

    Returns:
        The SeasonGuess, wrapped into the previous or next year when the
        offset crosses a year boundary.
    """
    season_index = (first_episode_date.month - 1) // 3 + offset
    year = first_episode_date.year

    if season_index < 0:
        season_index = 3
        year -= 1
    elif season_index > 3:
        season_index = 0
        year += 1

    return SeasonGuess(season=SEASONS[season_index], year=year)


def retry_offset(first_episode_date: date) -> int:
    """Return the offset of the single retry for this date, or 0 for none."""
    if first_episode_date.month in BEGINNING_SEASON_MONTHS:
        return -1
    if first_episode_date.month in END_SEASON_MONTHS:
        return 1
    return 0


def season_offsets(first_episode_date: date, offset: int = 0) -> list[int]:
    """List the offsets to try, in order, when searching by season.

    A retry is only scheduled when starting from offset 0, so at most two
    searches are ever made for one title.
    """
    offsets = [offset]
    if offset == 0:
        retry = retry_offset(first_episode_date)
        if retry:
            offsets.append(retry)
    return offsets
