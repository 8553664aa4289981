"""Tests for the rich renderers."""

from rich.console import Console

from anilistkit.cli.renderer import render_item, render_updates
from anilistkit.metadata.models import AnilistItem, MediaType, Update


def _console() -> Console:
    return Console(record=True, width=160)


def test_render_item_shows_missing_values_as_dash() -> None:
    console = _console()
    render_item(AnilistItem(id=21, url="https://anilist.co/anime/21"), console)
    text = console.export_text()
    assert "AniList #21" in text
    assert "https://anilist.co/anime/21" in text
    assert "-" in text


def test_render_anime_updates() -> None:
    console = _console()
    update = Update(
        user_name="someone",
        media_id=1,
        title="Cowboy Bebop",
        url="https://anilist.co/anime/1",
        status="COMPLETED",
        progress=26,
        total_episodes=26,
        media_type=MediaType.ANIME,
    )
    render_updates([update], MediaType.ANIME, console)
    text = console.export_text()
    assert "Cowboy Bebop" in text
    assert "26/26" in text
    assert "Progress" in text
    assert "Volumes" not in text


def test_render_manga_updates() -> None:
    console = _console()
    update = Update(
        user_name="someone",
        media_id=2,
        title="Berserk",
        url="https://anilist.co/manga/2",
        status="PLANNING",
        progress=None,
        total_chapters=380,
        total_volumes=41,
        media_type=MediaType.MANGA,
    )
    render_updates([update], MediaType.MANGA, console)
    text = console.export_text()
    assert "-/380" in text
    assert "-/41" in text
