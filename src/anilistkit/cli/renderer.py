"""Renderer for CLI output.

This module renders AniList results as rich tables, using color and style
conventions for clear, user-friendly output.
"""

from rich.console import Console
from rich.table import Table

from anilistkit.metadata.models import AnilistItem, MediaType, Update


def _fmt(value: int | None) -> str:
    return "-" if value is None else str(value)


def render_item(item: AnilistItem, console: Console | None = None) -> None:
    """Render a single search or lookup result.

    Args:
        item: The matched AnilistItem (must be found).
        console: Optional Console instance to use for rendering.
    """
    console = console or Console()

    table = Table(title=item.title or f"AniList #{item.id}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", style="cyan")
    table.add_row("ID", str(item.id))
    table.add_row("URL", item.url)
    table.add_row("Score", _fmt(item.score))
    table.add_row("Episodes", _fmt(item.episodes))
    console.print(table)


def render_updates(
    updates: list[Update],
    media_type: MediaType,
    console: Console | None = None,
) -> None:
    """Render a user's list entries as a table.

    Anime shows episode progress; manga shows chapter and volume progress.
    """
    console = console or Console()

    table = Table(title=f"{media_type.value.title()} list ({len(updates)} entries)")
    table.add_column("Title", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Score", justify="right")
    if media_type is MediaType.ANIME:
        table.add_column("Progress", justify="right", style="green")
    else:
        table.add_column("Chapters", justify="right", style="green")
        table.add_column("Volumes", justify="right", style="green")
    table.add_column("Updated", style="yellow")

    status_styles = {
        "CURRENT": "green bold",
        "COMPLETED": "cyan",
        "PLANNING": "yellow",
        "PAUSED": "magenta",
        "DROPPED": "red",
        "REPEATING": "green",
    }

    for update in updates:
        status = update.status or "-"
        style = status_styles.get(status, "white")
        updated = update.updated_at.strftime("%Y-%m-%d") if update.updated_at else "-"
        if media_type is MediaType.ANIME:
            counters = [f"{_fmt(update.progress)}/{_fmt(update.total_episodes)}"]
        else:
            counters = [
                f"{_fmt(update.progress)}/{_fmt(update.total_chapters)}",
                f"{_fmt(update.progress_volumes)}/{_fmt(update.total_volumes)}",
            ]
        table.add_row(
            update.title,
            f"[{style}]{status}[/{style}]",
            _fmt(update.score),
            *counters,
            updated,
        )

    console.print(table)
