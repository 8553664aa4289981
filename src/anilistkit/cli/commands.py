"""CLI commands for anilistkit.

This module implements all user-facing CLI commands: title search, ID lookup,
follower listing, list updates and progress read/write.
- Uses Typer for declarative CLI structure and option parsing.
- All output is routed through Rich Console for consistent, styled UX.

Design:
- Typer app and Console are instantiated at module level for reuse across
  commands.
- Annotated is used for CLI argument/option definitions.
- Usernames and access tokens are resolved CLI > env > config file, see
  :func:`anilistkit.utils.config.resolve_setting`.
- Exit codes are defined as an Enum.
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from typing import Annotated, Optional

import httpx
import typer
from rich.console import Console

from anilistkit.cli.renderer import render_item, render_updates
from anilistkit.metadata.clients.anilist import (
    AniListClient,
    AuthenticatedAniListClient,
    GraphQLResponseError,
)
from anilistkit.metadata.models import InvalidMediaTypeError, MediaType
from anilistkit.metadata.settings import MissingAccessTokenError
from anilistkit.utils.config import (
    get_default_username,
    resolve_setting,
    set_default_username,
)
from anilistkit.utils.debug import error
from anilistkit.utils.json import DateTimeEncoder

app = typer.Typer(
    name="anilistkit",
    help="Query AniList: find anime, list followers, read and update progress.",
    add_completion=True,
)
console = Console()


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1
    NOT_FOUND = 2


USERNAME = Annotated[
    Optional[str],
    typer.Argument(
        help="AniList username (defaults to the configured anilist.username)",
        show_default=False,
    ),
]

MEDIA_TYPE = Annotated[
    str,
    typer.Option(
        "--type",
        "-t",
        help="Media kind to list: anime or manga",
    ),
]

JSON_OUTPUT = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output results in JSON format",
    ),
]

AIRED = Annotated[
    Optional[datetime],
    typer.Option(
        "--aired",
        formats=["%Y-%m-%d"],
        help="Approximate first-episode date, used to narrow by season",
    ),
]

TOKEN = Annotated[
    Optional[str],
    typer.Option(
        "--token",
        help="AniList OAuth access token (or set ANILIST_ACCESS_TOKEN)",
        show_default=False,
    ),
]


@contextmanager
def _api_errors() -> Iterator[None]:
    """Turn client failures into a red message and exit code 1."""
    try:
        yield
    except (InvalidMediaTypeError, MissingAccessTokenError) as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(ExitCode.ERROR) from exc
    except httpx.HTTPStatusError as exc:
        error(f"AniList request failed: {exc}")
        console.print(
            f"[red]AniList request failed with status "
            f"{exc.response.status_code}[/red]"
        )
        raise typer.Exit(ExitCode.ERROR) from exc
    except (httpx.HTTPError, json.JSONDecodeError, GraphQLResponseError) as exc:
        error(f"AniList request failed: {exc}")
        console.print(f"[red]AniList request failed: {exc}[/red]")
        raise typer.Exit(ExitCode.ERROR) from exc


def _resolve_username(username: str | None) -> str:
    resolved = username or get_default_username()
    if not resolved:
        console.print(
            "[red]No username given and no default configured. "
            "Pass one or run 'anilistkit default-user NAME'.[/red]"
        )
        raise typer.Exit(ExitCode.ERROR)
    return resolved


@app.command()
def search(
    title: Annotated[str, typer.Argument(help="Anime title to search for")],
    aired: AIRED = None,
) -> None:
    """Find an anime by title, optionally narrowed by first-episode date."""
    with _api_errors():
        item = AniListClient().find_item(title, aired.date() if aired else None)
    if not item.found:
        console.print(f"[yellow]No match for '{title}'.[/yellow]")
        raise typer.Exit(ExitCode.NOT_FOUND)
    render_item(item, console)


@app.command()
def lookup(
    media_id: Annotated[int, typer.Argument(help="AniList media ID")],
) -> None:
    """Fetch an anime or manga by AniList ID."""
    with _api_errors():
        item = AniListClient().get_item_by_id(media_id)
    if not item.found:
        console.print(f"[yellow]No media with ID {media_id}.[/yellow]")
        raise typer.Exit(ExitCode.NOT_FOUND)
    render_item(item, console)


@app.command()
def following(username: USERNAME = None) -> None:
    """List the users a user follows."""
    name = _resolve_username(username)
    with _api_errors():
        names = AniListClient().get_following_names(name)
    for followed in names:
        console.print(followed)
    console.print(f"[bold]{len(names)}[/bold] followed users")


@app.command()
def updates(
    username: USERNAME = None,
    media_type: MEDIA_TYPE = "anime",
    json_output: JSON_OUTPUT = False,
) -> None:
    """Show a user's anime or manga list entries."""
    try:
        kind = MediaType.parse(media_type.upper())
    except InvalidMediaTypeError as exc:
        console.print("[red]Invalid media type. Must be one of: anime, manga[/red]")
        raise typer.Exit(ExitCode.ERROR) from exc
    name = _resolve_username(username)
    with _api_errors():
        entries = AniListClient().get_updates(name, kind)

    if json_output:
        rows = [
            {**entry.model_dump(), "updated_at": entry.updated_at} for entry in entries
        ]
        typer.echo(json.dumps(rows, cls=DateTimeEncoder, indent=2))
        return
    render_updates(entries, kind, console)


@app.command()
def progress(
    media_id: Annotated[int, typer.Argument(help="AniList media ID")],
    username: USERNAME = None,
) -> None:
    """Show a user's progress on one media entry."""
    name = _resolve_username(username)
    with _api_errors():
        count = AniListClient().get_progress(name, media_id)
    console.print(f"{name}: [bold]{count}[/bold]")


@app.command("set-progress")
def set_progress(
    media_id: Annotated[int, typer.Argument(help="AniList media ID")],
    new_progress: Annotated[int, typer.Argument(help="Episodes watched or chapters read")],
    status: Annotated[
        str,
        typer.Option("--status", "-s", help="List status, e.g. CURRENT or COMPLETED"),
    ] = "CURRENT",
    token: TOKEN = None,
) -> None:
    """Update progress on the authenticated user's list."""
    resolved_token = resolve_setting(
        "anilist.access_token", default=None, cli_value=token
    )
    with _api_errors():
        client = AuthenticatedAniListClient(resolved_token)
        client.update_progress(media_id, new_progress, status)
    console.print(
        f"[green]Saved progress {new_progress} ({status}) for media {media_id}[/green]"
    )


@app.command("default-user")
def default_user(
    username: Annotated[str, typer.Argument(help="Username to store as default")],
) -> None:
    """Store the default AniList username in the config file."""
    set_default_username(username)
    console.print(f"Default user set to [bold]{username}[/bold]")


@app.command()
def version() -> None:
    """Show the version of anilistkit."""
    from anilistkit.__about__ import __version__

    console.print(f"anilistkit version: [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()
