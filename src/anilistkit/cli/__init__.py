"""Command-line interface for anilistkit.

This package provides the Typer app and global console for all CLI commands and
user-facing output.

- app: The Typer application object, used by the ``anilistkit`` entrypoint.
- console: Rich Console instance for consistent, styled output.
"""

from rich.traceback import install

# Install rich traceback handler for all CLI commands
install(show_locals=False)

from anilistkit.cli.commands import app, console  # noqa: E402

__all__ = ["app", "console"]
