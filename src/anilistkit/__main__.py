"""Allow ``python -m anilistkit``."""

from anilistkit.cli import app

if __name__ == "__main__":
    app()
