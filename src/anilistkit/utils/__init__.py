"""Utility modules for anilistkit."""

from anilistkit.utils.config import resolve_setting

__all__ = [
    "resolve_setting",
]
