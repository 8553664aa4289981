"""Config utility for persistent anilistkit settings (default username, etc.).

Provides functions to read and write the default AniList username to
~/.config/anilistkit/config.toml. Uses tomli/tomli-w for TOML parsing and writing.
"""

from pathlib import Path
from typing import Optional, TypeVar, Any, cast
import os
import contextlib

import tomli
import tomli_w

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
# Path like ~/.config/anilistkit or $XDG_CONFIG_HOME/anilistkit
CONFIG_DIR = _xdg_config_home / "anilistkit"
CONFIG_FILE = CONFIG_DIR / "config.toml"


def get_default_username() -> Optional[str]:
    """Return the default AniList username.

    ``ANILISTKIT_ANILIST_USERNAME`` overrides the ``[anilist] username`` entry
    of config.toml.

    Returns:
        Optional[str]: The username, or None if neither is set.
    """
    username = resolve_setting("anilist.username", default=None)
    return str(username) if username else None


def set_default_username(username: str) -> None:
    """Set the default AniList username in config.toml.

    Args:
        username (str): The username to use when none is given on the CLI.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = {}
    if CONFIG_FILE.exists():
        with CONFIG_FILE.open("rb") as f:
            data = tomli.load(f)
    if "anilist" not in data:
        data["anilist"] = {}
    data["anilist"]["username"] = username
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)


# ---------------------------------------------------------------------------
# Generic configuration resolution
# ---------------------------------------------------------------------------

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""

    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="anilist.username" will attempt
    ``data["anilist"]["username"]`` returning None if any level is missing.
    """

    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = "ANILISTKIT_") -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "anilist.username" -> "ANILISTKIT_ANILIST_USERNAME".
    """

    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(value: Any, default: Any) -> Any:
    """Coerce *value* (from env or file) towards the type of *default*."""
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in {"1", "true", "yes", "on"}
        return default
    if isinstance(default, int):
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            with contextlib.suppress(ValueError):
                return int(value)
        return default
    if isinstance(default, float):
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            with contextlib.suppress(ValueError):
                return float(value)
        return default
    # str or None defaults: return as-is
    return value


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"anilist.username"``.
        default: Value to fall back to when no overrides found.
        cli_value: Value passed from CLI option (may be ``None`` when not provided).

    Returns:
        The resolved value with type matching *default* (or *cli_value*).
    """

    # 1. CLI value wins if provided (and not ``None`` to mimic Typer semantics).
    if cli_value is not None:
        return cli_value

    # 2. Environment variable
    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return cast(T, _coerce(os.environ[env_var], default))

    # 3. Config file lookup
    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return cast(T, _coerce(file_val, default))

    # 4. Default
    return default
