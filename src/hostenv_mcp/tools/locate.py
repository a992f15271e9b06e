"""Configuration file lookup tool."""

from ..config import get_settings
from ..resolver import config_candidates, find_config


def locate_config() -> dict:
    """Locate the application's configuration file.

    Candidates are checked in order and the first regular file wins:
    1. $XDG_CONFIG_HOME/<app>/<file> (default ~/.config), then $XDG_CONFIG_DIRS
    2. /etc/<file> (/usr/local/etc/<file> on the BSDs)

    Returns:
        A dictionary with:
        - found: Whether a configuration file exists
        - path: Path to the configuration file (None if not found)
        - candidates: All locations that were checked, in order
    """
    settings = get_settings()
    path = find_config(settings)

    return {
        "found": path is not None,
        "path": str(path) if path is not None else None,
        "candidates": [str(candidate) for candidate in config_candidates(settings)],
    }
