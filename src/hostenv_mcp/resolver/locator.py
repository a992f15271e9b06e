"""Configuration file discovery."""

import os
from pathlib import Path
from typing import Optional

from ..config import Settings, get_settings
from .logging import get_logger
from .paths import home_dir
from .platform import HostFamily, etc_root

DEFAULT_XDG_CONFIG_DIRS = "/etc/xdg"


def _user_config_dirs() -> list[Path]:
    """Return the XDG configuration base directories, most specific first.

    Relative entries are ignored.
    """
    dirs = []

    config_home = os.environ.get("XDG_CONFIG_HOME", "")
    if os.path.isabs(config_home):
        dirs.append(Path(config_home))
    else:
        home = home_dir()
        if home is None:
            # No user-scoped location can be derived without a home
            return []
        dirs.append(home / ".config")

    config_dirs = os.environ.get("XDG_CONFIG_DIRS") or DEFAULT_XDG_CONFIG_DIRS
    for entry in config_dirs.split(os.pathsep):
        if os.path.isabs(entry):
            dirs.append(Path(entry))

    return dirs


def config_candidates(
    settings: Optional[Settings] = None,
    family: Optional[HostFamily] = None,
) -> list[Path]:
    """List configuration file candidates in priority order.

    1. <XDG config dir>/<app_name>/<config_file_name> for each XDG dir
    2. <etc root>/<config_file_name>
    """
    if settings is None:
        settings = get_settings()

    candidates = [
        base / settings.app_name / settings.config_file_name
        for base in _user_config_dirs()
    ]
    candidates.append(etc_root(family) / settings.config_file_name)
    return candidates


def find_config(
    settings: Optional[Settings] = None,
    family: Optional[HostFamily] = None,
) -> Optional[Path]:
    """Find the configuration file.

    Returns:
        Path of the first candidate that is a regular file, or None.
    """
    logger = get_logger("locator")

    for candidate in config_candidates(settings, family):
        if os.path.isfile(candidate):
            logger.debug(f"Found config file {str(candidate)!r}")
            return candidate

    logger.debug("No config file found in any candidate location")
    return None
