"""Resolver package for host environment lookups."""

from .identity import get_hostname, get_username
from .locator import config_candidates, find_config
from .models import HostInfo
from .paths import (
    HomeDirectoryNotFoundError,
    InvalidPathError,
    PathResolutionError,
    absolutize,
    expand_home,
    home_dir,
)
from .platform import HostFamily, detect_host_family, etc_root
from .shell import get_shell, shell_sources

__all__ = [
    "absolutize",
    "expand_home",
    "home_dir",
    "PathResolutionError",
    "InvalidPathError",
    "HomeDirectoryNotFoundError",
    "find_config",
    "config_candidates",
    "get_hostname",
    "get_username",
    "get_shell",
    "shell_sources",
    "HostFamily",
    "detect_host_family",
    "etc_root",
    "HostInfo",
]
