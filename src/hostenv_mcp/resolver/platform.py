"""Host family detection.

The host family decides which fixed system paths apply and which
shell source backs up the SHELL environment variable.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Optional

_BSD_PLATFORMS = ("freebsd", "openbsd", "netbsd", "dragonfly")


class HostFamily(str, Enum):
    """Coarse OS classification."""

    LINUX = "linux"
    MACOS = "macos"
    BSD = "bsd"


_ETC_ROOTS = {
    HostFamily.LINUX: Path("/etc"),
    HostFamily.MACOS: Path("/etc"),
    HostFamily.BSD: Path("/usr/local/etc"),
}


def detect_host_family(platform: Optional[str] = None) -> HostFamily:
    """Classify the host from a ``sys.platform`` string.

    Anything that is neither macOS nor one of the BSDs is treated as the
    Linux family.
    """
    platform = sys.platform if platform is None else platform
    if platform == "darwin":
        return HostFamily.MACOS
    if platform.startswith(_BSD_PLATFORMS):
        return HostFamily.BSD
    return HostFamily.LINUX


def etc_root(family: Optional[HostFamily] = None) -> Path:
    """Return the system-wide configuration root for a host family."""
    if family is None:
        family = detect_host_family()
    return _ETC_ROOTS[family]
