"""Host information tool."""

from ..config import get_settings
from ..resolver import (
    HostInfo,
    detect_host_family,
    find_config,
    get_hostname,
    get_shell,
    get_username,
    shell_sources,
)


def collect_host_info() -> HostInfo:
    """Query every host source once and bundle the results."""
    settings = get_settings()
    family = detect_host_family()
    config_path = find_config(settings, family)

    return HostInfo(
        host_family=family,
        hostname=get_hostname(),
        username=get_username(),
        shell=get_shell(shell_sources(family, settings)),
        config_path=str(config_path) if config_path is not None else None,
    )


def get_host_info() -> dict:
    """Get the hostname, login name, preferred shell and config location.

    Values that cannot be determined on this host are returned as None.
    """
    return collect_host_info().model_dump(mode="json")
