"""Status check tool for the host environment resolver."""

from ..config import get_settings
from .host import collect_host_info


def check_status() -> dict:
    """Check the status of the MCP server and its lookups.

    Returns information about:
    - Whether the settings could be loaded from the environment
    - The detected host family
    - Which lookups produced a value
    """
    try:
        settings = get_settings()
    except ValueError as e:
        return {
            "settings_loaded": False,
            "settings_error": str(e),
        }

    info = collect_host_info()

    return {
        "settings_loaded": True,
        "settings_error": None,
        "app_name": settings.app_name,
        "config_file_name": settings.config_file_name,
        "host_family": info.host_family.value,
        "config_found": info.config_path is not None,
        "hostname_available": info.hostname is not None,
        "username_available": info.username is not None,
        "shell_available": info.shell is not None,
    }
