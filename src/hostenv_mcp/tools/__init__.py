"""Tools package for hostenv-mcp."""

from .host import get_host_info
from .locate import locate_config
from .paths import resolve_path
from .status import check_status

__all__ = [
    "resolve_path",
    "locate_config",
    "get_host_info",
    "check_status",
]
