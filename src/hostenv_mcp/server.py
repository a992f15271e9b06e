"""MCP Server exposing host environment lookups.

This server provides tools for resolving paths, locating the
application's configuration file and detecting the user's shell.
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP

from .tools import (
    check_status as check_status_impl,
    get_host_info as get_host_info_impl,
    locate_config as locate_config_impl,
    resolve_path as resolve_path_impl,
)

# Initialize the MCP server
mcp = FastMCP("Host Environment Resolver")


@mcp.tool()
def resolve_path(
    path: Annotated[
        str,
        "Path to resolve. A leading '~' component is replaced by the home directory.",
    ],
) -> dict:
    """Resolve a path to an absolute one.

    Relative paths are resolved against the server's working directory.
    '.' and '..' are collapsed lexically; symlinks are not followed and
    the path does not need to exist.

    Returns:
        A dictionary with:
        - success: Whether the path could be resolved
        - path: The absolute path (None on failure)
        - error: Error message if failed
    """
    return resolve_path_impl(path)


@mcp.tool()
def locate_config() -> dict:
    """Locate the application's configuration file.

    Returns:
        - found: Whether a configuration file exists
        - path: Path to the configuration file (None if not found)
        - candidates: All locations that were checked, in order
    """
    return locate_config_impl()


@mcp.tool()
def get_host_info() -> dict:
    """Get the hostname, login name, preferred shell and config location.

    Values that cannot be determined on this host are returned as None.
    """
    return get_host_info_impl()


@mcp.tool()
def check_status() -> dict:
    """Check the status of the MCP server and its lookups."""
    return check_status_impl()


def main():
    """Entry point for the MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
