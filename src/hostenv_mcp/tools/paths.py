"""Path resolution tool."""

from ..resolver import PathResolutionError, absolutize


def resolve_path(path: str) -> dict:
    """Resolve a path to an absolute one, expanding a leading '~'.

    Resolution is purely lexical: '.' and '..' are collapsed, symlinks are
    not followed and the path does not need to exist.

    Returns:
        A dictionary with:
        - success: Whether the path could be resolved
        - path: The absolute path (None on failure)
        - error: Error message if failed
    """
    try:
        resolved = absolutize(path)
    except PathResolutionError as e:
        return {
            "success": False,
            "path": None,
            "error": str(e),
        }

    return {
        "success": True,
        "path": str(resolved),
        "error": None,
    }
