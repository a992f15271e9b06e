"""Path canonicalization with home-directory shorthand expansion."""

import os
from pathlib import Path
from typing import Optional, Union

from .logging import get_logger

PathInput = Union[str, "os.PathLike[str]"]

_SEPARATORS = os.sep + (os.altsep or "")
_TILDE_PREFIXES = tuple("~" + sep for sep in _SEPARATORS)


class PathResolutionError(Exception):
    """Base class for path resolution failures."""


class InvalidPathError(PathResolutionError, ValueError):
    """Raised when the input path is empty."""


class HomeDirectoryNotFoundError(PathResolutionError, FileNotFoundError):
    """Raised when ``~`` must be expanded but the home directory is unknown."""


def home_dir() -> Optional[Path]:
    """Resolve the current user's home directory.

    Returns:
        Absolute home directory, or None if it cannot be determined.
    """
    if os.environ.get("HOME") == "":
        # An empty HOME is ignored in favour of the password database
        return _passwd_home()

    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    if not home.is_absolute():
        return None
    return home


def _passwd_home() -> Optional[Path]:
    """Look up the home directory of the current uid in the password database."""
    try:
        import pwd

        pw_dir = pwd.getpwuid(os.getuid()).pw_dir
    except (ImportError, KeyError):
        return None
    if not pw_dir or not os.path.isabs(pw_dir):
        return None
    return Path(pw_dir)


def expand_home(path: PathInput) -> Path:
    """Replace a leading ``~`` component with the home directory.

    Only a first component that is exactly ``~`` is expanded. ``~user``,
    ``~foo/bar`` and ``~`` anywhere past the first component are returned
    unchanged.

    Args:
        path: Path to expand.

    Returns:
        The expanded path (not necessarily absolute).

    Raises:
        InvalidPathError: If the path is empty.
        HomeDirectoryNotFoundError: If expansion is needed but the home
            directory cannot be resolved.
    """
    raw = os.fspath(path)
    if not raw:
        raise InvalidPathError("Path may not be empty.")

    # Matched on the raw string; Path.parts drops a leading "." from "./~"
    if raw != "~" and not raw.startswith(_TILDE_PREFIXES):
        return Path(raw)

    home = home_dir()
    if home is None:
        raise HomeDirectoryNotFoundError("Unable to locate user's home directory.")
    return home.joinpath(*Path(raw[1:].lstrip(_SEPARATORS)).parts)


def absolutize(path: PathInput) -> Path:
    """Expand ``~`` and lexically turn the path into an absolute one.

    Relative paths are joined onto the current working directory, then
    ``.`` and ``..`` segments and redundant separators are collapsed by
    string manipulation only. Symlinks are not followed and nothing has
    to exist on disk.

    Raises:
        InvalidPathError: If the path is empty.
        HomeDirectoryNotFoundError: If ``~`` cannot be expanded.
    """
    expanded = expand_home(path)
    if not expanded.is_absolute():
        expanded = Path(os.getcwd()) / expanded

    normalized = os.path.normpath(expanded)
    # POSIX keeps a leading "//" as implementation-defined; collapse it
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")

    result = Path(normalized)
    get_logger("paths").debug(f"Absolutized path {os.fspath(path)!r} to {str(result)!r}")
    return result
