"""Shell detection utilities.

The preferred shell is resolved through a fallback chain:

1. the SHELL environment variable, verbatim;
2. the user's entry in /etc/passwd (every host except macOS);
3. a ``dscl`` directory service query (macOS only, instead of 2).
"""

import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from ..config import Settings, get_settings
from .identity import get_username
from .logging import get_logger
from .platform import HostFamily, detect_host_family

UsernameProvider = Callable[[], Optional[str]]

DSCL_SHELL_PREFIX = "UserShell: "


class ShellSource(ABC):
    """A single place the user's shell can be read from."""

    name = "unknown"

    @abstractmethod
    def lookup(self) -> Optional[str]:
        """Return the shell, or None to fall through to the next source."""


class EnvironmentShellSource(ShellSource):
    """Reads the shell from an environment variable."""

    name = "environment"

    def __init__(self, env_var: str = "SHELL"):
        self.env_var = env_var

    def lookup(self) -> Optional[str]:
        shell = os.environ.get(self.env_var)
        if shell is not None:
            get_logger("shell").debug(f"Found shell {shell!r} using {self.env_var} environment variable.")
        return shell


class PasswdShellSource(ShellSource):
    """Reads the login shell from a passwd-format user database.

    Each line holds seven colon-separated fields:
    "name:password:UID:GID:GECOS:directory:shell"
    """

    name = "passwd"

    def __init__(
        self,
        path: Path = Path("/etc/passwd"),
        username_provider: Optional[UsernameProvider] = None,
    ):
        self.path = Path(path)
        self.username_provider = username_provider

    def lookup(self) -> Optional[str]:
        logger = get_logger("shell")

        username = (self.username_provider or get_username)()
        if username is None:
            logger.debug("Username unavailable, skipping user database lookup")
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                for line in f:
                    fields = line.rstrip("\n").split(":")
                    if fields[0] != username:
                        continue
                    if len(fields) < 7:
                        logger.debug(f"Malformed entry for {username!r} in {self.path}")
                        return None
                    shell = fields[6]
                    logger.debug(f"Found shell {shell!r} using {self.path}.")
                    return shell
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to read user database {self.path}: {e}")
            return None

        logger.debug(f"No entry for {username!r} in {self.path}")
        return None


class DirectoryServiceShellSource(ShellSource):
    """Queries the macOS directory service for the UserShell attribute."""

    name = "directory_service"

    def __init__(
        self,
        command: str = "dscl",
        timeout: Optional[float] = None,
        username_provider: Optional[UsernameProvider] = None,
    ):
        self.command = command
        self.timeout = timeout
        self.username_provider = username_provider

    def build_command(self, username: str) -> list[str]:
        return [self.command, ".", "-read", f"/Users/{username}", "UserShell"]

    def lookup(self) -> Optional[str]:
        logger = get_logger("shell")

        username = (self.username_provider or get_username)()
        if username is None:
            logger.debug("Username unavailable, skipping directory service lookup")
            return None

        try:
            result = subprocess.run(
                self.build_command(username),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"{self.command} timed out after {self.timeout} seconds")
            return None
        except OSError as e:
            logger.debug(f"Failed to run {self.command}: {e}")
            return None

        if result.returncode != 0:
            return None

        try:
            stdout = result.stdout.decode("utf-8")
        except UnicodeDecodeError:
            return None

        # Expected output: "UserShell: /path/to/shell"
        if not stdout.startswith(DSCL_SHELL_PREFIX):
            return None
        tokens = stdout.split()
        if len(tokens) < 2:
            return None

        shell = tokens[1]
        logger.debug(f"Found shell {shell!r} using {self.command} command.")
        return shell


def shell_sources(
    family: Optional[HostFamily] = None,
    settings: Optional[Settings] = None,
) -> list[ShellSource]:
    """Build the ordered shell sources for a host family.

    The passwd and directory service sources are mutually exclusive:
    macOS gets the directory service, every other host gets passwd.
    """
    if family is None:
        family = detect_host_family()
    if settings is None:
        settings = get_settings()

    sources: list[ShellSource] = [EnvironmentShellSource(settings.shell_env_var)]
    if family == HostFamily.MACOS:
        sources.append(DirectoryServiceShellSource(
            command=settings.directory_service_command,
            timeout=settings.directory_service_timeout,
        ))
    else:
        sources.append(PasswdShellSource(settings.passwd_path))
    return sources


def get_shell(sources: Optional[list[ShellSource]] = None) -> Optional[str]:
    """Detect the current user's shell.

    Args:
        sources: Sources to consult in order. Defaults to the sources for
            the current host.

    Returns:
        The first shell any source produces, or None.
    """
    if sources is None:
        sources = shell_sources()

    for source in sources:
        shell = source.lookup()
        if shell is not None:
            return shell
    return None
