"""Configuration models for the host environment resolver."""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_APP_NAME = "spotifyd"
DEFAULT_CONFIG_FILE_NAME = "spotifyd.conf"


class Settings(BaseModel):
    """Settings that control where and how host information is looked up."""

    app_name: str = Field(
        default=DEFAULT_APP_NAME,
        description="Application subdirectory inside the user config directories",
    )
    config_file_name: str = Field(
        default=DEFAULT_CONFIG_FILE_NAME,
        description="Name of the configuration file to locate",
    )
    shell_env_var: str = Field(
        default="SHELL",
        description="Environment variable holding the preferred shell",
    )
    passwd_path: Path = Field(
        default=Path("/etc/passwd"),
        description="User database scanned for the login shell",
    )
    directory_service_command: str = Field(
        default="dscl",
        description="Directory service utility queried on macOS",
    )
    directory_service_timeout: Optional[float] = Field(
        default=None,
        description="Seconds to wait for the directory service query (None blocks)",
    )
    log_level: str = Field(
        default="DEBUG",
        description="Level of the hostenv logger",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path, or a true-ish flag for ./logs; None disables file logging",
    )


def load_settings() -> Settings:
    """Load settings, applying environment overrides.

    Recognized variables:
    1. HOSTENV_APP_NAME
    2. HOSTENV_CONFIG_FILE_NAME
    3. HOSTENV_PASSWD_PATH
    4. HOSTENV_DSCL_TIMEOUT (seconds)
    5. HOSTENV_LOG_LEVEL
    6. HOSTENV_LOG_FILE

    Raises:
        ValueError: If HOSTENV_DSCL_TIMEOUT is not a number or
            HOSTENV_LOG_LEVEL is not a logging level name.
    """
    overrides = {}

    app_name = os.environ.get("HOSTENV_APP_NAME")
    if app_name:
        overrides["app_name"] = app_name

    config_file_name = os.environ.get("HOSTENV_CONFIG_FILE_NAME")
    if config_file_name:
        overrides["config_file_name"] = config_file_name

    passwd_path = os.environ.get("HOSTENV_PASSWD_PATH")
    if passwd_path:
        overrides["passwd_path"] = Path(passwd_path)

    timeout = os.environ.get("HOSTENV_DSCL_TIMEOUT")
    if timeout:
        try:
            overrides["directory_service_timeout"] = float(timeout)
        except ValueError as e:
            raise ValueError(f"Invalid HOSTENV_DSCL_TIMEOUT value {timeout!r}: {e}") from e

    log_level = os.environ.get("HOSTENV_LOG_LEVEL")
    if log_level:
        level = log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid HOSTENV_LOG_LEVEL value {log_level!r}")
        overrides["log_level"] = level

    log_file = os.environ.get("HOSTENV_LOG_FILE")
    if log_file:
        overrides["log_file"] = log_file

    return Settings(**overrides)


def get_settings() -> Settings:
    """Get the settings (always re-reads the environment)."""
    return load_settings()
