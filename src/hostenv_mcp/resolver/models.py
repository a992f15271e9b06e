"""Data models for resolver results."""

from typing import Optional

from pydantic import BaseModel, Field

from .platform import HostFamily


class HostInfo(BaseModel):
    """Snapshot of the host environment as seen by the resolver."""

    host_family: HostFamily = Field(description="Coarse OS classification of the host")
    hostname: Optional[str] = Field(default=None, description="Host name, None if unavailable")
    username: Optional[str] = Field(default=None, description="Login name, None if unavailable")
    shell: Optional[str] = Field(default=None, description="Preferred shell, None if undetermined")
    config_path: Optional[str] = Field(default=None, description="Located configuration file")
