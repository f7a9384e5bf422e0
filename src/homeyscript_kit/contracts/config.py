"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConfigFile(BaseModel):
    """Shape of ``.hsk.json``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_key: str | None = Field(default=None, alias="apiKey")
    ip: str | None = None
    host: str | None = None
    https: bool | None = None


class SessionConfig(BaseModel):
    """Resolved settings used to open a client session."""

    api_key: str = ""
    ip: str = ""
    host: str | None = None
    https: bool = False
    verbose: bool = False

    @property
    def base_host(self) -> str:
        if self.host:
            return self.host
        if self.https:
            return f"https://{self.ip.replace('.', '-')}.homey.homeylocal.com"
        return f"http://{self.ip}"


class ConfirmConfig(BaseModel):
    """Confirmation prompt attached to a command."""

    message: str
    default: bool = False
