"""Resolved controller connection settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SITE = "default"
DEFAULT_TIMEOUT = 30.0


class Settings(BaseModel):
    """Connection settings for one CLI invocation.

    Built by ``unifi_cli.config.load_settings`` from flags, environment and
    the YAML config file, then passed explicitly to the API client.
    """

    model_config = ConfigDict(extra="ignore")

    host: str = ""
    api_key: str = Field(default="", repr=False)
    site: str = DEFAULT_SITE
    insecure: bool = True
    timeout: float = DEFAULT_TIMEOUT
    config_path: Path | None = Field(default=None, exclude=True)

    @field_validator("host")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    @field_validator("timeout")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v


__all__ = ["DEFAULT_SITE", "DEFAULT_TIMEOUT", "Settings"]
