"""Layered settings resolution: flags > environment > config file > defaults.

Settings are resolved once per invocation and handed to the API client
explicitly; nothing here caches process-wide state.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from ..errors import ConfigError
from ..models import Settings
from .home import load_yaml, resolve_config_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "UNIFI_"
SETTING_KEYS = ("host", "api_key", "site", "insecure", "timeout")


def _from_env(env: Mapping[str, str]) -> Dict[str, Any]:
    values = {}
    for key in SETTING_KEYS:
        value = env.get(ENV_PREFIX + key.upper())
        if value is not None and value != "":
            values[key] = value
    return values


def _from_file(path: Path, explicit: bool) -> Dict[str, Any]:
    if not path.exists():
        if explicit:
            raise ConfigError(f"config file not found: {path}")
        logger.debug("no config file at %s", path)
        return {}

    logger.debug("reading config file %s", path)
    data = load_yaml(path)
    return {k: v for k, v in data.items() if k in SETTING_KEYS and v is not None}


def load_settings(
    config_path: Path | str | None = None,
    overrides: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Resolve settings from every layer.

    Args:
        config_path: Explicit config file (``--config``)
        overrides: Values from command-line flags; ``None`` entries are unset
        env: Environment mapping (defaults to ``os.environ``)

    Raises:
        ConfigError: Missing explicit config file, unreadable YAML or
            values that fail validation
    """
    env = os.environ if env is None else env
    target = Path(config_path) if config_path is not None else None
    path, explicit = resolve_config_path(target, env)

    data: Dict[str, Any] = {}
    data.update(_from_file(path, explicit))
    data.update(_from_env(env))
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e

    settings.config_path = path if path.exists() else None
    return settings


def validate_settings(settings: Settings) -> Settings:
    """Ensure the settings are sufficient to contact a controller."""

    if not settings.host:
        raise ConfigError(
            "host is required (set via --host, UNIFI_HOST, or config file)"
        )
    if not settings.api_key:
        raise ConfigError(
            "API key is required (set via UNIFI_API_KEY or config file)"
        )
    return settings


__all__ = ["ENV_PREFIX", "SETTING_KEYS", "load_settings", "validate_settings"]
