"""Config layer facade: file location, YAML loading and settings resolution."""

from unifi_cli.models import Settings

from .core import ENV_PREFIX, SETTING_KEYS, load_settings, validate_settings
from .home import (
    CONFIG_ENV,
    DEFAULT_CONFIG_NAME,
    default_config_path,
    load_yaml,
    resolve_config_path,
)

__all__ = [
    "CONFIG_ENV",
    "DEFAULT_CONFIG_NAME",
    "ENV_PREFIX",
    "SETTING_KEYS",
    "Settings",
    "default_config_path",
    "load_settings",
    "load_yaml",
    "resolve_config_path",
    "validate_settings",
]
