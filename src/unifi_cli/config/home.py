"""Config file location and YAML I/O (no pydantic dependencies)."""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError

CONFIG_ENV = "UNIFI_CONFIG"
DEFAULT_CONFIG_NAME = ".unifi-cli.yaml"


def default_config_path() -> Path:
    return Path.home() / DEFAULT_CONFIG_NAME


def resolve_config_path(
    cli_path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None
) -> Tuple[Path, bool]:
    """
    Resolve the YAML config file path with precedence:
    1. CLI --config path
    2. UNIFI_CONFIG env var
    3. User home: ~/.unifi-cli.yaml

    Returns (path, explicit); an explicit path must exist.
    """
    if cli_path:
        return Path(cli_path).expanduser(), True

    env = os.environ if env is None else env
    env_path = env.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).expanduser(), True

    return default_config_path(), False


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping; an empty file yields an empty dict."""
    yaml = YAML(typ="safe")
    try:
        data = yaml.load(path.read_text(encoding="utf-8"))
    except (OSError, YAMLError) as e:
        raise ConfigError(f"failed to read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"failed to read config file {path}: expected a mapping"
        )
    return data
