"""Unit tests for layered settings resolution."""

from pathlib import Path

import pytest

from unifi_cli.config import (
    default_config_path,
    load_settings,
    load_yaml,
    resolve_config_path,
    validate_settings,
)
from unifi_cli.errors import ConfigError
from unifi_cli.models import Settings


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "unifi.yaml"
    path.write_text(
        "host: https://file.example.com\n"
        "api_key: file-key\n"
        "site: filesite\n"
        "insecure: false\n"
        "unrelated: 1\n"
    )
    return path


def test_defaults_without_any_source():
    settings = load_settings(env={})
    assert settings.host == ""
    assert settings.site == "default"
    assert settings.insecure is True
    assert settings.timeout == 30.0
    assert settings.config_path is None


def test_default_config_path_is_in_home(isolated_config):
    assert default_config_path() == Path(isolated_config) / ".unifi-cli.yaml"


def test_home_config_file_is_read(isolated_config):
    (isolated_config / ".unifi-cli.yaml").write_text("host: https://home.local\n")
    settings = load_settings(env={})
    assert settings.host == "https://home.local"
    assert settings.config_path == isolated_config / ".unifi-cli.yaml"


def test_file_values(config_file):
    settings = load_settings(config_file, env={})
    assert settings.host == "https://file.example.com"
    assert settings.api_key == "file-key"
    assert settings.site == "filesite"
    assert settings.insecure is False
    assert settings.config_path == config_file


def test_env_overrides_file(config_file):
    env = {"UNIFI_HOST": "https://env.example.com", "UNIFI_INSECURE": "true"}
    settings = load_settings(config_file, env=env)
    assert settings.host == "https://env.example.com"
    assert settings.insecure is True
    assert settings.api_key == "file-key"


def test_flags_override_env(config_file):
    env = {"UNIFI_SITE": "envsite"}
    overrides = {"site": "flagsite", "host": None, "timeout": 5.0}
    settings = load_settings(config_file, overrides, env=env)
    assert settings.site == "flagsite"
    assert settings.host == "https://file.example.com"
    assert settings.timeout == 5.0


def test_empty_env_values_are_ignored(config_file):
    settings = load_settings(config_file, env={"UNIFI_SITE": ""})
    assert settings.site == "filesite"


def test_config_path_from_env(config_file):
    settings = load_settings(env={"UNIFI_CONFIG": str(config_file)})
    assert settings.site == "filesite"


def test_explicit_missing_file(tmp_path):
    missing = tmp_path / "missing.yaml"
    with pytest.raises(ConfigError, match="config file not found"):
        load_settings(missing, env={})


def test_missing_file_from_env_is_explicit(tmp_path):
    env = {"UNIFI_CONFIG": str(tmp_path / "missing.yaml")}
    with pytest.raises(ConfigError):
        load_settings(env=env)


def test_invalid_yaml(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("host: [unclosed\n")
    with pytest.raises(ConfigError, match="failed to read config file"):
        load_settings(bad, env={})


def test_non_mapping_yaml(tmp_path):
    bad = tmp_path / "list.yaml"
    bad.write_text("- a\n- b\n")
    with pytest.raises(ConfigError, match="expected a mapping"):
        load_yaml(bad)


def test_empty_yaml(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_yaml(empty) == {}


def test_invalid_value(tmp_path):
    env = {"UNIFI_TIMEOUT": "soon"}
    with pytest.raises(ConfigError, match="invalid configuration"):
        load_settings(env=env)


def test_resolve_config_path_precedence(tmp_path, isolated_config):
    cli_path = tmp_path / "cli.yaml"
    env = {"UNIFI_CONFIG": str(tmp_path / "env.yaml")}
    assert resolve_config_path(cli_path, env) == (cli_path, True)
    assert resolve_config_path(None, env) == (tmp_path / "env.yaml", True)
    assert resolve_config_path(None, {}) == (
        isolated_config / ".unifi-cli.yaml",
        False,
    )


def test_validate_requires_host():
    with pytest.raises(ConfigError) as exc:
        validate_settings(Settings(api_key="k"))
    assert str(exc.value) == (
        "host is required (set via --host, UNIFI_HOST, or config file)"
    )


def test_validate_requires_api_key():
    with pytest.raises(ConfigError) as exc:
        validate_settings(Settings(host="https://h"))
    assert str(exc.value) == (
        "API key is required (set via UNIFI_API_KEY or config file)"
    )


def test_validate_passes_complete_settings():
    settings = Settings(host="https://h", api_key="k")
    assert validate_settings(settings) is settings
