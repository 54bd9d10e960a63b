"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from unifi_cli.cli import cli
from unifi_cli.models import Client


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the developer's real config and environment.

    HOME points at an empty temp dir so ~/.unifi-cli.yaml is never read,
    and every UNIFI_* variable is cleared.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for var in (
        "UNIFI_CONFIG",
        "UNIFI_HOST",
        "UNIFI_API_KEY",
        "UNIFI_SITE",
        "UNIFI_INSECURE",
        "UNIFI_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def controller_env(monkeypatch):
    """Minimal environment for commands that contact the controller."""
    monkeypatch.setenv("UNIFI_HOST", "https://unifi.example.com")
    monkeypatch.setenv("UNIFI_API_KEY", "test-key")


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["clients", "list", "--wired"])
        result.exit_code, result.output
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def sample_clients():
    """Five clients: three wireless (two on HomeWiFi), two wired, one blocked."""
    return [
        Client(
            mac="aa:bb:cc:dd:ee:01",
            name="iPhone",
            hostname="iphone-12",
            ip="192.168.1.100",
            is_wired=False,
            blocked=False,
            essid="HomeWiFi",
            ap_mac="11:22:33:44:55:66",
            signal=-45,
            uptime=3600,
        ),
        Client(
            mac="aa:bb:cc:dd:ee:02",
            name="MacBook",
            hostname="macbook-pro",
            ip="192.168.1.101",
            is_wired=True,
            blocked=False,
            signal=0,
            uptime=7200,
        ),
        Client(
            mac="aa:bb:cc:dd:ee:03",
            name="iPad",
            hostname="ipad-air",
            ip="192.168.1.102",
            is_wired=False,
            blocked=False,
            essid="GuestWiFi",
            ap_mac="11:22:33:44:55:77",
            signal=-70,
            uptime=1800,
        ),
        Client(
            mac="aa:bb:cc:dd:ee:04",
            name="Desktop",
            hostname="desktop-pc",
            ip="192.168.1.103",
            is_wired=True,
            blocked=True,
            signal=0,
            uptime=86400,
        ),
        Client(
            mac="aa:bb:cc:dd:ee:05",
            name="Android",
            hostname="android-phone",
            ip="192.168.1.104",
            is_wired=False,
            blocked=False,
            essid="HomeWiFi",
            ap_mac="11:22:33:44:55:66",
            signal=-55,
            uptime=5400,
        ),
    ]

