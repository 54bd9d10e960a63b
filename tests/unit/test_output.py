"""Unit tests for table and JSON output."""

import io
import json

import pytest

from unifi_cli.models import Client
from unifi_cli.output import (
    CLIENT_HEADERS,
    client_row,
    format_bytes,
    format_uptime,
    render_clients_table,
    render_sites_table,
    write_json,
)


@pytest.mark.parametrize(
    "count,expected",
    [
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (10 * 1024, "10.0 KB"),
        (5 * 1024 * 1024, "5.00 MB"),
        (3 * 1024 ** 3, "3.00 GB"),
        (1024 ** 4, "1.00 TB"),
    ],
)
def test_format_bytes(count, expected):
    assert format_bytes(count) == expected


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (0, "0m"),
        (59, "0m"),
        (60, "1m"),
        (3600, "1h"),
        (5400, "1h 30m"),
        (86400, "1d"),
        (90061, "1d 1h 1m"),
        (86400 + 120, "1d 2m"),
    ],
)
def test_format_uptime(seconds, expected):
    assert format_uptime(seconds) == expected


def test_client_row_wireless():
    client = Client(
        name="iPhone",
        mac="aa:bb:cc:dd:ee:01",
        ip="192.168.1.100",
        essid="HomeWiFi",
        signal=-45,
        uptime=3600,
        rx_bytes=2048,
        tx_bytes=512,
    )
    assert client_row(client) == [
        "iPhone (aa:bb:cc:dd:ee:01)",
        "192.168.1.100",
        "Wireless",
        "HomeWiFi",
        "-45 dBm",
        "1h",
        "2.00 KB / 512 B",
    ]


def test_client_row_wired_leaves_radio_columns_blank():
    row = client_row(Client(name="Desktop", is_wired=True, essid="x", signal=-1))
    assert row[2:5] == ["Wired", "", ""]


def test_render_clients_table(sample_clients):
    table = render_clients_table(sample_clients)
    lines = table.splitlines()
    for header in CLIENT_HEADERS:
        assert header in lines[0]
    # header, rule, one line per client
    assert len(lines) == 2 + len(sample_clients)
    assert "iPhone (aa:bb:cc:dd:ee:01)" in table
    assert "-45 dBm" in table


def test_render_clients_table_format(sample_clients):
    table = render_clients_table(sample_clients[:1], "github")
    assert table.startswith("|")


def test_render_sites_table():
    table = render_sites_table(
        [{"name": "default", "desc": "Default", "_id": "s1"}, {"name": "lab"}]
    )
    assert "Description" in table
    assert "Default" in table
    assert "lab" in table


def test_write_json_uses_controller_names(sample_clients):
    buf = io.StringIO()
    write_json(sample_clients[:2], output=buf)
    text = buf.getvalue()
    assert text.endswith("\n")
    assert "\n  " in text
    records = json.loads(text)
    assert [r["name"] for r in records] == ["iPhone", "MacBook"]
    assert "tx_bytes-r" in records[0]
    assert records[1]["is_wired"] is True


def test_write_json_compact_and_dicts():
    buf = io.StringIO()
    write_json([{"name": "default"}], output=buf, pretty=False)
    assert buf.getvalue() == '[{"name": "default"}]\n'


def test_write_json_empty():
    buf = io.StringIO()
    write_json([], output=buf)
    assert json.loads(buf.getvalue()) == []
