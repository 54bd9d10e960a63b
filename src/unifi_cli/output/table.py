"""Table rendering for clients and sites."""

from typing import Any, Dict, List, Sequence

from tabulate import tabulate, tabulate_formats

from ..models import Client
from .formatting import format_bytes, format_uptime

CLIENT_HEADERS = ["Name", "IP", "Type", "SSID", "Signal", "Uptime", "RX/TX"]
SITE_HEADERS = ["Name", "Description", "ID"]
DEFAULT_TABLE_FORMAT = "simple"
TABLE_FORMATS = sorted(tabulate_formats)


def client_row(client: Client) -> List[str]:
    """Build one table row; the MAC rides along with the name to save a column."""

    rx_tx = f"{format_bytes(client.rx_bytes)} / {format_bytes(client.tx_bytes)}"
    return [
        f"{client.display_name} ({client.mac})",
        client.ip,
        client.connection_type,
        client.ssid,
        client.signal_text,
        format_uptime(client.uptime),
        rx_tx,
    ]


def render_clients_table(
    clients: Sequence[Client], tablefmt: str = DEFAULT_TABLE_FORMAT
) -> str:
    return tabulate(
        [client_row(c) for c in clients],
        headers=CLIENT_HEADERS,
        tablefmt=tablefmt,
        disable_numparse=True,
    )


def render_sites_table(
    sites: Sequence[Dict[str, Any]], tablefmt: str = DEFAULT_TABLE_FORMAT
) -> str:
    rows = [
        [site.get("name", ""), site.get("desc", ""), site.get("_id", "")]
        for site in sites
    ]
    return tabulate(
        rows, headers=SITE_HEADERS, tablefmt=tablefmt, disable_numparse=True
    )
