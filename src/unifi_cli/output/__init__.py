"""Output renderers: tables (tabulate) and JSON."""

from .formatting import format_bytes, format_uptime
from .json_writer import to_records, write_json
from .table import (
    CLIENT_HEADERS,
    DEFAULT_TABLE_FORMAT,
    TABLE_FORMATS,
    client_row,
    render_clients_table,
    render_sites_table,
)

__all__ = [
    "CLIENT_HEADERS",
    "DEFAULT_TABLE_FORMAT",
    "TABLE_FORMATS",
    "client_row",
    "format_bytes",
    "format_uptime",
    "render_clients_table",
    "render_sites_table",
    "to_records",
    "write_json",
]
