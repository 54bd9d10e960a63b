"""Clients commands - list connected clients with optional filtering."""

import logging
import sys

import click

from ...api import APIClient
from ...context import pass_context
from ...errors import APIError, UnifiError
from ...filtering import FIELDS, apply_filter, build_where_clause, field_names
from ...output import (
    DEFAULT_TABLE_FORMAT,
    TABLE_FORMATS,
    render_clients_table,
    write_json,
)

logger = logging.getLogger(__name__)


@click.group()
def clients():
    """View connected clients on your UniFi network."""


@clients.command("list")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
    help="Output format",
)
@click.option(
    "--table-format",
    "tablefmt",
    type=click.Choice(TABLE_FORMATS),
    default=DEFAULT_TABLE_FORMAT,
    show_default=True,
    help="Table style (tabulate format name)",
)
@click.option("--wired", is_flag=True, help="Show only wired clients")
@click.option("--wireless", is_flag=True, help="Show only wireless clients")
@click.option("--blocked", is_flag=True, help="Show only blocked clients")
@click.option("--ap", "ap_mac", help="Filter by access point MAC address")
@click.option(
    "--filter",
    "where",
    help="SQL WHERE clause, e.g. \"signal >= -65 AND essid = 'HomeWiFi'\"",
)
@pass_context
def list_clients(
    ctx, output_format, tablefmt, wired, wireless, blocked, ap_mac, where
):
    """List currently connected clients.

    Convenience flags and --filter are combined with AND. Filter
    expressions support =, !=, <, <=, >, >=, BETWEEN, IN, LIKE, NOT, AND,
    OR and parentheses. Run `unifi clients fields` for the field list.

    Examples:

        # Wireless clients with a good signal
        unifi clients list --wireless --filter 'signal >= -60'

        # Clients on one of two SSIDs, as JSON
        unifi clients list -f json --filter "essid IN ('Home', 'Guest')"

        # Hostname pattern match (case-sensitive, % and _ wildcards)
        unifi clients list --filter "hostname LIKE 'iphone%'"
    """
    try:
        # Flag validation happens before any network traffic.
        where_clause = build_where_clause(
            wired=wired,
            wireless=wireless,
            blocked=blocked,
            ap_mac=ap_mac,
            where=where,
        )
        logger.debug("where clause: %r", where_clause)

        settings = ctx.settings()
        with APIClient(settings) as api:
            try:
                records = api.list_clients()
            except APIError as e:
                raise APIError(f"failed to list clients: {e}") from e

        matched = apply_filter(records, where_clause)
    except UnifiError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not matched:
        click.echo("No clients match the specified filters")
        return

    if output_format == "json":
        write_json(matched)
    else:
        click.echo(render_clients_table(matched, tablefmt))


@clients.command("fields")
def list_fields():
    """List the fields usable in --filter expressions and their types."""
    for name in field_names():
        click.echo(f"{name:<20} {FIELDS[name].type.value}")
