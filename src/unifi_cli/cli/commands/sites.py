"""Sites commands - list controller sites visible to the API key."""

import sys

import click

from ...api import APIClient
from ...context import pass_context
from ...errors import APIError, UnifiError
from ...output import DEFAULT_TABLE_FORMAT, render_sites_table, write_json


@click.group()
def sites():
    """View sites on your UniFi controller."""


@sites.command("list")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
    help="Output format",
)
@pass_context
def list_sites(ctx, output_format):
    """List sites (use the site name with --site)."""
    try:
        settings = ctx.settings()
        with APIClient(settings) as api:
            try:
                records = api.list_sites()
            except APIError as e:
                raise APIError(f"failed to list sites: {e}") from e
    except UnifiError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_format == "json":
        write_json(records)
    else:
        click.echo(render_sites_table(records, DEFAULT_TABLE_FORMAT))
