"""unifi CLI main entry point with global options."""

import logging
import sys
from pathlib import Path

import click

from .. import __version__
from ..context import UnifiContext


def setup_logging(verbose: bool) -> None:
    """Route library logging to stderr; DEBUG with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="unifi")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default is $HOME/.unifi-cli.yaml, or $UNIFI_CONFIG)",
)
@click.option(
    "--host", help="Controller URL, e.g. https://unifi.example.com"
)
@click.option("--site", help="Site ID [default: default]")
@click.option(
    "--insecure/--secure",
    default=None,
    help="Skip TLS certificate verification [default: insecure]",
)
@click.option(
    "--timeout", type=float, help="Request timeout in seconds [default: 30]"
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, host, site, insecure, timeout, verbose):
    """Unifi Network CLI - inspect your UniFi network from the command line.

    Connection settings come from flags, then UNIFI_HOST / UNIFI_API_KEY /
    UNIFI_SITE / UNIFI_INSECURE / UNIFI_TIMEOUT, then the YAML config file.
    """
    ctx.ensure_object(UnifiContext)
    setup_logging(verbose)

    ctx.obj.config_path = config_path
    ctx.obj.verbose = verbose
    ctx.obj.overrides = {
        "host": host,
        "site": site,
        "insecure": insecure,
        "timeout": timeout,
    }


# Register commands at module level so tests can import cli with commands attached
from .commands.clients import clients  # noqa: E402
from .commands.sites import sites  # noqa: E402

cli.add_command(clients)
cli.add_command(sites)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
