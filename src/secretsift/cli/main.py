"""Click CLI entry point for secretsift."""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from secretsift._version import __version__
from secretsift.core.output import error_console


@click.group()
@click.version_option(version=__version__, prog_name="secretsift")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """secretsift - heuristic hard-coded secret scanner.

    Flag likely hard-coded secrets in a snippet of source text.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=error_console, show_path=False)],
        )


# Import and register subcommands
from secretsift.cli.scan_cmd import scan  # noqa: E402
from secretsift.cli.mask_cmd import mask  # noqa: E402
from secretsift.cli.demo_cmd import demo  # noqa: E402

cli.add_command(scan)
cli.add_command(mask)
cli.add_command(demo)


if __name__ == "__main__":
    cli()
