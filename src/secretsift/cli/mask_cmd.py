"""secretsift mask command."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from secretsift.core.config import load_config
from secretsift.core.exceptions import SecretSiftError
from secretsift.core.output import console, error_console
from secretsift.core.secrets import get_env_secret, mask_secret


@click.command()
@click.argument("value", required=False)
@click.option("--env", "env_name", type=str, default=None, help="Read the secret from this environment variable")
@click.option("--visible", type=click.IntRange(min=0), default=None, help="Trailing characters to reveal")
def mask(value: str | None, env_name: str | None, visible: int | None):
    """Print a secret with all but its last few characters masked.

    Exits 1 when --env names an unset variable, 2 on usage or config errors.
    """
    if value is not None and env_name:
        raise click.UsageError("Provide either VALUE or --env NAME, not both")
    if value is None and not env_name:
        raise click.UsageError("Provide VALUE or --env NAME")

    try:
        config = load_config(Path.cwd())
    except SecretSiftError as exc:
        error_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(2)

    if visible is None:
        visible = config.mask.visible_chars

    if env_name:
        value = get_env_secret(env_name)
        if value is None:
            error_console.print(f"[yellow]{env_name} is not set in the environment.[/yellow]")
            sys.exit(1)

    console.print(mask_secret(value, visible, config.mask.placeholder), markup=False, highlight=False)
