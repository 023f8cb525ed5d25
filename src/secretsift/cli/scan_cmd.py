"""secretsift scan command."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from secretsift.core.config import load_config
from secretsift.core.exceptions import SecretSiftError
from secretsift.core.output import error_console, print_scan_result, result_to_json
from secretsift.scanner.engine import SecretScanner


@click.command()
@click.argument("text", required=False)
@click.option("--json", "as_json", is_flag=True, help="Emit findings as JSON")
@click.option(
    "--config",
    "config_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory containing secretsift.toml (defaults to cwd)",
)
@click.option("--no-fail", is_flag=True, help="Exit 0 even when findings are present")
def scan(text: str | None, as_json: bool, config_dir: Path | None, no_fail: bool):
    """Scan source TEXT for likely hard-coded secrets.

    TEXT is read from standard input when omitted or given as "-".
    Exits 1 when findings are present, 2 on invalid input or config.
    """
    if text is None or text == "-":
        text = click.get_text_stream("stdin").read()

    try:
        config = load_config(config_dir or Path.cwd())
        scanner = SecretScanner(config.scan)
        result = scanner.scan(text)
    except SecretSiftError as exc:
        error_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(2)

    if as_json or config.output.format == "json":
        click.echo(result_to_json(result))
    else:
        print_scan_result(result)

    if result.any_found and config.output.fail_on_findings and not no_fail:
        sys.exit(1)
