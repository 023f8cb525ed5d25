"""secretsift demo command — the insecure vs. secure walkthrough."""

from __future__ import annotations

import click
from rich.markup import escape

from secretsift.core.output import console, print_scan_result
from secretsift.core.secrets import get_env_secret, mask_secret, use_secret
from secretsift.scanner.engine import scan as scan_text

DEMO_ENV_VAR = "MY_APP_API_KEY"

# Placeholder only; never put a real key here.
SIMULATED_SOURCE = 'String apiKey = "<HARD_CODED_SECRET>"; // DO NOT COMMIT real keys'


def run_insecure_example() -> bool:
    hard_coded_api_key = "<HARD_CODED_SECRET>"
    console.print("  [red]Insecure:[/red] key is hard-coded in source.")
    console.print(f"  Logged as (masked here): {escape(mask_secret(hard_coded_api_key))}")
    ok = use_secret(hard_coded_api_key)
    console.print(f"  Call successful: {ok}")
    return ok


def run_secure_example(env_var: str = DEMO_ENV_VAR) -> bool:
    api_key = get_env_secret(env_var)
    if api_key is None:
        console.print(f"  [yellow]Secure:[/yellow] {env_var} not found in environment. Abort or use safe fallback.")
        return False
    console.print(f"  [green]Secure:[/green] using API key (masked) = {escape(mask_secret(api_key))}")
    ok = use_secret(api_key)
    console.print(f"  Call successful: {ok}")
    return ok


@click.command()
@click.option("--env", "env_var", default=DEMO_ENV_VAR, show_default=True, help="Environment variable for the secure example")
def demo(env_var: str):
    """Walk through insecure and secure secret handling, then run the detector."""
    console.print("[bold]=== Insecure example (placeholder only) ===[/bold]")
    run_insecure_example()

    console.print("\n[bold]=== Secure example ===[/bold]")
    run_secure_example(env_var)

    console.print("\n[bold]=== Detector on a simulated source string ===[/bold]")
    print_scan_result(scan_text(SIMULATED_SOURCE))
