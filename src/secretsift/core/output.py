"""Rich terminal formatting for secretsift output."""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from secretsift.core.models import Finding, FindingKind, ScanResult

console = Console()
error_console = Console(stderr=True)


KIND_ICONS = {
    FindingKind.ASSIGNMENT_MATCH: "[red]●[/red]",
    FindingKind.KEYWORD_MATCH: "[yellow]●[/yellow]",
}

KIND_LABELS = {
    FindingKind.ASSIGNMENT_MATCH: "WARNING",
    FindingKind.KEYWORD_MATCH: "NOTE",
}

CLEAN_MESSAGE = "No obvious hard-coded secrets detected by this simple heuristic."


def format_finding(finding: Finding) -> str:
    """Format a single finding for terminal output."""
    icon = KIND_ICONS.get(finding.kind, "●")
    label = KIND_LABELS.get(finding.kind, "")
    location = f"  [dim]@{finding.offset}[/dim]" if finding.offset is not None else ""

    text = f"  {icon} {label}: {escape(finding.message)}{location}"
    detail = f"     Reason: {finding.reason_text}"
    if finding.keywords:
        detail += f" ({', '.join(finding.keywords)})"
    return f"{text}\n{detail}"


def print_scan_result(result: ScanResult, out: Console | None = None) -> None:
    """Print the scan result as a panel."""
    out = out or console

    if result.is_clean:
        out.print(Panel(
            f"  [green]{CLEAN_MESSAGE}[/green]",
            title="[bold]secretsift[/bold]",
            border_style="green",
            padding=(0, 1),
        ))
        return

    lines = [""]
    for finding in result.findings:
        lines.append(format_finding(finding))
        lines.append("")

    count = len(result.assignment_findings)
    lines.append(
        f"  {count} suspected secret(s) | "
        f"keyword hint: {'yes' if result.keyword_finding else 'no'}"
    )
    lines.append("  [dim]Move secrets to environment variables or a secret manager.[/dim]")

    color = "red" if count else "yellow"
    out.print(Panel(
        "\n".join(lines),
        title="[bold]secretsift report[/bold]",
        border_style=color,
        padding=(0, 1),
    ))


def result_to_json(result: ScanResult) -> str:
    """Serialize a scan result for machine consumption."""
    return json.dumps(result.to_dict(), indent=2)
