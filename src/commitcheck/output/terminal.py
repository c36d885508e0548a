"""Rich terminal reporter — colour, icons, severity pills."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from commitcheck.lint.models import LintReport

_SEVERITY_STYLE = {
    "error": "bold white on red",
    "warning": "bold black on yellow",
}

_SEVERITY_ICON = {
    "error": "✖",
    "warning": "⚠",
}


def _severity_pill(severity: str) -> Text:
    style = _SEVERITY_STYLE.get(severity, "")
    icon = _SEVERITY_ICON.get(severity, "")
    return Text(f" {icon} {severity.upper()} ", style=style)


def render(
    report: LintReport,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print lint results to the terminal using Rich."""
    console = console or Console(stderr=True)

    flagged = [r for r in report.results if not r.skipped and r.violations]
    if not flagged:
        console.print()
        console.print("[bold green]✔ All commit messages pass.[/bold green]")
        if show_summary:
            _print_summary(console, report)
        return

    console.print()
    table = Table(
        title="Commit Message Problems",
        show_lines=True,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Severity", justify="center", width=12)
    table.add_column("Rule", style="cyan", min_width=18)
    table.add_column("Header", style="magenta")
    table.add_column("Message", min_width=20)

    for result in flagged:
        for violation in result.violations:
            table.add_row(
                _severity_pill(violation.severity),
                violation.rule,
                result.header or "-",
                violation.message,
            )

    console.print(table)

    if show_summary:
        _print_summary(console, report)

    console.print()
    if report.valid:
        console.print(
            "[bold yellow]⚠ Warnings found, no errors. Messages accepted.[/bold yellow]"
        )
    else:
        console.print(
            "[bold red]✖ Errors found. Commit message(s) rejected.[/bold red]"
        )


def _print_summary(console: Console, report: LintReport) -> None:
    console.print()
    console.print(f"[dim]Messages:[/dim]  {report.total}")
    console.print(f"[dim]Skipped:[/dim]   {report.skipped_count}")
    console.print(f"[dim]Errors:[/dim]    {report.error_count}")
    console.print(f"[dim]Warnings:[/dim]  {report.warning_count}")
    console.print(f"[dim]Duration:[/dim]  {report.duration_ms:.0f}ms")
