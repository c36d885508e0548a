"""Reporters and the exit-code contract for host tools."""

from __future__ import annotations

from commitcheck.lint.models import LintReport


def exit_code(report: LintReport) -> int:
    """0 when no evaluated message has an error-severity violation, else 1."""
    return 0 if report.valid else 1


def render(report: LintReport, fmt: str = "terminal", *, show_summary: bool = True) -> str:
    """Render *report* in *fmt*. ``terminal`` prints and returns an empty string."""
    from commitcheck.output import json_report, terminal, text

    if fmt == "json":
        return json_report.render(report)
    if fmt == "text":
        return text.render(report)
    if fmt == "terminal":
        terminal.render(report, show_summary=show_summary)
        return ""
    raise ValueError(f"Unknown output format: {fmt}")


__all__ = ["exit_code", "render"]
