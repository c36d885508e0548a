"""Plain-text reporter — one line per violation, for hooks and CI logs."""

from __future__ import annotations

from typing import List

from commitcheck.lint.models import LintReport


def render(report: LintReport) -> str:
    """Return diagnostics as ``<severity> <rule>: <message>`` lines.

    Each linted (non-skipped) message with violations is introduced by its
    header, so multi-message reports stay readable.
    """
    lines: List[str] = []
    for result in report.results:
        if result.skipped or not result.violations:
            continue
        lines.append(f"> {result.header}")
        lines.extend(str(v) for v in result.violations)
    lines.append(
        f"{report.error_count} error(s), {report.warning_count} warning(s) "
        f"in {report.total} message(s), {report.skipped_count} skipped"
    )
    return "\n".join(lines)
