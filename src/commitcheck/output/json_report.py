"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from commitcheck.lint.models import LintReport


def to_dict(report: LintReport) -> Dict[str, Any]:
    """Convert a LintReport to a JSON-serialisable dict."""
    results: List[Dict[str, Any]] = []
    for r in report.results:
        results.append({
            "header": r.header,
            "skipped": r.skipped,
            "valid": r.valid,
            "violations": [
                {"rule": v.rule, "severity": v.severity, "message": v.message}
                for v in r.violations
            ],
        })

    return {
        "version": "1.0",
        "valid": report.valid,
        "total": report.total,
        "skipped": report.skipped_count,
        "errors": report.error_count,
        "warnings": report.warning_count,
        "results": results,
        "duration_ms": report.duration_ms,
    }


def render(report: LintReport) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(report), indent=2)
