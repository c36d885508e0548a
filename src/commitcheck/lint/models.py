"""Violation and result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from commitcheck.parser.models import ParsedMessage


@dataclass(frozen=True)
class Violation:
    """One failed rule for one message."""

    rule: str  # rule id value, or "header-format"
    severity: str  # warning | error
    message: str

    def __str__(self) -> str:
        return f"{self.severity} {self.rule}: {self.message}"


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of linting a single message."""

    skipped: bool = False
    violations: Tuple[Violation, ...] = ()
    parsed: Optional[ParsedMessage] = field(default=None, compare=False, repr=False)

    @property
    def errors(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "error"]

    @property
    def warnings(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "warning"]

    @property
    def valid(self) -> bool:
        """True when no violation is an error (warnings do not fail a message)."""
        return not self.errors

    @property
    def header(self) -> str:
        return self.parsed.header if self.parsed is not None else ""


@dataclass
class LintReport:
    """Results for a batch of messages, e.g. a commit range."""

    results: List[EvaluationResult] = field(default_factory=list)
    duration_ms: float = 0.0

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def skipped_count(self) -> int:
        return sum(1 for r in self.results if r.skipped)

    @property
    def error_count(self) -> int:
        return sum(len(r.errors) for r in self.results)

    @property
    def warning_count(self) -> int:
        return sum(len(r.warnings) for r in self.results)

    @property
    def valid(self) -> bool:
        return all(r.valid for r in self.results)
