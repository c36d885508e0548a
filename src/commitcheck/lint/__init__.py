"""Rule evaluation — evaluator and result models."""

from commitcheck.lint.evaluator import Linter, evaluate
from commitcheck.lint.models import EvaluationResult, LintReport, Violation

__all__ = ["EvaluationResult", "LintReport", "Linter", "Violation", "evaluate"]
