"""commitcheck — lint commit messages against a configurable rule set."""

__version__ = "1.0.0"

from commitcheck.config import CommitCheckConfig, ConfigurationError, load_config
from commitcheck.lint import EvaluationResult, LintReport, Linter, Violation, evaluate

__all__ = [
    "CommitCheckConfig",
    "ConfigurationError",
    "EvaluationResult",
    "LintReport",
    "Linter",
    "Violation",
    "__version__",
    "evaluate",
    "load_config",
]
