"""Rule evaluator — ignore filter, parse, then run every active rule.

Configuration problems (bad header pattern, correspondence mismatch,
unknown rules) raise ConfigurationError while the Linter is being built,
before any message is read. Everything that can go wrong with a message
itself becomes a Violation; no other exception leaves ``lint()``.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from commitcheck.config.schema import CommitCheckConfig
from commitcheck.ignores import IgnorePredicate, build_ignore_predicates, is_ignored
from commitcheck.lint.models import EvaluationResult, LintReport, Violation
from commitcheck.parser.message_parser import MessageParser
from commitcheck.rules.models import HEADER_FORMAT, Rule, RuleSet, RuleSetting
from commitcheck.rules.registry import RuleRegistry, build_rule_set, default_registry

logger = logging.getLogger(__name__)


class Linter:
    """A pre-flighted evaluator: rule set, ignores and parser bound once.

    Stateless between calls, so one Linter can lint any number of messages,
    from any number of threads.
    """

    def __init__(
        self,
        rule_set: RuleSet,
        ignore_predicates: Sequence[IgnorePredicate] = (),
        parser: Optional[MessageParser] = None,
        registry: Optional[RuleRegistry] = None,
    ) -> None:
        registry = registry or default_registry()
        self.rule_set = rule_set
        self.ignore_predicates: Tuple[IgnorePredicate, ...] = tuple(ignore_predicates)
        self.parser = parser or MessageParser()
        # resolve predicates and values now, not per message
        self._active: Tuple[Tuple[RuleSetting, Rule, Any], ...] = tuple(
            (setting, registry.get(setting.rule), registry.value_for(setting))
            for setting in rule_set.active()
        )

    @classmethod
    def from_config(
        cls,
        config: CommitCheckConfig,
        root: Optional[Path] = None,
        registry: Optional[RuleRegistry] = None,
    ) -> "Linter":
        """Build a Linter from a loaded config. Raises ConfigurationError."""
        registry = registry or default_registry()
        parser = MessageParser(
            config.parser.header_pattern,
            config.parser.header_correspondence,
            config.parser.comment_char,
        )
        rule_set = build_rule_set(config, root, registry)
        ignores = build_ignore_predicates(config.ignores)
        logger.debug(
            "Linter ready: %d active rule(s), %d ignore matcher(s)",
            len(rule_set.active()),
            len(ignores),
        )
        return cls(rule_set, ignores, parser, registry)

    def _is_ignored(self, raw: str) -> bool:
        try:
            return is_ignored(raw, self.ignore_predicates)
        except Exception:
            logger.warning("Ignore matcher raised; linting the message anyway", exc_info=True)
            return False

    def lint(self, raw: str) -> EvaluationResult:
        """Evaluate one raw commit message."""
        if self._is_ignored(raw):
            logger.debug("Skipping ignored message: %r", raw.split("\n", 1)[0])
            return EvaluationResult(skipped=True)

        parsed = self.parser.parse(raw)
        violations: List[Violation] = []

        if not parsed.header_matched:
            violations.append(
                Violation(
                    rule=HEADER_FORMAT,
                    severity="error",
                    message=(
                        f"header {parsed.header!r} does not match the pattern "
                        f"{self.parser.header_pattern!r}"
                    ),
                )
            )

        for setting, rule, value in self._active:
            try:
                ok, message = rule.check(parsed, setting.when, value)
            except Exception as exc:
                logger.warning("Rule %s raised on %r", setting.rule.value, parsed.header, exc_info=True)
                violations.append(
                    Violation(
                        rule=setting.rule.value,
                        severity="error",
                        message=f"rule failed to run: {type(exc).__name__}: {exc}",
                    )
                )
                continue
            if not ok:
                violations.append(
                    Violation(rule=setting.rule.value, severity=setting.severity, message=message)
                )

        return EvaluationResult(skipped=False, violations=tuple(violations), parsed=parsed)

    def lint_many(self, messages: Iterable[str]) -> LintReport:
        """Evaluate each message independently and aggregate a LintReport."""
        start = time.perf_counter()
        results = [self.lint(raw) for raw in messages]
        elapsed = (time.perf_counter() - start) * 1000
        return LintReport(results=results, duration_ms=round(elapsed, 2))


def evaluate(
    raw: str,
    rule_set: RuleSet,
    ignore_predicates: Sequence[IgnorePredicate] = (),
    header_pattern: Optional[str] = None,
    header_correspondence: Optional[Sequence[str]] = None,
) -> EvaluationResult:
    """Lint *raw* against *rule_set*.

    The parser is built before the message is looked at, so a header
    correspondence that does not match the pattern's capture groups raises
    ConfigurationError even for messages an ignore predicate would skip.
    """
    parser = MessageParser(header_pattern, header_correspondence)
    return Linter(rule_set, ignore_predicates, parser).lint(raw)
