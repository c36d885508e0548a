"""Tests for the evaluator — ignores, header-format, rule outcomes, batches."""

import pytest

from commitcheck import evaluate
from commitcheck.config.schema import ConfigurationError
from commitcheck.ignores import prefix_matcher
from commitcheck.lint.evaluator import Linter
from commitcheck.lint.models import EvaluationResult, LintReport, Violation
from commitcheck.rules.models import Rule, RuleId, RuleSet, RuleSetting
from commitcheck.rules.registry import default_registry

REFERENCE_PATTERN = r"^([a-zA-Z]+)(\([^)]+\))?:\s*(.*)$"
REFERENCE_CORRESPONDENCE = ["type", "scope", "subject"]


class TestIgnores:
    def test_merge_message_skipped(self, reference_linter, merge_message):
        result = reference_linter.lint(merge_message)
        assert result.skipped is True
        assert result.violations == ()
        assert result.parsed is None

    def test_skipped_is_valid(self, reference_linter, merge_message):
        assert reference_linter.lint(merge_message).valid is True

    def test_raising_predicate_does_not_skip(self):
        def broken(message):
            raise RuntimeError("boom")

        rule_set = RuleSet([RuleSetting(RuleId.TYPE_EMPTY, "error", "never")])
        result = Linter(rule_set, [broken]).lint("fix: something")
        assert result.skipped is False
        assert result.violations == ()


class TestReferenceConfig:
    def test_conventional_header_passes(self, reference_linter):
        result = reference_linter.lint("feat(parser): add header support")
        assert result.skipped is False
        assert result.violations == ()
        assert result.parsed.type == "feat"
        assert result.parsed.scope == "parser"
        assert result.parsed.subject == "add header support"

    def test_empty_subject_allowed_when_rule_off(self, reference_linter):
        result = reference_linter.lint("fix:")
        assert result.violations == ()
        assert result.valid is True

    def test_unknown_type_is_error(self, reference_linter):
        result = reference_linter.lint("feature: add thing")
        assert [v.rule for v in result.violations] == ["type-enum"]
        assert result.valid is False

    def test_warning_only_message_is_valid(self, reference_linter):
        result = reference_linter.lint("fix: handle nulls\nno blank line before body")
        assert [v.rule for v in result.errors] == []
        assert [v.rule for v in result.warnings] == ["body-leading-blank"]
        assert result.valid is True


class TestHeaderFormat:
    def test_reported_first(self, default_linter):
        result = default_linter.lint("not conventional")
        assert [v.rule for v in result.violations] == [
            "header-format",
            "subject-empty",
            "type-empty",
        ]
        assert result.violations[0].severity == "error"

    @pytest.mark.parametrize("raw", ["", "   \n\n", "# only a comment\n"])
    def test_empty_message_does_not_crash(self, default_linter, raw):
        result = default_linter.lint(raw)
        assert result.skipped is False
        assert result.violations[0].rule == "header-format"
        assert result.header == ""

    def test_body_still_checked(self, default_linter):
        result = default_linter.lint("not conventional\n\n" + "x" * 120)
        rules = [v.rule for v in result.violations]
        assert rules[0] == "header-format"
        assert "body-max-line-length" in rules


class TestEvaluate:
    def test_subject_empty_off_gives_no_violations(self):
        rule_set = RuleSet([RuleSetting(RuleId.SUBJECT_EMPTY, "off", "never")])
        result = evaluate("fix:", rule_set, (), REFERENCE_PATTERN, REFERENCE_CORRESPONDENCE)
        assert result.violations == ()

    def test_subject_empty_error(self):
        rule_set = RuleSet([RuleSetting(RuleId.SUBJECT_EMPTY, "error", "never")])
        result = evaluate("fix:", rule_set, (), REFERENCE_PATTERN, REFERENCE_CORRESPONDENCE)
        assert result.violations == (
            Violation(rule="subject-empty", severity="error", message="subject may not be empty"),
        )

    def test_correspondence_mismatch_raises_before_ignores(self):
        with pytest.raises(ConfigurationError):
            evaluate(
                "Merge branch 'main'",
                RuleSet(),
                [prefix_matcher("Merge ")],
                r"^(\w+): (.*)$",
                ["type", "scope", "subject"],
            )

    def test_deterministic(self, message_with_body_and_footer):
        rule_set = RuleSet([
            RuleSetting(RuleId.BODY_MAX_LINE_LENGTH, "warning", "always", 10),
            RuleSetting(RuleId.FOOTER_EMPTY, "error", "always"),
        ])
        first = evaluate(message_with_body_and_footer, rule_set)
        second = evaluate(message_with_body_and_footer, rule_set)
        assert first == second
        assert [v.rule for v in first.violations] == ["body-max-line-length", "footer-empty"]

    def test_off_rules_never_reported(self):
        rule_set = RuleSet([RuleSetting(RuleId.TYPE_EMPTY, "off", "never")])
        result = evaluate("feat: x", rule_set, (), r"^(\w*): (.*)$", ["scope", "subject"])
        assert result.violations == ()


class TestRuleFailures:
    def test_raising_rule_becomes_error(self):
        def boom(parsed, when, value):
            raise ValueError("bad state")

        registry = default_registry()
        registry.register(Rule(id=RuleId.BODY_EMPTY, description="broken", check=boom))
        rule_set = RuleSet([
            RuleSetting(RuleId.BODY_EMPTY, "warning"),
            RuleSetting(RuleId.TYPE_EMPTY, "error", "never"),
        ])
        result = Linter(rule_set, registry=registry).lint("fix: x")
        assert len(result.violations) == 1
        violation = result.violations[0]
        assert violation.rule == "body-empty"
        assert violation.severity == "error"
        assert "ValueError" in violation.message


class TestLintMany:
    def test_report_counts(self, reference_linter, merge_message):
        report = reference_linter.lint_many([
            "feat: add thing",
            merge_message,
            "feature: add thing",
            "fix: handle nulls\nno blank line before body",
        ])
        assert isinstance(report, LintReport)
        assert report.total == 4
        assert report.skipped_count == 1
        assert report.error_count == 1
        assert report.warning_count == 1
        assert report.valid is False
        assert report.duration_ms >= 0

    def test_empty_batch_is_valid(self, reference_linter):
        report = reference_linter.lint_many([])
        assert report.total == 0
        assert report.valid is True


class TestResultModel:
    def test_header_without_parse(self):
        assert EvaluationResult(skipped=True).header == ""

    def test_violation_str(self):
        v = Violation(rule="type-enum", severity="error", message="type must be one of [feat]")
        assert str(v) == "error type-enum: type must be one of [feat]"
