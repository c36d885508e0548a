"""Rule engine — models, registry, presets, built-in rules."""

from commitcheck.rules.models import HEADER_FORMAT, Rule, RuleId, RuleSet, RuleSetting
from commitcheck.rules.registry import RuleRegistry, build_rule_set, default_registry

__all__ = [
    "HEADER_FORMAT",
    "Rule",
    "RuleId",
    "RuleRegistry",
    "RuleSet",
    "RuleSetting",
    "build_rule_set",
    "default_registry",
]
