"""Rule registry — binds rule ids to predicates and resolves config into a RuleSet."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from commitcheck.config.schema import (
    WHEN_VALUES,
    CommitCheckConfig,
    ConfigurationError,
    normalise_severity,
)
from commitcheck.rules.models import Rule, RuleId, RuleSet, RuleSetting
from commitcheck.rules.presets import resolve_preset


class RuleRegistry:
    """Central store for the built-in rules, keyed by RuleId."""

    def __init__(self) -> None:
        self._rules: Dict[RuleId, Rule] = {}

    # ---- registration ----

    def register(self, rule: Rule) -> None:
        self._rules[rule.id] = rule

    def register_many(self, rules: list[Rule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[Rule]:
        return list(self._rules.values())

    def get(self, rule_id: RuleId) -> Rule:
        try:
            return self._rules[rule_id]
        except KeyError:
            raise ConfigurationError(f"No implementation registered for rule {rule_id.value}") from None

    def value_for(self, setting: RuleSetting) -> Any:
        """Configured value, falling back to the rule's default."""
        if setting.value is not None:
            return setting.value
        return self.get(setting.rule).default_value

    # ---- config resolution ----

    def setting_from_entry(
        self,
        name: str,
        entry: List[Any],
        previous: Optional[RuleSetting] = None,
    ) -> RuleSetting:
        """Turn ``[severity]`` / ``[severity, when]`` / ``[severity, when, value]`` into a RuleSetting.

        Parts left out are inherited from *previous* (the preset's setting).
        """
        rule_id = RuleId.parse(name)
        rule = self.get(rule_id)
        if not entry:
            raise ConfigurationError(f"Rule '{name}' needs at least a severity")

        severity = normalise_severity(entry[0])

        when = previous.when if previous else "always"
        if len(entry) >= 2:
            when = entry[1]
            if when not in WHEN_VALUES:
                raise ConfigurationError(
                    f"Rule '{name}': expected 'always' or 'never', got {when!r}"
                )

        value = previous.value if previous else None
        if len(entry) >= 3:
            value = entry[2]
            if rule.validate is not None:
                try:
                    rule.validate(value)
                except ConfigurationError as exc:
                    raise ConfigurationError(f"Rule '{name}': {exc}") from exc

        return RuleSetting(rule=rule_id, severity=severity, when=when, value=value)

    def apply_entries(
        self,
        merged: Dict[RuleId, RuleSetting],
        entries: Mapping[str, List[Any]],
    ) -> None:
        """Merge *entries* into *merged*; overrides keep the rule's position."""
        for name, entry in entries.items():
            rule_id = RuleId.parse(name)
            merged[rule_id] = self.setting_from_entry(name, entry, merged.get(rule_id))


def default_registry() -> RuleRegistry:
    from commitcheck.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    registry.register_many(ALL_BUILTIN_RULES)
    return registry


def build_rule_set(
    config: CommitCheckConfig,
    root: Optional[Path] = None,
    registry: Optional[RuleRegistry] = None,
) -> RuleSet:
    """Resolve ``extends`` presets in order, then apply the local ``rules`` overrides."""
    registry = registry or default_registry()
    merged: Dict[RuleId, RuleSetting] = {}

    for preset in config.extends:
        registry.apply_entries(merged, resolve_preset(preset, root))

    registry.apply_entries(merged, config.rules)
    return RuleSet(list(merged.values()))
