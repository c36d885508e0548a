"""Rule data model — a closed set of rule ids, each bound to one predicate."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

from commitcheck.config.schema import ConfigurationError, Severity, When
from commitcheck.parser.models import ParsedMessage

# (passed, human readable message)
Outcome = Tuple[bool, str]
Check = Callable[[ParsedMessage, str, Any], Outcome]


class RuleId(str, Enum):
    BODY_EMPTY = "body-empty"
    BODY_LEADING_BLANK = "body-leading-blank"
    BODY_MAX_LINE_LENGTH = "body-max-line-length"
    BODY_MIN_LENGTH = "body-min-length"
    FOOTER_EMPTY = "footer-empty"
    FOOTER_LEADING_BLANK = "footer-leading-blank"
    FOOTER_MAX_LINE_LENGTH = "footer-max-line-length"
    HEADER_FULL_STOP = "header-full-stop"
    HEADER_MAX_LENGTH = "header-max-length"
    HEADER_MIN_LENGTH = "header-min-length"
    HEADER_TRIM = "header-trim"
    SCOPE_CASE = "scope-case"
    SCOPE_EMPTY = "scope-empty"
    SCOPE_ENUM = "scope-enum"
    SUBJECT_CASE = "subject-case"
    SUBJECT_EMPTY = "subject-empty"
    SUBJECT_FULL_STOP = "subject-full-stop"
    SUBJECT_MAX_LENGTH = "subject-max-length"
    TYPE_CASE = "type-case"
    TYPE_EMPTY = "type-empty"
    TYPE_ENUM = "type-enum"
    TYPE_MAX_LENGTH = "type-max-length"

    @classmethod
    def parse(cls, name: str) -> "RuleId":
        """Look up a rule id by its configured name; unknown names are config errors."""
        try:
            return cls(name)
        except ValueError:
            raise ConfigurationError(f"Unknown rule: {name!r}") from None


# Synthetic rule reported when the header pattern does not match.
HEADER_FORMAT = "header-format"


@dataclass(frozen=True)
class Rule:
    """A built-in rule: its id, a description, and the predicate implementing it."""

    id: RuleId
    description: str
    check: Check
    default_value: Any = None
    # raises ConfigurationError for a bad configured value
    validate: Optional[Callable[[Any], None]] = None


@dataclass(frozen=True)
class RuleSetting:
    """One active entry of a RuleSet: which rule, how severe, and its parameters."""

    rule: RuleId
    severity: Severity
    when: When = "always"
    value: Any = None

    @property
    def enabled(self) -> bool:
        return self.severity != "off"


class RuleSet:
    """Ordered, immutable sequence of RuleSettings with unique rule ids."""

    __slots__ = ("_settings",)

    def __init__(self, settings: Sequence[RuleSetting] = ()) -> None:
        seen: set[RuleId] = set()
        for s in settings:
            if s.rule in seen:
                raise ConfigurationError(f"Rule listed twice in rule set: {s.rule.value}")
            seen.add(s.rule)
        self._settings: Tuple[RuleSetting, ...] = tuple(settings)

    def __iter__(self) -> Iterator[RuleSetting]:
        return iter(self._settings)

    def __len__(self) -> int:
        return len(self._settings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return self._settings == other._settings

    def __repr__(self) -> str:
        return f"RuleSet({[s.rule.value for s in self._settings]})"

    def get(self, rule: RuleId) -> Optional[RuleSetting]:
        for s in self._settings:
            if s.rule == rule:
                return s
        return None

    def active(self) -> list[RuleSetting]:
        """Settings whose severity is not ``off``, in definition order."""
        return [s for s in self._settings if s.enabled]
