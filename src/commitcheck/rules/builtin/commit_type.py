"""Type rules — allowed types, case, emptiness, length."""

from __future__ import annotations

from typing import Any

from commitcheck.parser.models import ParsedMessage
from commitcheck.rules.builtin.common import (
    case_check,
    empty_check,
    enum_check,
    max_length_check,
    validate_cases,
    validate_int,
    validate_str_list,
)
from commitcheck.rules.models import Outcome, Rule, RuleId


def _type_enum(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    if not value:
        return True, ""
    return enum_check("type", parsed.type, when, value)


def _type_case(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return case_check("type", parsed.type, when, value)


def _type_empty(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return empty_check("type", parsed.type, when)


def _type_max_length(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return max_length_check("type", parsed.type, value)


TYPE_ENUM = Rule(
    id=RuleId.TYPE_ENUM,
    description="Type must be one of the configured values.",
    check=_type_enum,
    default_value=[],
    validate=validate_str_list,
)

TYPE_CASE = Rule(
    id=RuleId.TYPE_CASE,
    description="Type must be written in the configured case.",
    check=_type_case,
    default_value="lower-case",
    validate=validate_cases,
)

TYPE_EMPTY = Rule(
    id=RuleId.TYPE_EMPTY,
    description="Type must be empty (always) or present (never).",
    check=_type_empty,
)

TYPE_MAX_LENGTH = Rule(
    id=RuleId.TYPE_MAX_LENGTH,
    description="Type must not exceed the configured length.",
    check=_type_max_length,
    default_value=20,
    validate=validate_int,
)

ALL_TYPE_RULES = [TYPE_ENUM, TYPE_CASE, TYPE_EMPTY, TYPE_MAX_LENGTH]
