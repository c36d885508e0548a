"""Scope rules."""

from __future__ import annotations

from typing import Any

from commitcheck.parser.models import ParsedMessage
from commitcheck.rules.builtin.common import (
    case_check,
    empty_check,
    enum_check,
    validate_cases,
    validate_str_list,
)
from commitcheck.rules.models import Outcome, Rule, RuleId


def _scopes(scope: str) -> list[str]:
    # "api,parser" and "api/parser" both name two scopes
    return [s.strip() for s in scope.replace("/", ",").split(",") if s.strip()]


def _scope_enum(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    if not value or not parsed.scope:
        return True, ""
    for scope in _scopes(parsed.scope):
        ok, message = enum_check("scope", scope, when, value)
        if not ok:
            return ok, message
    return True, ""


def _scope_case(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    if not parsed.scope:
        return True, ""
    for scope in _scopes(parsed.scope):
        ok, message = case_check("scope", scope, when, value)
        if not ok:
            return ok, message
    return True, ""


def _scope_empty(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return empty_check("scope", parsed.scope, when)


SCOPE_ENUM = Rule(
    id=RuleId.SCOPE_ENUM,
    description="Scope must be one of the configured values.",
    check=_scope_enum,
    default_value=[],
    validate=validate_str_list,
)

SCOPE_CASE = Rule(
    id=RuleId.SCOPE_CASE,
    description="Scope must be written in the configured case.",
    check=_scope_case,
    default_value="lower-case",
    validate=validate_cases,
)

SCOPE_EMPTY = Rule(
    id=RuleId.SCOPE_EMPTY,
    description="Scope must be empty (always) or present (never).",
    check=_scope_empty,
)

ALL_SCOPE_RULES = [SCOPE_ENUM, SCOPE_CASE, SCOPE_EMPTY]
