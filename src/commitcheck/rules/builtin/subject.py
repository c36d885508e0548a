"""Subject rules."""

from __future__ import annotations

from typing import Any

from commitcheck.parser.models import ParsedMessage
from commitcheck.rules.builtin.common import (
    case_check,
    empty_check,
    full_stop_check,
    max_length_check,
    validate_cases,
    validate_int,
    validate_str,
)
from commitcheck.rules.models import Outcome, Rule, RuleId


def _subject_case(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return case_check("subject", parsed.subject, when, value)


def _subject_empty(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return empty_check("subject", parsed.subject, when)


def _subject_full_stop(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return full_stop_check("subject", parsed.subject, when, value)


def _subject_max_length(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return max_length_check("subject", parsed.subject, value)


SUBJECT_CASE = Rule(
    id=RuleId.SUBJECT_CASE,
    description="Subject must (always) or must not (never) be in the configured case(s).",
    check=_subject_case,
    default_value=["sentence-case", "start-case", "pascal-case", "upper-case"],
    validate=validate_cases,
)

SUBJECT_EMPTY = Rule(
    id=RuleId.SUBJECT_EMPTY,
    description="Subject must be empty (always) or present (never).",
    check=_subject_empty,
)

SUBJECT_FULL_STOP = Rule(
    id=RuleId.SUBJECT_FULL_STOP,
    description="Subject must (always) or must not (never) end with the full stop character.",
    check=_subject_full_stop,
    default_value=".",
    validate=validate_str,
)

SUBJECT_MAX_LENGTH = Rule(
    id=RuleId.SUBJECT_MAX_LENGTH,
    description="Subject must not exceed the configured length.",
    check=_subject_max_length,
    default_value=72,
    validate=validate_int,
)

ALL_SUBJECT_RULES = [SUBJECT_CASE, SUBJECT_EMPTY, SUBJECT_FULL_STOP, SUBJECT_MAX_LENGTH]
