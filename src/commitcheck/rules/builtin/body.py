"""Body rules — blank separator, emptiness, line and total length."""

from __future__ import annotations

from typing import Any

from commitcheck.parser.models import ParsedMessage
from commitcheck.rules.builtin.common import (
    empty_check,
    max_line_length_check,
    min_length_check,
    outcome,
    validate_int,
)
from commitcheck.rules.models import Outcome, Rule, RuleId


def _body_leading_blank(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    if parsed.body is None or len(parsed.lines) < 2:
        return True, ""
    return outcome(
        not parsed.lines[1].strip(),
        when,
        "body must have leading blank line",
        "body may not have leading blank line",
    )


def _body_empty(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return empty_check("body", parsed.body, when)


def _body_max_line_length(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return max_line_length_check("body", parsed.body, value)


def _body_min_length(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return min_length_check("body", parsed.body, value)


BODY_LEADING_BLANK = Rule(
    id=RuleId.BODY_LEADING_BLANK,
    description="Body must be separated from the header by a blank line.",
    check=_body_leading_blank,
)

BODY_EMPTY = Rule(
    id=RuleId.BODY_EMPTY,
    description="Body must be empty (always) or present (never).",
    check=_body_empty,
)

BODY_MAX_LINE_LENGTH = Rule(
    id=RuleId.BODY_MAX_LINE_LENGTH,
    description="Body lines must not exceed the configured length (URLs exempt).",
    check=_body_max_line_length,
    default_value=100,
    validate=validate_int,
)

BODY_MIN_LENGTH = Rule(
    id=RuleId.BODY_MIN_LENGTH,
    description="Body must be at least the configured length.",
    check=_body_min_length,
    default_value=0,
    validate=validate_int,
)

ALL_BODY_RULES = [BODY_LEADING_BLANK, BODY_EMPTY, BODY_MAX_LINE_LENGTH, BODY_MIN_LENGTH]
