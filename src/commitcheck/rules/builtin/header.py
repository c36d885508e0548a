"""Header rules — length, trailing full stop, surrounding whitespace."""

from __future__ import annotations

from typing import Any

from commitcheck.parser.models import ParsedMessage
from commitcheck.rules.builtin.common import (
    full_stop_check,
    max_length_check,
    min_length_check,
    outcome,
    validate_int,
    validate_str,
)
from commitcheck.rules.models import Outcome, Rule, RuleId


def _header_max_length(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return max_length_check("header", parsed.header, value)


def _header_min_length(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return min_length_check("header", parsed.header, value)


def _header_full_stop(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return full_stop_check("header", parsed.header, when, value)


def _header_trim(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    header = parsed.header
    return outcome(
        header == header.strip(),
        when,
        "header must not be surrounded by whitespace",
        "header must be surrounded by whitespace",
    )


HEADER_MAX_LENGTH = Rule(
    id=RuleId.HEADER_MAX_LENGTH,
    description="Header must not exceed the configured length.",
    check=_header_max_length,
    default_value=72,
    validate=validate_int,
)

HEADER_MIN_LENGTH = Rule(
    id=RuleId.HEADER_MIN_LENGTH,
    description="Header must be at least the configured length.",
    check=_header_min_length,
    default_value=0,
    validate=validate_int,
)

HEADER_FULL_STOP = Rule(
    id=RuleId.HEADER_FULL_STOP,
    description="Header must (always) or must not (never) end with the full stop character.",
    check=_header_full_stop,
    default_value=".",
    validate=validate_str,
)

HEADER_TRIM = Rule(
    id=RuleId.HEADER_TRIM,
    description="Header must not (always) or must (never) have surrounding whitespace.",
    check=_header_trim,
)

ALL_HEADER_RULES = [HEADER_MAX_LENGTH, HEADER_MIN_LENGTH, HEADER_FULL_STOP, HEADER_TRIM]
