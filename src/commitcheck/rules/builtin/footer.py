"""Footer rules — trailers and notes such as BREAKING CHANGE."""

from __future__ import annotations

from typing import Any

from commitcheck.parser.models import ParsedMessage
from commitcheck.rules.builtin.common import (
    empty_check,
    max_line_length_check,
    outcome,
    validate_int,
)
from commitcheck.rules.models import Outcome, Rule, RuleId


def _footer_leading_blank(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    if parsed.footer_start is None:
        return True, ""
    return outcome(
        not parsed.lines[parsed.footer_start - 1].strip(),
        when,
        "footer must have leading blank line",
        "footer may not have leading blank line",
    )


def _footer_empty(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return empty_check("footer", parsed.footer, when)


def _footer_max_line_length(parsed: ParsedMessage, when: str, value: Any) -> Outcome:
    return max_line_length_check("footer", parsed.footer, value)


FOOTER_LEADING_BLANK = Rule(
    id=RuleId.FOOTER_LEADING_BLANK,
    description="Footer must be separated from the body by a blank line.",
    check=_footer_leading_blank,
)

FOOTER_EMPTY = Rule(
    id=RuleId.FOOTER_EMPTY,
    description="Footer must be empty (always) or present (never).",
    check=_footer_empty,
)

FOOTER_MAX_LINE_LENGTH = Rule(
    id=RuleId.FOOTER_MAX_LINE_LENGTH,
    description="Footer lines must not exceed the configured length (URLs exempt).",
    check=_footer_max_line_length,
    default_value=100,
    validate=validate_int,
)

ALL_FOOTER_RULES = [FOOTER_LEADING_BLANK, FOOTER_EMPTY, FOOTER_MAX_LINE_LENGTH]
