"""Predicate building blocks shared by the built-in rules.

Every check returns ``(passed, message)``. ``when == "never"`` negates the
condition; the message is phrased for the configured direction.
"""

from __future__ import annotations

from typing import Any, List, Optional

from commitcheck.config.schema import ConfigurationError
from commitcheck.rules.case import CASES, case_names, has_letters, is_case
from commitcheck.rules.models import Outcome


def negated(when: str) -> bool:
    return when == "never"


def outcome(condition: bool, when: str, always_msg: str, never_msg: str) -> Outcome:
    if negated(when):
        return (not condition), never_msg
    return condition, always_msg


def is_empty(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def empty_check(field: str, value: Optional[str], when: str) -> Outcome:
    return outcome(
        is_empty(value),
        when,
        f"{field} must be empty",
        f"{field} may not be empty",
    )


def max_length_check(field: str, value: Optional[str], limit: int) -> Outcome:
    if value is None:
        return True, ""
    return (
        len(value) <= limit,
        f"{field} must not be longer than {limit} characters, current length is {len(value)}",
    )


def min_length_check(field: str, value: Optional[str], limit: int) -> Outcome:
    if value is None:
        return True, ""
    return (
        len(value) >= limit,
        f"{field} must not be shorter than {limit} characters, current length is {len(value)}",
    )


def max_line_length_check(field: str, value: Optional[str], limit: int) -> Outcome:
    if value is None:
        return True, ""
    for line in value.splitlines():
        # long URLs cannot be wrapped
        if len(line) > limit and "://" not in line:
            return False, f"{field}'s lines must not be longer than {limit} characters"
    return True, ""


def full_stop_check(field: str, value: Optional[str], when: str, stop: str) -> Outcome:
    if value is None or not value:
        return True, ""
    return outcome(
        value.endswith(stop),
        when,
        f"{field} must end with full stop",
        f"{field} may not end with full stop",
    )


def enum_check(field: str, value: Optional[str], when: str, allowed: List[str]) -> Outcome:
    if is_empty(value):
        return True, ""
    allowed_text = ", ".join(f"[{a}]" for a in allowed)
    return outcome(
        value in allowed,
        when,
        f"{field} must be one of {allowed_text}",
        f"{field} must not be one of {allowed_text}",
    )


def case_check(field: str, value: Optional[str], when: str, cases: Any) -> Outcome:
    if is_empty(value) or not has_letters(value or ""):
        return True, ""
    names = case_names(cases)
    joined = ", ".join(names)
    return outcome(
        any(is_case(value or "", c) for c in names),
        when,
        f"{field} must be {joined}",
        f"{field} must not be {joined}",
    )


def validate_int(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"Expected a non-negative integer, got {value!r}")


def validate_str(value: Any) -> None:
    if not isinstance(value, str):
        raise ConfigurationError(f"Expected a string, got {value!r}")


def validate_str_list(value: Any) -> None:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"Expected a list of strings, got {value!r}")


def validate_cases(value: Any) -> None:
    if not isinstance(value, (str, list)):
        raise ConfigurationError(f"Expected a case name or list of case names, got {value!r}")
    names = case_names(value)
    unknown = [n for n in names if n not in CASES]
    if not names or unknown:
        raise ConfigurationError(
            f"Unknown case {unknown or value!r}; expected any of {sorted(CASES)}"
        )
