"""Built-in rules — one predicate per RuleId."""

from commitcheck.rules.builtin.body import ALL_BODY_RULES
from commitcheck.rules.builtin.commit_type import ALL_TYPE_RULES
from commitcheck.rules.builtin.footer import ALL_FOOTER_RULES
from commitcheck.rules.builtin.header import ALL_HEADER_RULES
from commitcheck.rules.builtin.scope import ALL_SCOPE_RULES
from commitcheck.rules.builtin.subject import ALL_SUBJECT_RULES
from commitcheck.rules.models import Rule

ALL_BUILTIN_RULES: list[Rule] = [
    *ALL_HEADER_RULES,
    *ALL_TYPE_RULES,
    *ALL_SCOPE_RULES,
    *ALL_SUBJECT_RULES,
    *ALL_BODY_RULES,
    *ALL_FOOTER_RULES,
]

__all__ = ["ALL_BUILTIN_RULES"]
