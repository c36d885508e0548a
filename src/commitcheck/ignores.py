"""Ignore filter — named matchers that exempt whole messages from linting.

Matchers are selected by *kind* from configuration instead of being
arbitrary code in the config file:

  - ``prefix``: message starts with the value (``"Merge "``).
  - ``exact``:  stripped message equals the value.
  - ``regex``:  ``re.search`` with MULTILINE against the full message.

Additional kinds can be registered from Python with
``register_matcher_kind(name, factory)``; a factory receives the configured
value and returns a pure ``Callable[[str], bool]``.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Sequence, Tuple

from commitcheck.config.schema import ConfigurationError, IgnoresConfig

IgnorePredicate = Callable[[str], bool]
MatcherFactory = Callable[[str], IgnorePredicate]

# Messages git and hosting platforms generate; not authored by hand.
# (pattern, flags); only the merge line patterns look past the first line
DEFAULT_IGNORE_PATTERNS: Tuple[Tuple[str, int], ...] = (
    (r"^((Merge pull request)|(Merge (.*?) into (.*?)|(Merge branch (.*?)))(?:\r?\n)*$)", re.MULTILINE),
    (r"^(Merge tag (.*?))(?:\r?\n)*$", re.MULTILINE),
    (r"^(R|r)evert (.*)", 0),
    (r"^(amend|fixup|squash)!", 0),
    (r"^(Merged (.*?)(in|into) (.*))", 0),
    (r"^Merge remote-tracking branch(\s*)(.*)", 0),
    (r"^Automatic merge(.*)", 0),
    (r"^Auto-merged (.*?) into (.*)", 0),
)


def prefix_matcher(prefix: str) -> IgnorePredicate:
    def _match(message: str) -> bool:
        return message.startswith(prefix)

    _match.__name__ = f"prefix({prefix!r})"
    return _match


def exact_matcher(text: str) -> IgnorePredicate:
    expected = text.strip()

    def _match(message: str) -> bool:
        return message.strip() == expected

    _match.__name__ = f"exact({text!r})"
    return _match


def regex_matcher(pattern: str, flags: int = re.MULTILINE) -> IgnorePredicate:
    try:
        compiled = re.compile(pattern, flags)
    except re.error as exc:
        raise ConfigurationError(f"Invalid ignore regex {pattern!r}: {exc}") from exc

    def _match(message: str) -> bool:
        return compiled.search(message) is not None

    _match.__name__ = f"regex({pattern!r})"
    return _match


_MATCHER_KINDS: Dict[str, MatcherFactory] = {
    "prefix": prefix_matcher,
    "exact": exact_matcher,
    "regex": regex_matcher,
}


def register_matcher_kind(name: str, factory: MatcherFactory) -> None:
    """Register an extra matcher kind usable as ``kind = "<name>"`` in config."""
    if name in _MATCHER_KINDS:
        raise ValueError(f"Matcher kind already registered: {name}")
    _MATCHER_KINDS[name] = factory


def matcher_kinds() -> List[str]:
    return sorted(_MATCHER_KINDS)


def build_matcher(kind: str, value: str) -> IgnorePredicate:
    factory = _MATCHER_KINDS.get(kind)
    if factory is None:
        raise ConfigurationError(
            f"Unknown ignore matcher kind: {kind!r} (expected one of {matcher_kinds()})"
        )
    return factory(value)


def default_ignores() -> List[IgnorePredicate]:
    return [regex_matcher(p, flags) for p, flags in DEFAULT_IGNORE_PATTERNS]


def build_ignore_predicates(config: IgnoresConfig) -> Tuple[IgnorePredicate, ...]:
    """Config matchers first, then the built-in defaults when enabled."""
    predicates = [build_matcher(m.kind, m.value) for m in config.matchers]
    if config.defaults:
        predicates.extend(default_ignores())
    return tuple(predicates)


def is_ignored(message: str, predicates: Sequence[IgnorePredicate]) -> bool:
    """Return True on the first predicate that matches *message*."""
    return any(predicate(message) for predicate in predicates)
