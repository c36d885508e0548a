"""Text case classification for the ``*-case`` rules."""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, List, Union

_CAMEL_RE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
_PASCAL_RE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
_KEBAB_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
_SNAKE_RE = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")
_LETTER_RE = re.compile(r"[A-Za-z]")


def _is_sentence(text: str) -> bool:
    return text[:1].isupper() and text[1:] == text[1:].lower()


def _is_start(text: str) -> bool:
    words = [w for w in re.split(r"[\s_\-]+", text) if w]
    return bool(words) and all(w[:1].isupper() for w in words if _LETTER_RE.match(w[:1]))


CASES: Dict[str, Callable[[str], bool]] = {
    "lower-case": lambda t: t == t.lower(),
    "upper-case": lambda t: t == t.upper(),
    "camel-case": lambda t: bool(_CAMEL_RE.match(t)),
    "kebab-case": lambda t: bool(_KEBAB_RE.match(t)),
    "pascal-case": lambda t: bool(_PASCAL_RE.match(t)),
    "sentence-case": _is_sentence,
    "snake-case": lambda t: bool(_SNAKE_RE.match(t)),
    "start-case": _is_start,
}


def has_letters(text: str) -> bool:
    return bool(_LETTER_RE.search(text))


def case_names(value: Union[str, Iterable[str], None]) -> List[str]:
    """Normalise a rule value (``"lower-case"`` or a list of cases) to a list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def is_case(text: str, case: str) -> bool:
    """Return True if *text* is written in *case*. Unknown case names raise KeyError."""
    return CASES[case](text)
