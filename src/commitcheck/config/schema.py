"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union

Severity = Literal["off", "warning", "error"]
When = Literal["always", "never"]

SEVERITY_ORDER: dict[str, int] = {
    "off": 0,
    "warning": 1,
    "error": 2,
}

# commitlint-style numeric levels: [0] == off, [1] == warning, [2] == error
_LEVEL_NAMES: dict[int, str] = {v: k for k, v in SEVERITY_ORDER.items()}

WHEN_VALUES = ("always", "never")


class ConfigurationError(Exception):
    """Raised when configuration is malformed, unreadable, or inconsistent."""


def normalise_severity(level: Union[int, str]) -> Severity:
    """Accept ``0/1/2`` or ``off/warning/error`` and return the severity name."""
    if isinstance(level, bool):
        raise ConfigurationError(f"Invalid severity: {level!r}")
    if isinstance(level, int):
        if level not in _LEVEL_NAMES:
            raise ConfigurationError(f"Invalid severity level: {level} (expected 0, 1 or 2)")
        return _LEVEL_NAMES[level]  # type: ignore[return-value]
    if isinstance(level, str) and level in SEVERITY_ORDER:
        return level  # type: ignore[return-value]
    raise ConfigurationError(
        f"Invalid severity: {level!r} (expected off | warning | error or 0 | 1 | 2)"
    )


@dataclass
class MatcherConfig:
    kind: str  # prefix | exact | regex, or a registered kind
    value: str


@dataclass
class IgnoresConfig:
    defaults: bool = True  # merge / revert / fixup! etc.
    matchers: List[MatcherConfig] = field(default_factory=list)


@dataclass
class ParserConfig:
    header_pattern: Optional[str] = None  # None = conventional default
    header_correspondence: Optional[List[str]] = None
    comment_char: Optional[str] = "#"


@dataclass
class OutputConfig:
    format: Literal["terminal", "json", "text"] = "terminal"
    show_summary: bool = True


@dataclass
class CommitCheckConfig:
    extends: List[str] = field(default_factory=lambda: ["conventional"])
    ignores: IgnoresConfig = field(default_factory=IgnoresConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    # rule name -> [severity] | [severity, when] | [severity, when, value]
    rules: Dict[str, List[Any]] = field(default_factory=dict)
    output: OutputConfig = field(default_factory=OutputConfig)
