"""Load and merge configuration from .commitcheck.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from commitcheck.config.schema import (
    CommitCheckConfig,
    ConfigurationError,
    IgnoresConfig,
    MatcherConfig,
    OutputConfig,
    ParserConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".commitcheck.toml"


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigurationError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Failed to parse {path}: {exc}") from exc


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _merge_env_overrides(cfg: CommitCheckConfig) -> None:
    """Apply COMMITCHECK_* environment variable overrides."""
    if val := os.environ.get("COMMITCHECK_FORMAT"):
        if val in ("terminal", "json", "text"):
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("COMMITCHECK_EXTENDS"):
        cfg.extends = _split_csv(val)
    if val := os.environ.get("COMMITCHECK_DISABLE_RULES"):
        from commitcheck.rules.models import RuleId

        known = {r.value for r in RuleId}
        for name in _split_csv(val):
            if name not in known:
                logger.warning("COMMITCHECK_DISABLE_RULES: unknown rule %r ignored", name)
                continue
            cfg.rules[name] = [0]


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigurationError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _build_ignores(data: Dict[str, Any]) -> IgnoresConfig:
    raw = data.get("ignores", {})
    if not isinstance(raw, dict):
        raise ConfigurationError("[ignores] must be a table")
    matchers: List[MatcherConfig] = []
    for entry in raw.get("matchers", []):
        if not isinstance(entry, dict) or "kind" not in entry or "value" not in entry:
            raise ConfigurationError(
                f"Ignore matcher must have 'kind' and 'value': {entry!r}"
            )
        matchers.append(MatcherConfig(kind=str(entry["kind"]), value=str(entry["value"])))
    defaults = raw.get("defaults", True)
    if not isinstance(defaults, bool):
        raise ConfigurationError(f"ignores.defaults must be true or false, got {defaults!r}")
    return IgnoresConfig(defaults=defaults, matchers=matchers)


def _build_rules(data: Dict[str, Any]) -> Dict[str, List[Any]]:
    raw = data.get("rules", {})
    if not isinstance(raw, dict):
        raise ConfigurationError("[rules] must be a table")
    rules: Dict[str, List[Any]] = {}
    for name, setting in raw.items():
        if not isinstance(setting, list) or not 1 <= len(setting) <= 3:
            raise ConfigurationError(
                f"Rule '{name}' must be [severity], [severity, when] or "
                f"[severity, when, value], got {setting!r}"
            )
        rules[name] = list(setting)
    return rules


def _validate(cfg: CommitCheckConfig) -> None:
    if not isinstance(cfg.extends, list) or not all(isinstance(e, str) for e in cfg.extends):
        raise ConfigurationError("'extends' must be a list of preset names")
    corr = cfg.parser.header_correspondence
    if corr is not None and (
        not isinstance(corr, list) or not all(isinstance(c, str) for c in corr)
    ):
        raise ConfigurationError("parser.header_correspondence must be a list of field names")
    for key in ("header_pattern", "comment_char"):
        value = getattr(cfg.parser, key)
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(f"parser.{key} must be a string, got {value!r}")
    if cfg.output.format not in ("terminal", "json", "text"):
        raise ConfigurationError(f"Invalid output format: {cfg.output.format}")
    if not isinstance(cfg.output.show_summary, bool):
        raise ConfigurationError(
            f"output.show_summary must be true or false, got {cfg.output.show_summary!r}"
        )


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> CommitCheckConfig:
    """Load, validate, and return a CommitCheckConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        logger.debug("No %s found under %s, using defaults", CONFIG_FILENAME, root)
        cfg = CommitCheckConfig()
    else:
        logger.debug("Loading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = CommitCheckConfig(
            extends=raw.get("extends", ["conventional"]),
            ignores=_build_ignores(raw),
            parser=_build_section(raw, ParserConfig, "parser"),
            rules=_build_rules(raw),
            output=_build_section(raw, OutputConfig, "output"),
        )

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
