"""Presets — named bundles of rule defaults, built-in or loaded from YAML.

A preset maps rule names to entries in the same shape as the ``[rules]``
config table: ``[severity]``, ``[severity, when]`` or
``[severity, when, value]``.

YAML preset files look like::

    rules:
      header-max-length: [2, always, 72]
      scope-enum: [2, always, [api, parser]]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from commitcheck.config.schema import ConfigurationError

logger = logging.getLogger(__name__)

PresetRules = Dict[str, List[Any]]

PRESETS_DIRNAME = ".commitcheck-presets"

CONVENTIONAL_TYPES = [
    "build",
    "chore",
    "ci",
    "docs",
    "feat",
    "fix",
    "perf",
    "refactor",
    "revert",
    "style",
    "test",
]

CONVENTIONAL: PresetRules = {
    "body-leading-blank": [1, "always"],
    "body-max-line-length": [2, "always", 100],
    "footer-leading-blank": [1, "always"],
    "footer-max-line-length": [2, "always", 100],
    "header-max-length": [2, "always", 100],
    "header-trim": [2, "always"],
    "scope-case": [2, "always", "lower-case"],
    "subject-case": [2, "never", ["sentence-case", "start-case", "pascal-case", "upper-case"]],
    "subject-empty": [2, "never"],
    "subject-full-stop": [2, "never", "."],
    "type-case": [2, "always", "lower-case"],
    "type-empty": [2, "never"],
    "type-enum": [2, "always", CONVENTIONAL_TYPES],
}

BUILTIN_PRESETS: Dict[str, PresetRules] = {
    "conventional": CONVENTIONAL,
    "@commitlint/config-conventional": CONVENTIONAL,
    "none": {},
}


def _load_yaml_preset(path: Path) -> PresetRules:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to load preset {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Preset {path} must be a mapping with a 'rules' key")
    rules = data.get("rules", {}) or {}
    if not isinstance(rules, dict):
        raise ConfigurationError(f"'rules' in preset {path} must be a mapping")
    for name, entry in rules.items():
        if not isinstance(entry, list) or not 1 <= len(entry) <= 3:
            raise ConfigurationError(
                f"Preset {path}: rule '{name}' must be a list of 1 to 3 items, got {entry!r}"
            )
    return {str(name): list(entry) for name, entry in rules.items()}


def resolve_preset(name: str, root: Optional[Path] = None) -> PresetRules:
    """Return the rule entries of preset *name*.

    ``*.yaml`` / ``*.yml`` names are file paths (relative to *root*); other
    names are looked up in the built-ins, then in ``<root>/.commitcheck-presets/``.
    """
    if name.endswith((".yaml", ".yml")):
        path = Path(name)
        if not path.is_absolute() and root is not None:
            path = root / path
        if not path.is_file():
            raise ConfigurationError(f"Preset file not found: {path}")
        logger.debug("Loading preset file %s", path)
        return _load_yaml_preset(path)

    if name in BUILTIN_PRESETS:
        logger.debug("Using built-in preset %s", name)
        return {k: list(v) for k, v in BUILTIN_PRESETS[name].items()}

    if root is not None:
        for suffix in (".yaml", ".yml"):
            candidate = root / PRESETS_DIRNAME / f"{name}{suffix}"
            if candidate.is_file():
                logger.debug("Loading preset %s from %s", name, candidate)
                return _load_yaml_preset(candidate)

    raise ConfigurationError(
        f"Unknown preset: {name!r} (built-in presets: {sorted(BUILTIN_PRESETS)})"
    )
